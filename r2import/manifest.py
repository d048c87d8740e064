"""Reading the package list from a profile's mods.yml."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .exceptions import ManifestReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageRecord:
    """One mod entry declared in mods.yml."""

    name: str
    """Package name, also the plugin directory name under BepInEx/plugins"""

    enabled: Optional[bool] = None
    """Enabled flag; None when the manifest omits it"""

    @property
    def disabled(self) -> bool:
        """Whether the package is explicitly disabled."""
        return self.enabled is False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PackageRecord":
        """Create a PackageRecord from a manifest entry.

        Unknown keys are ignored.

        Raises:
            ValueError: If the entry has no string name or a non-boolean
                enabled flag
        """
        name = data.get("name")
        if not isinstance(name, str):
            raise ValueError(f"package entry has no name: {data!r}")

        enabled = data.get("enabled")
        if enabled is not None and not isinstance(enabled, bool):
            raise ValueError(f"package {name!r} has invalid enabled flag: {enabled!r}")

        return cls(name=name, enabled=enabled)


def load_packages(path: Union[str, Path]) -> list[PackageRecord]:
    """Load the package records declared in a mods.yml file.

    Null entries are skipped.

    Args:
        path: Path to mods.yml

    Returns:
        Package records in manifest order

    Raises:
        ManifestReadError: If the file is missing, unreadable, not valid YAML,
            or not a list of package entries
    """
    path = Path(path)

    if not path.is_file():
        raise ManifestReadError("Manifest file does not exist", path)

    try:
        with path.open("r", encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ManifestReadError(f"Invalid YAML ({e})", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestReadError(f"Could not read manifest ({e})", path) from e

    # safe_load returns None for empty files
    if content is None:
        return []
    if not isinstance(content, list):
        raise ManifestReadError("Manifest is not a list of packages", path)

    packages: list[PackageRecord] = []
    for index, entry in enumerate(content):
        if entry is None:
            continue
        if not isinstance(entry, dict):
            raise ManifestReadError(f"Entry {index} is not a mapping", path)
        try:
            packages.append(PackageRecord.from_dict(entry))
        except ValueError as e:
            raise ManifestReadError(f"Entry {index}: {e}", path) from e

    logger.debug(f"Loaded {len(packages)} package(s) from {path}")
    return packages


def disabled_package_names(packages: list[PackageRecord]) -> list[str]:
    """Names of explicitly disabled packages, in manifest order."""
    return [package.name for package in packages if package.disabled]
