"""Building the set of directory names excluded from the BepInEx mirror."""

import logging
from collections.abc import Iterable

from ..exceptions import ManifestReadError
from ..manifest import PackageRecord

logger = logging.getLogger(__name__)

CONFIG_DIR_TOKEN = "config"
"""BepInEx configuration directory, excluded when configs are preserved"""

ExclusionSet = tuple[str, ...]


def _check_token(name: str) -> str:
    if not name or not name.strip():
        raise ManifestReadError(f"Disabled package has an empty name: {name!r}")
    if "/" in name or "\\" in name:
        raise ManifestReadError(
            f"Disabled package name contains a path separator: {name!r}"
        )
    if name in (".", ".."):
        raise ManifestReadError(
            f"Disabled package name is not a directory name: {name!r}"
        )
    return name


def build_exclusions(
    packages: Iterable[PackageRecord], preserve_config: bool = False
) -> ExclusionSet:
    """Build the exclusion tokens for a run.

    The configuration token comes first when ``preserve_config`` is set,
    followed by the name of every disabled package in manifest order.
    Packages that are enabled or have no enabled flag are never excluded.
    Duplicate names are kept.

    Args:
        packages: Package records from the manifest
        preserve_config: Keep the destination's BepInEx/config directory

    Returns:
        Tuple of bare directory names

    Raises:
        ManifestReadError: If a disabled package name is not a usable
            directory name

    Examples:
        >>> build_exclusions([PackageRecord("X", False), PackageRecord("Y", True)])
        ('X',)
    """
    tokens: list[str] = []
    if preserve_config:
        tokens.append(CONFIG_DIR_TOKEN)

    for package in packages:
        if package.disabled:
            tokens.append(_check_token(package.name))

    logger.debug(f"Exclusions: {tokens}")
    return tuple(tokens)
