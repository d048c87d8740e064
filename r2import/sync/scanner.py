"""Directory scanning utilities for sync operations."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class LocalEntry:
    """Represents a file or directory found while scanning."""

    path: Path
    """Absolute path to the entry"""

    relative_path: str
    """Relative path (using forward slashes for cross-platform compatibility)"""

    is_dir: bool
    """Whether the entry is a directory"""

    size: int = 0
    """File size in bytes (0 for directories)"""

    mtime: float = 0.0
    """Last modification time (Unix timestamp)"""

    @classmethod
    def from_path(cls, path: Path, base_path: Path) -> "LocalEntry":
        """Create a LocalEntry from a path.

        Args:
            path: Absolute path to the file or directory
            base_path: Base path for calculating relative paths

        Returns:
            LocalEntry instance
        """
        # Use as_posix() to ensure forward slashes on all platforms
        relative_path = path.relative_to(base_path).as_posix()
        if path.is_dir():
            return cls(path=path, relative_path=relative_path, is_dir=True)

        stat = path.stat()
        return cls(
            path=path,
            relative_path=relative_path,
            is_dir=False,
            size=stat.st_size,
            mtime=stat.st_mtime,
        )


class DirectoryScanner:
    """Scans directory trees, skipping excluded names.

    An entry whose name is in ``excluded_names`` is skipped at any depth,
    whether it is a file or a directory, and excluded directories are not
    descended into.

    Examples:
        >>> scanner = DirectoryScanner(excluded_names=["config"])
        >>> entries = scanner.scan(Path("/game/BepInEx"))
        >>> # nothing below BepInEx/config is returned
    """

    def __init__(self, excluded_names: Optional[Iterable[str]] = None):
        """Initialize directory scanner.

        Args:
            excluded_names: Bare file or directory names to skip
        """
        self.excluded_names = frozenset(excluded_names or ())
        self.errors: list[tuple[Path, OSError]] = []

    def is_excluded(self, path: Path) -> bool:
        """Check if a path's name is excluded."""
        return path.name in self.excluded_names

    def scan(
        self,
        directory: Path,
        recursive: bool = True,
        base_path: Optional[Path] = None,
    ) -> list[LocalEntry]:
        """Scan a directory.

        Subdirectories are always listed as entries; their contents are only
        scanned when ``recursive`` is set. Entries that cannot be read are
        recorded in ``errors`` and skipped.

        Args:
            directory: Directory to scan
            recursive: Whether to descend into subdirectories
            base_path: Base path for calculating relative paths
                (defaults to directory)

        Returns:
            List of LocalEntry objects, parents before their children
        """
        if base_path is None:
            base_path = directory

        entries: list[LocalEntry] = []

        try:
            items = sorted(directory.iterdir())
        except OSError as e:
            logger.warning(f"Cannot read directory {directory}: {e}")
            self.errors.append((directory, e))
            return entries

        for item in items:
            if self.is_excluded(item):
                logger.debug(f"Excluded: {item}")
                continue

            try:
                entry = LocalEntry.from_path(item, base_path)
            except OSError as e:
                logger.warning(f"Cannot read {item}: {e}")
                self.errors.append((item, e))
                continue

            entries.append(entry)
            if entry.is_dir and recursive and not item.is_symlink():
                entries.extend(self.scan(item, recursive=True, base_path=base_path))

        return entries
