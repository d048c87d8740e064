"""Filesystem operations applied by the tree copier."""

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


class SyncOperations:
    """Copy, create and delete operations on the destination tree."""

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy a file, preserving its modification time.

        Args:
            source: Source file
            destination: Destination file path (overwritten if present)
        """
        # Ensure parent directory exists
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
        logger.debug(f"Copied {source} -> {destination}")

    def create_dir(self, path: Path) -> None:
        """Create a directory (and missing parents)."""
        path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created directory {path}")

    def delete(self, path: Path) -> bool:
        """Delete a file or an empty directory.

        A directory that still holds entries (excluded ones) is kept.

        Args:
            path: File or directory to remove

        Returns:
            True if the entry was removed
        """
        if path.is_dir() and not path.is_symlink():
            if any(path.iterdir()):
                logger.debug(f"Keeping non-empty directory {path}")
                return False
            path.rmdir()
        else:
            path.unlink()
        logger.debug(f"Deleted {path}")
        return True

    def remove_tree(self, path: Path) -> None:
        """Delete a file or a whole directory tree."""
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
        logger.debug(f"Removed {path}")

    def replace(self, source: Path, destination: Path) -> None:
        """Replace a destination entry with a source entry of another type.

        A source directory is recreated empty; its contents are copied by
        their own decisions.
        """
        self.remove_tree(destination)
        if source.is_dir():
            self.create_dir(destination)
        else:
            self.copy_file(source, destination)
