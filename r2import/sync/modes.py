"""Sync modes for directory synchronization."""

from enum import Enum


class SyncMode(str, Enum):
    """How a destination tree is brought in line with its source."""

    MIRROR = "mirror"
    """Destination becomes an exact copy of source, extras are deleted"""

    MERGE = "merge"
    """Missing or changed files are copied, nothing is deleted"""

    @property
    def allows_delete(self) -> bool:
        """Whether extra destination entries are deleted."""
        return self == SyncMode.MIRROR

    @property
    def replaces_mismatched(self) -> bool:
        """Whether an entry that is a file on one side and a directory on the
        other is replaced with the source entry."""
        return self == SyncMode.MIRROR
