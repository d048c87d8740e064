"""Entry comparison logic for sync operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .modes import SyncMode
from .scanner import LocalEntry

MTIME_TOLERANCE = 2.0
"""Seconds of modification time difference still treated as equal"""


class SyncAction(str, Enum):
    """Actions that can be taken during sync."""

    COPY = "copy"
    """Copy a file missing from the destination"""

    UPDATE = "update"
    """Overwrite a destination file that differs from the source"""

    CREATE_DIR = "create_dir"
    """Create a directory missing from the destination"""

    DELETE = "delete"
    """Delete an extra destination entry"""

    REPLACE = "replace"
    """Replace a destination entry whose type differs from the source"""

    EXTRA = "extra"
    """Extra destination entry left in place"""

    MISMATCH = "mismatch"
    """Destination entry whose type differs, left in place"""

    SKIP = "skip"
    """No action needed"""


@dataclass
class SyncDecision:
    """Represents a decision about how to sync an entry."""

    action: SyncAction
    """Action to take"""

    reason: str
    """Human-readable reason for this decision"""

    source: Optional[LocalEntry]
    """Source entry (if exists)"""

    destination: Optional[LocalEntry]
    """Destination entry (if exists)"""

    relative_path: str
    """Relative path of the entry"""


def _is_under(path: str, parents: set[str]) -> bool:
    parts = path.split("/")
    for i in range(1, len(parts)):
        if "/".join(parts[:i]) in parents:
            return True
    return False


class FileComparator:
    """Compares source and destination entries to determine sync actions."""

    def __init__(self, sync_mode: SyncMode, copy_subdirectories: bool = True):
        """Initialize file comparator.

        Args:
            sync_mode: Sync mode to use for comparison
            copy_subdirectories: Whether source subdirectories are synced
        """
        self.sync_mode = sync_mode
        self.copy_subdirectories = copy_subdirectories

    def compare(
        self,
        source_entries: dict[str, LocalEntry],
        dest_entries: dict[str, LocalEntry],
    ) -> list[SyncDecision]:
        """Compare source and destination entries.

        Decisions come in sorted path order, so directories precede their
        contents. Entries below a destination directory that is replaced or
        left in place as an extra or mismatch get no decision of their own;
        entries below a deleted directory are deleted one by one.

        Args:
            source_entries: Dictionary mapping relative_path to source entry
            dest_entries: Dictionary mapping relative_path to destination entry

        Returns:
            List of SyncDecision objects
        """
        decisions: list[SyncDecision] = []
        covered: set[str] = set()

        for path in sorted(set(source_entries) | set(dest_entries)):
            if _is_under(path, covered):
                continue

            source = source_entries.get(path)
            dest = dest_entries.get(path)
            decision = self._compare_single(path, source, dest)
            decisions.append(decision)

            if dest is not None and dest.is_dir:
                if decision.action in (
                    SyncAction.EXTRA,
                    SyncAction.REPLACE,
                    SyncAction.MISMATCH,
                ):
                    covered.add(path)

        return decisions

    def _compare_single(
        self,
        path: str,
        source: Optional[LocalEntry],
        dest: Optional[LocalEntry],
    ) -> SyncDecision:
        if source and dest:
            return self._compare_existing(path, source, dest)
        if source:
            return self._handle_source_only(path, source)
        if dest:
            return self._handle_dest_only(path, dest)

        # Should never happen
        return SyncDecision(SyncAction.SKIP, "No entry found", None, None, path)

    def _compare_existing(
        self, path: str, source: LocalEntry, dest: LocalEntry
    ) -> SyncDecision:
        """Compare entries that exist on both sides."""
        if source.is_dir != dest.is_dir:
            if self.sync_mode.replaces_mismatched:
                action = SyncAction.REPLACE
                reason = "Entry type differs, replacing with source"
            else:
                action = SyncAction.MISMATCH
                reason = (
                    f"Entry type differs but sync mode {self.sync_mode.value} keeps it"
                )
            return SyncDecision(action, reason, source, dest, path)

        if source.is_dir:
            return SyncDecision(
                SyncAction.SKIP, "Directory exists", source, dest, path
            )

        if source.size != dest.size:
            return SyncDecision(
                SyncAction.UPDATE,
                f"Size differs ({source.size} vs {dest.size})",
                source,
                dest,
                path,
            )

        if abs(source.mtime - dest.mtime) >= MTIME_TOLERANCE:
            return SyncDecision(
                SyncAction.UPDATE, "Modification time differs", source, dest, path
            )

        return SyncDecision(
            SyncAction.SKIP,
            "Files are identical (same size and mtime)",
            source,
            dest,
            path,
        )

    def _handle_source_only(self, path: str, source: LocalEntry) -> SyncDecision:
        """Handle an entry that only exists in the source."""
        if not source.is_dir:
            return SyncDecision(SyncAction.COPY, "New file", source, None, path)
        if self.copy_subdirectories:
            return SyncDecision(
                SyncAction.CREATE_DIR, "New directory", source, None, path
            )
        return SyncDecision(
            SyncAction.SKIP, "Subdirectories are not copied", source, None, path
        )

    def _handle_dest_only(self, path: str, dest: LocalEntry) -> SyncDecision:
        """Handle an entry that only exists in the destination."""
        if self.sync_mode.allows_delete:
            return SyncDecision(
                SyncAction.DELETE, "Not present in source", None, dest, path
            )
        return SyncDecision(
            SyncAction.EXTRA,
            f"Not present in source but sync mode {self.sync_mode.value} keeps it",
            None,
            dest,
            path,
        )
