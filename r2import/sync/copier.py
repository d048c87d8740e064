"""Mirroring and merging directory trees.

``TreeCopier.copy_tree`` reports its work as a bitmask status code using the
same convention as robocopy, so results can be classified the same way
whichever copy mechanism produced them:

* ``1`` one or more entries were copied
* ``2`` extra entries were present in the destination
* ``4`` mismatched entries (file on one side, directory on the other)
* ``8`` some entries could not be copied or deleted
* ``16`` fatal error, nothing was copied
"""

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Optional, cast

from .comparator import FileComparator, SyncAction, SyncDecision
from .modes import SyncMode
from .operations import SyncOperations
from .scanner import DirectoryScanner, LocalEntry

logger = logging.getLogger(__name__)

COPIED = 1
EXTRA = 2
MISMATCHED = 4
FAILED = 8
FATAL = 16


def _create_empty_stats() -> dict[str, int]:
    return {
        "copied": 0,
        "updated": 0,
        "created_dirs": 0,
        "deleted": 0,
        "extra": 0,
        "mismatched": 0,
        "failed": 0,
        "skipped": 0,
    }


class TreeCopier:
    """Synchronizes a destination directory tree from a source tree."""

    def __init__(self, operations: Optional[SyncOperations] = None):
        self.operations = operations or SyncOperations()
        self.last_stats: dict[str, int] = _create_empty_stats()

    def copy_tree(
        self,
        source: Path,
        destination: Path,
        mode: SyncMode,
        exclusions: Sequence[str] = (),
        copy_subdirectories: bool = True,
        dry_run: bool = False,
    ) -> int:
        """Bring ``destination`` in line with ``source``.

        Merge mode only adds and updates. Mirror mode also deletes extra
        entries and replaces mismatched ones. Entries whose name is in
        ``exclusions`` are never read, written or deleted on either side.

        Args:
            source: Source directory
            destination: Destination directory (created if missing)
            mode: Mirror or merge
            exclusions: Bare file or directory names to leave alone
            copy_subdirectories: Sync whole tree, or top-level files only
            dry_run: Plan only, change nothing

        Returns:
            Status code bitmask (see module docstring)
        """
        self.last_stats = _create_empty_stats()

        if not source.is_dir():
            logger.error(f"Source directory does not exist: {source}")
            return FATAL

        source_scanner = DirectoryScanner(excluded_names=exclusions)
        source_entries = source_scanner.scan(source, recursive=copy_subdirectories)

        dest_scanner = DirectoryScanner(excluded_names=exclusions)
        if destination.is_dir():
            dest_entries = dest_scanner.scan(destination, recursive=copy_subdirectories)
        elif destination.exists():
            logger.error(f"Destination is not a directory: {destination}")
            return FATAL
        else:
            dest_entries = []
            if not dry_run:
                try:
                    self.operations.create_dir(destination)
                except OSError as e:
                    logger.error(f"Cannot create {destination}: {e}")
                    return FATAL

        comparator = FileComparator(mode, copy_subdirectories=copy_subdirectories)
        decisions = comparator.compare(
            {e.relative_path: e for e in source_entries},
            {e.relative_path: e for e in dest_entries},
        )

        # Deletions run deepest first so directories are empty when reached
        deletions = [d for d in decisions if d.action == SyncAction.DELETE]
        others = [d for d in decisions if d.action != SyncAction.DELETE]

        code = 0
        for decision in others + deletions[::-1]:
            code |= self._apply(
                decision, destination, dry_run, copy_subdirectories, exclusions
            )

        scan_errors = len(source_scanner.errors) + len(dest_scanner.errors)
        if scan_errors:
            self.last_stats["failed"] += scan_errors
            code |= FAILED

        logger.debug(
            f"{mode.value} {source} -> {destination}: code {code}, {self.last_stats}"
        )
        return code

    def _apply(
        self,
        decision: SyncDecision,
        destination: Path,
        dry_run: bool,
        recursive: bool,
        exclusions: Sequence[str],
    ) -> int:
        """Execute one decision and return its status bits."""
        action = decision.action
        target = destination / decision.relative_path
        stats = self.last_stats

        if action == SyncAction.SKIP:
            stats["skipped"] += 1
            return 0
        if action == SyncAction.EXTRA:
            stats["extra"] += 1
            return EXTRA
        if action == SyncAction.MISMATCH:
            stats["mismatched"] += 1
            return MISMATCHED

        removed = True
        if dry_run:
            logger.info(f"[dry run] {action.value}: {decision.relative_path}")
        else:
            try:
                removed = self._execute(decision, target, recursive, exclusions)
            except OSError as e:
                logger.warning(f"Failed to {action.value} {target}: {e}")
                stats["failed"] += 1
                return FAILED

        if action == SyncAction.COPY:
            stats["copied"] += 1
            return COPIED
        if action == SyncAction.UPDATE:
            stats["updated"] += 1
            return COPIED
        if action == SyncAction.CREATE_DIR:
            stats["created_dirs"] += 1
            return COPIED
        if action == SyncAction.DELETE:
            if removed:
                stats["deleted"] += 1
            else:
                stats["extra"] += 1
            return EXTRA
        # REPLACE
        stats["mismatched"] += 1
        if not removed:
            return MISMATCHED
        return MISMATCHED | COPIED

    def _execute(
        self,
        decision: SyncDecision,
        target: Path,
        recursive: bool,
        exclusions: Sequence[str],
    ) -> bool:
        """Perform a decision on disk; False if a destination entry was kept."""
        action = decision.action
        if action in (SyncAction.COPY, SyncAction.UPDATE):
            source = cast(LocalEntry, decision.source)
            self.operations.copy_file(source.path, target)
        elif action == SyncAction.CREATE_DIR:
            self.operations.create_dir(target)
        elif action == SyncAction.DELETE:
            if not recursive and decision.destination and decision.destination.is_dir:
                # contents were never scanned
                self.operations.remove_tree(target)
            else:
                return self.operations.delete(target)
        elif action == SyncAction.REPLACE:
            source = cast(LocalEntry, decision.source)
            if source.is_dir:
                self.operations.replace(source.path, target)
            elif self._clear_dir(target, exclusions):
                self.operations.copy_file(source.path, target)
            else:
                return False
        return True

    def _clear_dir(self, directory: Path, exclusions: Sequence[str]) -> bool:
        """Empty a destination directory entry by entry, deepest first.

        Excluded entries are left in place, and so is every directory
        holding them.

        Returns:
            True if the directory itself was removed
        """
        if directory.is_symlink() or not directory.is_dir():
            self.operations.remove_tree(directory)
            return True
        scanner = DirectoryScanner(excluded_names=exclusions)
        for entry in reversed(scanner.scan(directory)):
            self.operations.delete(entry.path)
        return self.operations.delete(directory)
