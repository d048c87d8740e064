"""Sync engine for r2import - profile to game directory synchronization."""

from .comparator import FileComparator, SyncAction, SyncDecision
from .copier import TreeCopier
from .engine import RunOutcome, SyncEngine
from .exclusions import CONFIG_DIR_TOKEN, ExclusionSet, build_exclusions
from .modes import SyncMode
from .operations import SyncOperations
from .outcome import (
    OperationResult,
    OutcomeCategory,
    Severity,
    classify,
    classify_code,
    describe,
)
from .passes import COMPONENT_DIRS, SyncPass, build_sync_passes, plugin_path
from .pruner import PruneResult, prune_disabled_plugins
from .scanner import DirectoryScanner, LocalEntry

__all__ = [
    "SyncEngine",
    "RunOutcome",
    "SyncMode",
    "SyncPass",
    "build_sync_passes",
    "plugin_path",
    "COMPONENT_DIRS",
    "TreeCopier",
    "SyncOperations",
    "DirectoryScanner",
    "LocalEntry",
    "FileComparator",
    "SyncAction",
    "SyncDecision",
    "ExclusionSet",
    "CONFIG_DIR_TOKEN",
    "build_exclusions",
    "OperationResult",
    "OutcomeCategory",
    "Severity",
    "classify",
    "classify_code",
    "describe",
    "PruneResult",
    "prune_disabled_plugins",
]
