"""r2import - CLI tool for importing r2modman profiles into Valheim."""

from .exceptions import (
    ConfigurationError,
    ManifestReadError,
    PruneFailure,
    R2ImportError,
    SyncOperationFailure,
)
from .manifest import PackageRecord, disabled_package_names, load_packages
from .paths import resolve_path
from .sync import RunOutcome, SyncEngine, build_exclusions

__all__ = [
    "SyncEngine",
    "RunOutcome",
    "PackageRecord",
    "load_packages",
    "disabled_package_names",
    "build_exclusions",
    "resolve_path",
    "R2ImportError",
    "ConfigurationError",
    "ManifestReadError",
    "SyncOperationFailure",
    "PruneFailure",
]
