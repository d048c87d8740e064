"""Custom exceptions for r2import."""

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .sync.outcome import OperationResult


class R2ImportError(Exception):
    """Base exception for all r2import errors."""


class ConfigurationError(R2ImportError):
    """Raised when a required path cannot be resolved or is invalid.

    The message tells the user which option to supply.
    """


class ManifestReadError(R2ImportError):
    """Raised when the profile's mods.yml cannot be read or parsed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class SyncOperationFailure(R2ImportError):
    """Raised when a sync pass ends with a fatal result."""

    def __init__(self, result: "OperationResult"):
        self.result = result
        super().__init__(result.message)


class PruneFailure(R2ImportError):
    """Raised when a disabled plugin directory cannot be removed."""

    def __init__(self, path: Path, error: Exception):
        self.path = path
        self.error = error
        super().__init__(f"Could not remove {path}: {error}")
