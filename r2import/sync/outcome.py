"""Classification of copy status codes into user-facing outcomes."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path
from typing import Optional

from .passes import SyncPass


class OutcomeCategory(str, Enum):
    """What a copy operation did, derived from its status code."""

    NO_CHANGE_NEEDED = "no_change_needed"
    COPIED_SUCCESSFULLY = "copied_successfully"
    EXTRA_FILES_PRESENT_NO_COPY = "extra_files_present_no_copy"
    PARTIAL_COPY_EXTRA_FILES = "partial_copy_extra_files"
    PARTIAL_COPY_MISMATCH = "partial_copy_mismatch"
    NO_COPY_CONFLICTS = "no_copy_conflicts"
    MIXED_COPY_AND_MISMATCH = "mixed_copy_and_mismatch"
    COPY_FAILURES = "copy_failures"
    UNKNOWN_FAILURE = "unknown_failure"


class Severity(IntEnum):
    """How a result is reported and whether it stops the import."""

    INFO = 0
    WARNING = 1
    FATAL = 2


# Status code -> category. Code 4 (mismatch only) is deliberately absent.
CODE_CATEGORIES: dict[int, OutcomeCategory] = {
    0: OutcomeCategory.NO_CHANGE_NEEDED,
    1: OutcomeCategory.COPIED_SUCCESSFULLY,
    2: OutcomeCategory.EXTRA_FILES_PRESENT_NO_COPY,
    3: OutcomeCategory.PARTIAL_COPY_EXTRA_FILES,
    5: OutcomeCategory.PARTIAL_COPY_MISMATCH,
    6: OutcomeCategory.NO_COPY_CONFLICTS,
    7: OutcomeCategory.MIXED_COPY_AND_MISMATCH,
    8: OutcomeCategory.COPY_FAILURES,
}

CATEGORY_SEVERITY: dict[OutcomeCategory, Severity] = {
    OutcomeCategory.NO_CHANGE_NEEDED: Severity.INFO,
    OutcomeCategory.COPIED_SUCCESSFULLY: Severity.INFO,
    OutcomeCategory.EXTRA_FILES_PRESENT_NO_COPY: Severity.WARNING,
    OutcomeCategory.PARTIAL_COPY_EXTRA_FILES: Severity.WARNING,
    OutcomeCategory.PARTIAL_COPY_MISMATCH: Severity.WARNING,
    OutcomeCategory.NO_COPY_CONFLICTS: Severity.WARNING,
    OutcomeCategory.MIXED_COPY_AND_MISMATCH: Severity.FATAL,
    OutcomeCategory.COPY_FAILURES: Severity.FATAL,
    OutcomeCategory.UNKNOWN_FAILURE: Severity.FATAL,
}

ROOT_EXPECTED_EXTRA_CODE = 2
"""Root-pass status code classified as no change needed (extras only)"""


def describe(category: OutcomeCategory, path: Optional[Path] = None) -> str:
    """Build the one-line message for an outcome.

    Args:
        category: Outcome category
        path: Destination directory of the operation

    Returns:
        Human-readable description
    """
    where = f'"{path}"' if path else "the destination directory"

    messages = {
        OutcomeCategory.NO_CHANGE_NEEDED: (
            f"The files already exist in {where}, the copy operation was skipped."
        ),
        OutcomeCategory.COPIED_SUCCESSFULLY: (
            f"All files were copied successfully to {where}."
        ),
        OutcomeCategory.EXTRA_FILES_PRESENT_NO_COPY: (
            f"There are some additional files in {where} that aren't present "
            "in the source directory. No files were copied."
        ),
        OutcomeCategory.PARTIAL_COPY_EXTRA_FILES: (
            f"Some files were copied. Additional files were present in {where}. "
            "No failure was met."
        ),
        OutcomeCategory.PARTIAL_COPY_MISMATCH: (
            f"Some files were copied. Some files were mismatched in {where}. "
            "No failure was met."
        ),
        OutcomeCategory.NO_COPY_CONFLICTS: (
            "Additional files and mismatched files exist. No files were copied "
            f"and no failures were met. The files already exist in {where}."
        ),
        OutcomeCategory.MIXED_COPY_AND_MISMATCH: (
            "Files were copied, a file mismatch was present, and additional "
            f"files were present in {where}."
        ),
        OutcomeCategory.COPY_FAILURES: f"Several files didn't copy in {where}.",
        OutcomeCategory.UNKNOWN_FAILURE: (
            f"At least one failure occurred during the copy operation in {where}."
        ),
    }
    return messages[category]


@dataclass(frozen=True)
class OperationResult:
    """Outcome of one sync pass."""

    sync_pass: SyncPass
    raw_code: int
    category: OutcomeCategory
    severity: Severity

    @property
    def is_fatal(self) -> bool:
        return self.severity >= Severity.FATAL

    @property
    def effective_code(self) -> int:
        """Status code used for the run summary.

        The extras bit of the root pass is not counted.
        """
        if self.category == OutcomeCategory.NO_CHANGE_NEEDED:
            return 0
        if self.sync_pass.is_root and self.raw_code > 0:
            return self.raw_code & ~ROOT_EXPECTED_EXTRA_CODE
        return self.raw_code

    @property
    def message(self) -> str:
        return describe(self.category, self.sync_pass.destination)

    def to_dict(self) -> dict:
        return {
            "pass": self.sync_pass.name,
            "destination": str(self.sync_pass.destination),
            "code": self.raw_code,
            "category": self.category.value,
            "severity": self.severity.name.lower(),
        }


def classify_code(raw_code: int, is_root: bool = False) -> OutcomeCategory:
    """Map a copy status code to its outcome category.

    Args:
        raw_code: Status code returned by the copier
        is_root: Whether the code comes from the root profile pass

    Returns:
        Outcome category; unknown codes map to UNKNOWN_FAILURE
    """
    if is_root and raw_code == ROOT_EXPECTED_EXTRA_CODE:
        return OutcomeCategory.NO_CHANGE_NEEDED
    return CODE_CATEGORIES.get(raw_code, OutcomeCategory.UNKNOWN_FAILURE)


def classify(sync_pass: SyncPass, raw_code: int) -> OperationResult:
    """Classify the status code of a finished sync pass."""
    category = classify_code(raw_code, is_root=sync_pass.is_root)
    return OperationResult(
        sync_pass=sync_pass,
        raw_code=raw_code,
        category=category,
        severity=CATEGORY_SEVERITY[category],
    )
