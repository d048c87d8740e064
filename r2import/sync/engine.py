"""Core sync engine for importing a profile into the game directory."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from ..exceptions import PruneFailure, SyncOperationFailure
from ..output import OutputFormatter
from .copier import TreeCopier
from .exclusions import ExclusionSet
from .outcome import OperationResult, Severity, classify
from .passes import SyncPass, build_sync_passes
from .pruner import prune_disabled_plugins

logger = logging.getLogger(__name__)

UNKNOWN_CODE = -1
"""Status recorded when the copier raises instead of returning a code"""


@dataclass
class RunOutcome:
    """Aggregate result of an import run."""

    results: list[OperationResult] = field(default_factory=list)
    pruned_paths: list[Path] = field(default_factory=list)
    prune_failures: list[PruneFailure] = field(default_factory=list)
    fatal: bool = False

    @property
    def exit_code(self) -> int:
        return 1 if self.fatal else 0

    @property
    def max_code(self) -> int:
        """Highest effective status code over all passes that ran."""
        return max((r.effective_code for r in self.results), default=0)

    def to_dict(self) -> dict:
        return {
            "results": [r.to_dict() for r in self.results],
            "pruned": [str(p) for p in self.pruned_paths],
            "prune_failures": [str(f) for f in self.prune_failures],
            "fatal": self.fatal,
            "exit_code": self.exit_code,
        }


class SyncEngine:
    """Runs the sync passes of an import and prunes disabled plugins."""

    def __init__(
        self,
        copier: Optional[TreeCopier] = None,
        output: Optional[OutputFormatter] = None,
        dry_run: bool = False,
    ):
        """Initialize sync engine.

        Args:
            copier: Tree copier used for every pass
            output: Output formatter for displaying progress/status
            dry_run: If True, only show what would be done
        """
        self.copier = copier or TreeCopier()
        self.output = output or OutputFormatter()
        self.dry_run = dry_run

    def run_pass(self, sync_pass: SyncPass) -> OperationResult:
        """Run one sync pass and classify its status code.

        Args:
            sync_pass: Pass to run

        Returns:
            Classified result; a copier error counts as an unknown failure
        """
        logger.debug(
            f"Pass {sync_pass.name}: {sync_pass.source} -> {sync_pass.destination} "
            f"({sync_pass.mode.value}, exclusions={list(sync_pass.exclusions)})"
        )
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
            disable=self.output.quiet or self.output.json_output,
        ) as progress:
            progress.add_task(f"Syncing {sync_pass.name}...", total=None)
            try:
                code = self.copier.copy_tree(
                    sync_pass.source,
                    sync_pass.destination,
                    sync_pass.mode,
                    exclusions=sync_pass.exclusions,
                    copy_subdirectories=sync_pass.copy_subdirectories,
                    dry_run=self.dry_run,
                )
            except OSError as e:
                logger.error(f"Pass {sync_pass.name} failed: {e}")
                code = UNKNOWN_CODE

        result = classify(sync_pass, code)
        logger.debug(f"Pass {sync_pass.name}: code {code} -> {result.category.value}")
        return result

    def _report(self, result: OperationResult) -> None:
        if result.severity == Severity.FATAL:
            self.output.error(result.message)
        elif result.severity == Severity.WARNING:
            self.output.warning(result.message)
        else:
            self.output.info(result.message)

    def _run_passes(self, passes: Sequence[SyncPass], outcome: RunOutcome) -> None:
        for sync_pass in passes:
            result = self.run_pass(sync_pass)
            outcome.results.append(result)
            self._report(result)
            if result.is_fatal:
                raise SyncOperationFailure(result)

    def run(
        self,
        source_root: Path,
        dest_root: Path,
        exclusions: ExclusionSet = (),
        disabled_names: Sequence[str] = (),
        profile_name: str = "Default",
    ) -> RunOutcome:
        """Import a profile directory into the game directory.

        Passes run strictly in order. The first fatal result stops the run:
        later passes and pruning are skipped and the outcome is fatal.

        Args:
            source_root: Profile directory
            dest_root: Game installation directory
            exclusions: Exclusion tokens for the BepInEx mirror
            disabled_names: Disabled package names to prune
            profile_name: Profile name for the summary message

        Returns:
            RunOutcome with per-pass results and pruned paths
        """
        outcome = RunOutcome()
        passes = build_sync_passes(source_root, dest_root, exclusions)

        if self.dry_run:
            self.output.info("Dry run: No changes will be made")

        try:
            self._run_passes(passes, outcome)
        except SyncOperationFailure as e:
            logger.debug(f"Stopping import after fatal pass {e.result.sync_pass.name}")
            outcome.fatal = True
            return outcome

        pruned = prune_disabled_plugins(
            dest_root, disabled_names, dry_run=self.dry_run, output=self.output
        )
        outcome.pruned_paths = pruned.removed
        outcome.prune_failures = pruned.failures

        self._display_summary(outcome, dest_root, profile_name)
        return outcome

    def _display_summary(
        self, outcome: RunOutcome, dest_root: Path, profile_name: str
    ) -> None:
        max_code = outcome.max_code
        if max_code == 0 and not outcome.pruned_paths:
            self.output.success(
                f'The files and folders already exist in "{dest_root}", '
                "the import was skipped."
            )
        elif self.dry_run:
            self.output.info(f"Dry run of {profile_name} profile import complete.")
        elif max_code <= 1:
            self.output.success(f"Imported {profile_name} profile successfully.")
        else:
            self.output.warning(f"Imported {profile_name} profile with warnings.")

