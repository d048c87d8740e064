"""Removal of disabled plugin directories left in the game installation."""

import logging
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..exceptions import PruneFailure
from ..output import OutputFormatter
from .passes import BEPINEX_DIR, PLUGINS_DIR, plugin_path

logger = logging.getLogger(__name__)


@dataclass
class PruneResult:
    """Outcome of a prune run."""

    removed: list[Path] = field(default_factory=list)
    """Plugin directories removed (or that would be removed in a dry run)"""

    failures: list[PruneFailure] = field(default_factory=list)
    """Directories that could not be removed"""


def _report_failure(
    result: PruneResult, failure: PruneFailure, output: Optional[OutputFormatter]
) -> None:
    logger.warning(str(failure))
    if output:
        output.warning(str(failure))
    result.failures.append(failure)


def prune_disabled_plugins(
    dest_root: Path,
    excluded_names: Iterable[str],
    dry_run: bool = False,
    output: Optional[OutputFormatter] = None,
) -> PruneResult:
    """Delete ``BepInEx/plugins/<name>`` for every disabled package.

    Each name is handled independently: a failure is reported and
    the loop carries on. A name that does not resolve to a directory
    directly inside BepInEx/plugins is never removed.

    Args:
        dest_root: Game installation directory
        excluded_names: Names of disabled packages
        dry_run: Only report what would be removed
        output: Output formatter for progress messages

    Returns:
        PruneResult with removed paths and failures
    """
    result = PruneResult()

    if not dest_root.is_dir():
        logger.debug(f"Nothing to prune, {dest_root} does not exist")
        return result

    plugins_dir = (dest_root / BEPINEX_DIR / PLUGINS_DIR).resolve()

    for name in excluded_names:
        path = plugin_path(dest_root, name)
        if not path.is_dir():
            continue

        if path.resolve().parent != plugins_dir:
            error = ValueError("not a plugin directory")
            _report_failure(result, PruneFailure(path, error), output)
            continue

        if dry_run:
            if output:
                output.info(f"Would remove disabled plugin {path}")
            result.removed.append(path)
            continue

        if output:
            output.info(f"Removing disabled plugin {path}")
        try:
            shutil.rmtree(path)
        except OSError as e:
            _report_failure(result, PruneFailure(path, e), output)
            continue

        logger.debug(f"Pruned {path}")
        result.removed.append(path)

    return result
