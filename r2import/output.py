"""Console output formatting for r2import."""

import json
from typing import Any, Optional

from rich.console import Console


class OutputFormatter:
    """Writes user-facing messages to the console.

    Informational output goes to stdout, errors go to stderr. In quiet mode
    only warnings and errors are shown. In JSON mode human-readable output is
    suppressed and the caller emits a single JSON document instead.
    """

    def __init__(
        self,
        json_output: bool = False,
        quiet: bool = False,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ):
        self.json_output = json_output
        self.quiet = quiet
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)

    def _silent(self) -> bool:
        return self.quiet or self.json_output

    def info(self, message: str) -> None:
        if self._silent():
            return
        self.console.print(message, markup=False, soft_wrap=True)

    def success(self, message: str) -> None:
        if self._silent():
            return
        self.console.print(message, style="green", markup=False, soft_wrap=True)

    def warning(self, message: str) -> None:
        if self.json_output:
            return
        self.console.print(message, style="yellow", markup=False, soft_wrap=True)

    def error(self, message: str) -> None:
        """Print an error message to stderr (shown even in quiet/JSON mode)."""
        self.error_console.print(
            message, style="bold red", markup=False, soft_wrap=True
        )

    def output_json(self, data: Any) -> None:
        """Print data as JSON to stdout."""
        self.console.print_json(json.dumps(data))
