"""Detecting whether the game is running."""

import logging
from collections.abc import Iterable

import psutil

logger = logging.getLogger(__name__)

VALHEIM_PROCESS_NAMES = ("valheim",)


def _normalize(name: str) -> str:
    name = name.lower()
    if name.endswith(".exe"):
        name = name[: -len(".exe")]
    return name


def is_process_running(names: Iterable[str] = VALHEIM_PROCESS_NAMES) -> bool:
    """Check whether a process with one of the given names is running.

    Names are compared case-insensitively, with or without an ``.exe``
    suffix.

    Args:
        names: Process names to look for

    Returns:
        True if at least one matching process exists
    """
    wanted = {_normalize(name) for name in names}
    for proc in psutil.process_iter(["name"]):
        proc_name = proc.info.get("name")
        if proc_name and _normalize(proc_name) in wanted:
            logger.debug(f"Found running process {proc_name} (pid {proc.pid})")
            return True
    return False
