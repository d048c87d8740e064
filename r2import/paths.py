"""Locating the r2modman, profile and Valheim directories."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Optional, Union

from .config import Config, config

logger = logging.getLogger(__name__)

VALHEIM_EXECUTABLE = "valheim.exe"
VALHEIM_DATA_DIR = "valheim_Data"
R2MODMAN_GAME_DIR = "Valheim"
PROFILES_DIR = "profiles"
MANIFEST_FILE_NAME = "mods.yml"
R2MODMAN_DIR_NAME = "r2modmanPlus-local"
STEAM_VALHEIM_SUBPATH = Path("Steam", "steamapps", "common", "Valheim")

PathLike = Union[str, Path]


def resolve_path(
    user_path: Optional[PathLike],
    candidates: Callable[[], list[Path]],
    validate: Callable[[Path], bool],
) -> Optional[Path]:
    """Find the first usable directory.

    If ``user_path`` is given it is the only candidate tested and
    ``candidates`` is never called. Otherwise the candidate list is tried in
    order.

    Args:
        user_path: Path supplied by the user (None or "" when absent)
        candidates: Function returning default locations to try
        validate: Predicate accepting a usable directory

    Returns:
        First candidate accepted by ``validate``, or None if none is

    Examples:
        >>> resolve_path("", lambda: [Path("a"), Path("b")], lambda p: p.name == "b")
        PosixPath('b')
    """
    if user_path:
        test_paths = [Path(user_path)]
    else:
        test_paths = candidates()

    for path in test_paths:
        if validate(path):
            logger.debug(f"Resolved path: {path}")
            return path
        logger.debug(f"Rejected candidate path: {path}")

    return None


def _is_non_empty_dir(path: Path) -> bool:
    if not path.is_dir():
        return False
    return any(path.iterdir())


def validate_valheim_path(path: Optional[PathLike]) -> bool:
    """Check that a path is a Valheim installation (executable + data)."""
    if not path:
        return False
    path = Path(path)
    if not path.is_dir():
        return False
    return (path / VALHEIM_EXECUTABLE).is_file() and _is_non_empty_dir(
        path / VALHEIM_DATA_DIR
    )


def validate_r2modman_path(path: Optional[PathLike]) -> bool:
    """Check that a path is an r2modman data directory with Valheim profiles."""
    if not path:
        return False
    path = Path(path)
    if not path.is_dir():
        return False
    return _is_non_empty_dir(path / R2MODMAN_GAME_DIR)


def validate_profile_path(path: Optional[PathLike]) -> bool:
    """Check that a path is a profile directory containing mods.yml."""
    if not path:
        return False
    path = Path(path)
    if not path.is_dir():
        return False
    return (path / MANIFEST_FILE_NAME).is_file()


def profile_path(r2modman_root: PathLike, name: str) -> Path:
    """Build the directory of a named profile under the r2modman root."""
    return Path(r2modman_root) / R2MODMAN_GAME_DIR / PROFILES_DIR / name


def default_valheim_locations(
    env: Optional[Mapping[str, str]] = None,
    settings: Optional[Config] = None,
) -> list[Path]:
    """Common Valheim installation locations, most likely first.

    Args:
        env: Environment mapping (defaults to ``os.environ``)
        settings: Config holding a previously saved path

    Returns:
        Ordered list of candidate directories
    """
    env = os.environ if env is None else env
    settings = config if settings is None else settings

    results: list[Path] = []
    if settings.valheim_path:
        results.append(Path(settings.valheim_path))
    results.append(Path.cwd())
    for var in ("ProgramFiles", "ProgramFiles(x86)"):
        base = env.get(var)
        if base:
            results.append(Path(base) / STEAM_VALHEIM_SUBPATH)
    return results


def default_r2modman_locations(
    env: Optional[Mapping[str, str]] = None,
    settings: Optional[Config] = None,
) -> list[Path]:
    """Common r2modman data locations, most likely first."""
    env = os.environ if env is None else env
    settings = config if settings is None else settings

    results: list[Path] = []
    if settings.r2modman_path:
        results.append(Path(settings.r2modman_path))
    user_profile = env.get("USERPROFILE")
    if user_profile:
        results.append(Path(user_profile, "AppData", "Roaming", R2MODMAN_DIR_NAME))
    app_data = env.get("APPDATA")
    if app_data:
        candidate = Path(app_data) / R2MODMAN_DIR_NAME
        if candidate not in results:
            results.append(candidate)
    return results
