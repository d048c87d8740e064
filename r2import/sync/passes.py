"""Sync pass definitions for a profile import."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .exclusions import ExclusionSet
from .modes import SyncMode

BEPINEX_DIR = "BepInEx"
DOORSTOP_LIBS_DIR = "doorstop_libs"
UNSTRIPPED_CORLIB_DIR = "unstripped_corlib"
PLUGINS_DIR = "plugins"

COMPONENT_DIRS: tuple[str, ...] = (
    BEPINEX_DIR,
    DOORSTOP_LIBS_DIR,
    UNSTRIPPED_CORLIB_DIR,
)
"""Subtrees mirrored by their own passes and skipped by the root merge"""


@dataclass(frozen=True)
class SyncPass:
    """One subtree synchronization operation."""

    name: str
    """Short name for logging and reports"""

    source: Path
    """Source directory inside the profile"""

    destination: Path
    """Destination directory inside the game installation"""

    mode: SyncMode
    """Mirror or merge"""

    exclusions: ExclusionSet = ()
    """Directory names never copied, updated or deleted"""

    copy_subdirectories: bool = True
    """Whether subdirectories are synchronized or only top-level files"""

    is_root: bool = False
    """Whether this is the profile root pass"""


def build_sync_passes(
    source_root: Union[str, Path],
    dest_root: Union[str, Path],
    exclusions: ExclusionSet = (),
) -> list[SyncPass]:
    """Build the four passes of an import, in execution order.

    Args:
        source_root: Profile directory
        dest_root: Game installation directory
        exclusions: Exclusion tokens applied to the BepInEx mirror

    Returns:
        Root merge, then BepInEx, doorstop_libs and unstripped_corlib mirrors
    """
    source_root = Path(source_root)
    dest_root = Path(dest_root)

    passes = [
        SyncPass(
            name="profile",
            source=source_root,
            destination=dest_root,
            mode=SyncMode.MERGE,
            exclusions=COMPONENT_DIRS,
            copy_subdirectories=False,
            is_root=True,
        ),
        SyncPass(
            name=BEPINEX_DIR,
            source=source_root / BEPINEX_DIR,
            destination=dest_root / BEPINEX_DIR,
            mode=SyncMode.MIRROR,
            exclusions=tuple(exclusions),
        ),
    ]
    for subdir in (DOORSTOP_LIBS_DIR, UNSTRIPPED_CORLIB_DIR):
        passes.append(
            SyncPass(
                name=subdir,
                source=source_root / subdir,
                destination=dest_root / subdir,
                mode=SyncMode.MIRROR,
            )
        )
    return passes


def plugin_path(dest_root: Union[str, Path], package_name: str) -> Path:
    """Directory of an installed plugin under the game's BepInEx/plugins."""
    return Path(dest_root) / BEPINEX_DIR / PLUGINS_DIR / package_name
