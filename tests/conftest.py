"""Shared fixtures for r2import tests."""

import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def write_file(path: Path, content: str = "data") -> Path:
    """Write a file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


MODS_YML = """\
- manifestVersion: 1
  name: denikson-BepInExPack_Valheim
  authorName: denikson
  enabled: true
  versionNumber:
    major: 5
    minor: 4
    patch: 2202
- manifestVersion: 1
  name: ModA
  authorName: someone
  enabled: false
- manifestVersion: 1
  name: ModB
  authorName: someone
  enabled: true
"""


@pytest.fixture
def profile_dir(temp_dir):
    """Create a profile directory with the three component subtrees."""
    profile = temp_dir / "r2modman" / "Valheim" / "profiles" / "Default"
    write_file(profile / "mods.yml", MODS_YML)
    write_file(profile / "doorstop_config.ini", "[UnityDoorstop]\nenabled=true\n")
    write_file(profile / "winhttp.dll", "dll")
    write_file(profile / "BepInEx" / "core" / "BepInEx.dll", "core")
    write_file(profile / "BepInEx" / "plugins" / "ModA" / "ModA.dll", "a")
    write_file(profile / "BepInEx" / "plugins" / "ModB" / "ModB.dll", "b")
    write_file(profile / "BepInEx" / "config" / "BepInEx.cfg", "cfg")
    write_file(profile / "doorstop_libs" / "mono.dll", "mono")
    write_file(profile / "unstripped_corlib" / "mscorlib.dll", "corlib")
    return profile


@pytest.fixture
def game_dir(temp_dir):
    """Create a Valheim installation directory."""
    game = temp_dir / "Valheim"
    write_file(game / "valheim.exe", "exe")
    write_file(game / "valheim_Data" / "globalgamemanagers", "data")
    return game
