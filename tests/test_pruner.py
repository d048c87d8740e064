"""Tests for pruning disabled plugin directories."""

from unittest.mock import Mock, patch

import pytest
from conftest import write_file

from r2import.exceptions import PruneFailure
from r2import.output import OutputFormatter
from r2import.sync.pruner import prune_disabled_plugins


class TestPruneDisabledPlugins:
    """Tests for prune_disabled_plugins."""

    def test_removes_existing_and_ignores_missing(self, temp_dir):
        write_file(temp_dir / "BepInEx" / "plugins" / "ModA" / "ModA.dll")
        write_file(temp_dir / "BepInEx" / "plugins" / "ModC" / "ModC.dll")

        result = prune_disabled_plugins(temp_dir, ["ModA", "ModB"])

        assert result.removed == [temp_dir / "BepInEx" / "plugins" / "ModA"]
        assert result.failures == []
        assert not (temp_dir / "BepInEx" / "plugins" / "ModA").exists()
        assert (temp_dir / "BepInEx" / "plugins" / "ModC").exists()

    def test_missing_destination(self, temp_dir):
        result = prune_disabled_plugins(temp_dir / "missing", ["ModA"])

        assert result.removed == []
        assert result.failures == []

    def test_file_with_plugin_name_is_kept(self, temp_dir):
        """Only directories are pruned."""
        stray = write_file(temp_dir / "BepInEx" / "plugins" / "ModA")

        result = prune_disabled_plugins(temp_dir, ["ModA"])

        assert result.removed == []
        assert stray.exists()

    def test_dry_run_keeps_directories(self, temp_dir):
        plugin = temp_dir / "BepInEx" / "plugins" / "ModA"
        write_file(plugin / "ModA.dll")
        output = Mock(spec=OutputFormatter)

        result = prune_disabled_plugins(temp_dir, ["ModA"], dry_run=True, output=output)

        assert result.removed == [plugin]
        assert plugin.exists()
        output.info.assert_called_once_with(f"Would remove disabled plugin {plugin}")

    def test_failure_does_not_stop_other_names(self, temp_dir):
        plugins = temp_dir / "BepInEx" / "plugins"
        write_file(plugins / "ModA" / "ModA.dll")
        write_file(plugins / "ModB" / "ModB.dll")
        output = Mock(spec=OutputFormatter)

        with patch("r2import.sync.pruner.shutil.rmtree") as mock_rmtree:
            mock_rmtree.side_effect = [PermissionError("in use"), None]
            result = prune_disabled_plugins(
                temp_dir, ["ModA", "ModB"], output=output
            )

        assert mock_rmtree.call_count == 2
        assert result.removed == [plugins / "ModB"]
        assert len(result.failures) == 1
        failure = result.failures[0]
        assert isinstance(failure, PruneFailure)
        assert failure.path == plugins / "ModA"
        output.warning.assert_called_once_with(str(failure))

    @pytest.mark.parametrize("name", [".", ".."])
    def test_names_outside_plugins_dir_refused(self, temp_dir, name):
        """Test that dot names never remove the plugins or BepInEx directory."""
        write_file(temp_dir / "BepInEx" / "plugins" / "ModB" / "ModB.dll")
        core = write_file(temp_dir / "BepInEx" / "core" / "BepInEx.dll")

        result = prune_disabled_plugins(temp_dir, [name, "ModB"])

        assert result.removed == [temp_dir / "BepInEx" / "plugins" / "ModB"]
        assert len(result.failures) == 1
        assert core.exists()
        assert (temp_dir / "BepInEx" / "plugins").is_dir()

    def test_nested_name_refused(self, temp_dir):
        nested = write_file(temp_dir / "BepInEx" / "plugins" / "a" / "b" / "b.dll")

        result = prune_disabled_plugins(temp_dir, ["a/b"], dry_run=True)

        assert result.removed == []
        assert len(result.failures) == 1
        assert nested.exists()
