"""Tests for game process detection."""

from unittest.mock import Mock, patch

from r2import.process import is_process_running


def _proc(name, pid=1):
    proc = Mock()
    proc.info = {"name": name}
    proc.pid = pid
    return proc


class TestIsProcessRunning:
    """Tests for is_process_running."""

    @patch("r2import.process.psutil.process_iter")
    def test_running_windows_name(self, mock_iter):
        mock_iter.return_value = [_proc("explorer.exe"), _proc("valheim.exe", 42)]

        assert is_process_running() is True
        mock_iter.assert_called_once_with(["name"])

    @patch("r2import.process.psutil.process_iter")
    def test_running_case_insensitive(self, mock_iter):
        mock_iter.return_value = [_proc("Valheim")]

        assert is_process_running() is True

    @patch("r2import.process.psutil.process_iter")
    def test_not_running(self, mock_iter):
        mock_iter.return_value = [_proc("steam.exe"), _proc(None), _proc("valheim2")]

        assert is_process_running() is False

    @patch("r2import.process.psutil.process_iter")
    def test_custom_names(self, mock_iter):
        mock_iter.return_value = [_proc("r2modman.exe")]

        assert is_process_running(["R2MODMAN.EXE"]) is True
        assert is_process_running(["valheim"]) is False
