"""Tests for gettextrs_ci.process.run_command."""

from pathlib import Path
from unittest.mock import MagicMock, patch

from gettextrs_ci.process import COMMAND_NOT_EXECUTABLE, COMMAND_NOT_FOUND, run_command


class TestRunCommand:
    def test_returns_exit_status(self, tmp_path: Path) -> None:
        with patch("subprocess.run") as m:
            m.return_value = MagicMock(returncode=4)
            assert run_command(["docker", "build"], cwd=str(tmp_path)) == 4
        assert m.call_args[1]["cwd"] == str(tmp_path)
        assert m.call_args[1]["env"] is None

    def test_missing_binary_returns_127(self, tmp_path: Path, capsys) -> None:
        err = FileNotFoundError(2, "No such file or directory")
        with patch("subprocess.run", side_effect=err):
            assert run_command(["docker", "build"], cwd=str(tmp_path)) == COMMAND_NOT_FOUND
        _, out_err = capsys.readouterr()
        assert "❌ docker: command not found" in out_err

    def test_not_executable_returns_126(self, tmp_path: Path, capsys) -> None:
        err = PermissionError(13, "Permission denied")
        with patch("subprocess.run", side_effect=err):
            assert run_command(["ci/run.sh"], cwd=str(tmp_path)) == COMMAND_NOT_EXECUTABLE
        _, out_err = capsys.readouterr()
        assert "❌ ci/run.sh: cannot execute" in out_err
