"""
Tests for external command execution.
"""

from unittest.mock import MagicMock, patch

import pytest

from jabu.errors import CommandFailed
from jabu.infra import run_command


def _completed(returncode):
    result = MagicMock()
    result.returncode = returncode
    return result


class TestRunCommand:
    """Tests for run_command()."""

    def test_success(self, tmp_path):
        with patch("jabu.infra.command_runner.subprocess.run",
                   return_value=_completed(0)) as mock_run:
            assert run_command("/jdk/bin/javac", ["-d", tmp_path], cwd=tmp_path) == 0

        mock_run.assert_called_once_with(["/jdk/bin/javac", "-d", str(tmp_path)], cwd=tmp_path)

    def test_nonzero_exit(self):
        with patch("jabu.infra.command_runner.subprocess.run", return_value=_completed(2)):
            with pytest.raises(CommandFailed) as exc_info:
                run_command("/jdk/bin/javac", [], name="javac")
        assert exc_info.value.command == "javac"
        assert exc_info.value.description == "2"

    def test_killed_by_signal(self):
        with patch("jabu.infra.command_runner.subprocess.run", return_value=_completed(-9)):
            with pytest.raises(CommandFailed) as exc_info:
                run_command("java", [])
        assert "no exit code" in exc_info.value.description

    def test_spawn_failure(self):
        with patch("jabu.infra.command_runner.subprocess.run",
                   side_effect=FileNotFoundError("no such file")):
            with pytest.raises(CommandFailed) as exc_info:
                run_command("/missing/javac", [])
        assert exc_info.value.command == "/missing/javac"
