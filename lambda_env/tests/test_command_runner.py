import subprocess
from unittest.mock import MagicMock, patch

import pytest

from lambda_env.command_runner import CommandError, CommandRunner, run_command


@patch("lambda_env.command_runner.subprocess.run")
def test_run_returns_stripped_stdout(mock_run):
    mock_run.return_value = MagicMock(stdout="abc123\n", stderr="")

    assert CommandRunner().run(["git", "rev-parse", "HEAD"]) == "abc123"
    assert mock_run.call_args.args[0] == ["git", "rev-parse", "HEAD"]
    assert mock_run.call_args.kwargs["check"] is True


@patch("lambda_env.command_runner.subprocess.run")
def test_run_raises_on_non_zero_exit(mock_run):
    mock_run.side_effect = subprocess.CalledProcessError(
        128, ["git", "rev-parse", "HEAD"], output="", stderr="fatal: not a git repository\n"
    )

    with pytest.raises(CommandError, match="not a git repository"):
        CommandRunner().run(["git", "rev-parse", "HEAD"])


@patch("lambda_env.command_runner.subprocess.run")
def test_run_raises_on_missing_executable(mock_run):
    mock_run.side_effect = FileNotFoundError()

    with pytest.raises(CommandError, match="Command not found: git"):
        CommandRunner().run(["git", "rev-parse", "HEAD"])


@patch("lambda_env.command_runner.subprocess.run")
def test_run_raises_on_timeout(mock_run):
    mock_run.side_effect = subprocess.TimeoutExpired(["git"], 1.0)

    with pytest.raises(CommandError, match="Timed out"):
        CommandRunner(timeout=1.0).run(["git", "rev-parse", "HEAD"])


@patch("lambda_env.command_runner.subprocess.run")
def test_run_command_passes_cwd(mock_run, tmp_path):
    mock_run.return_value = MagicMock(stdout="out", stderr="")

    success, stdout, _ = run_command(["git", "status"], cwd=tmp_path)

    assert success
    assert stdout == "out"
    assert mock_run.call_args.args[0] == ["git", "status"]
    assert mock_run.call_args.kwargs["cwd"] == str(tmp_path)
