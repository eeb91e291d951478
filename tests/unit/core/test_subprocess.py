"""Tests for run_command."""

import sys

import pytest

from git_github.core.errors import CommandFailed
from git_github.core.subprocess import run_command


def test_returns_completed_process_on_success() -> None:
    result = run_command([sys.executable, "-c", "print('hello')"], "say hello")

    assert result.returncode == 0
    assert result.stdout.strip() == "hello"


def test_failure_names_operation_and_stderr() -> None:
    cmd = [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"]

    with pytest.raises(CommandFailed) as exc_info:
        run_command(cmd, "read remote URL")

    message = str(exc_info.value)
    assert message.startswith("Failed to read remote URL: ")
    assert "exited with code 3: boom" in message


def test_check_false_returns_failed_process() -> None:
    result = run_command([sys.executable, "-c", "import sys; sys.exit(1)"], "probe", check=False)

    assert result.returncode == 1


def test_missing_executable_raises_even_without_check() -> None:
    with pytest.raises(CommandFailed, match="'no-such-binary-xyz' is not installed"):
        run_command(["no-such-binary-xyz"], "run git status", check=False)
