"""Running external commands with the failing operation named in errors."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from git_github.core.errors import CommandFailed

logger = logging.getLogger(__name__)


def run_command(
    cmd: Sequence[str],
    operation: str,
    *,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a command and capture its text output.

    Args:
        cmd: Command and arguments
        operation: What the command is for, e.g. "read remote URL"
        cwd: Working directory, defaults to the current one
        check: Raise CommandFailed on a non-zero exit status

    Raises:
        CommandFailed: If the executable is missing, or it exits non-zero with check set
    """
    logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
    try:
        result = subprocess.run(
            list(cmd), cwd=cwd, capture_output=True, text=True, encoding="utf-8"
        )
    except FileNotFoundError as e:
        raise CommandFailed(operation, f"'{cmd[0]}' is not installed or not on PATH") from e

    if check and result.returncode != 0:
        detail = f"'{' '.join(cmd)}' exited with code {result.returncode}"
        stderr = result.stderr.strip()
        if stderr:
            detail += f": {stderr}"
        raise CommandFailed(operation, detail)
    return result
