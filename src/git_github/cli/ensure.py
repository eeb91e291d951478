"""CLI error handling utilities with styled output.

Ensure asserts invariants inside commands; handle_errors is the command
boundary that renders any GitGitHubError. All errors use a red "Error:"
prefix and exit code 1.
"""

import functools
import logging
from collections.abc import Callable
from typing import NoReturn, ParamSpec, TypeVar

import click

from git_github.cli.output import user_output
from git_github.core.errors import GitGitHubError

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = ParamSpec("P")
R = TypeVar("R")


def fail(error_message: str) -> NoReturn:
    """Output styled error and exit with code 1."""
    user_output(click.style("Error: ", fg="red") + error_message)
    raise SystemExit(1)


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            fail(error_message)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Returns:
            The value unchanged if not None

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            fail(error_message)
        return value


def handle_errors(fn: Callable[P, R]) -> Callable[P, R]:
    """Render a GitGitHubError raised by a command and exit 1.

    Errors are not reinterpreted; only their message is presented.
    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return fn(*args, **kwargs)
        except GitGitHubError as e:
            logger.debug("Command failed with %s", type(e).__name__, exc_info=True)
            fail(str(e))

    return wrapper
