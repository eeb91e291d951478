"""Output utilities for CLI commands with clear intent.

user_output: status and error text for people, written to stderr.
machine_output: command results, written to stdout.
"""

from datetime import datetime
from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    click.echo(message, nl=nl)


def format_long_date(value: datetime) -> str:
    """Format a date like "Monday, March 4, 2024"."""
    return f"{value:%A, %B} {value.day}, {value.year}"
