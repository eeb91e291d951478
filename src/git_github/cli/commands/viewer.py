"""Viewer command - identity of the signed-in user."""

import click

from git_github.cli.ensure import handle_errors
from git_github.cli.output import machine_output
from git_github.core.context import GitGitHubContext


@click.command("viewer")
@click.pass_obj
@handle_errors
def viewer_cmd(ctx: GitGitHubContext) -> None:
    """Show viewer information."""
    viewer = ctx.github.get_viewer()
    name = viewer.name if viewer.name is not None else "no name"
    if viewer.email is None:
        machine_output(
            f"You are signed in as {viewer.login} ({name}) with no public email address"
        )
        return
    machine_output(
        f"You are signed in as {viewer.login} ({name}) "
        f"with {viewer.email} as your public email address"
    )
