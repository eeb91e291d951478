"""Issues command - open issues authored by the signed-in user."""

import click

from git_github.cli.commands.pulls import render_viewer_item
from git_github.cli.ensure import handle_errors
from git_github.cli.output import machine_output
from git_github.core.context import GitGitHubContext


@click.command("issues")
@click.pass_obj
@handle_errors
def issues_cmd(ctx: GitGitHubContext) -> None:
    """Show your open issues."""
    for item in ctx.github.get_viewer_issues():
        for line in render_viewer_item(item):
            machine_output(line)
