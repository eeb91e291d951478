"""Pulls command - open pull requests authored by the signed-in user."""

import click

from git_github.cli.ensure import handle_errors
from git_github.cli.output import format_long_date, machine_output
from git_github.core.context import GitGitHubContext
from git_github.core.github.types import ViewerItem


def render_viewer_item(item: ViewerItem) -> list[str]:
    """Render a pull request or issue as a two-line entry plus a blank line."""
    author = item.author if item.author is not None else "ghost"
    return [
        f"{item.repository_full_name} - {item.title}",
        f"#{item.number} opened on {format_long_date(item.created_at)} by {author}",
        "",
    ]


@click.command("pulls")
@click.pass_obj
@handle_errors
def pulls_cmd(ctx: GitGitHubContext) -> None:
    """Show your open pull requests."""
    for item in ctx.github.get_viewer_pull_requests():
        for line in render_viewer_item(item):
            machine_output(line)
