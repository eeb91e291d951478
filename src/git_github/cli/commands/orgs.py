"""Orgs command - organizations of the signed-in user."""

import click

from git_github.cli.ensure import handle_errors
from git_github.cli.output import machine_output, user_output
from git_github.core.context import GitGitHubContext


@click.command("orgs")
@click.pass_obj
@handle_errors
def orgs_cmd(ctx: GitGitHubContext) -> None:
    """Show organizations you belong to."""
    organizations = ctx.github.get_viewer_organizations()
    if not organizations:
        user_output("You do not belong to any organizations")
        return

    for org in organizations:
        heading = org.login if org.name is None else f"{org.login} - {org.name}"
        machine_output(click.style(heading, bold=True))
        if org.description is not None:
            machine_output(f"    {org.description}")
        machine_output(f"    {org.url}")
