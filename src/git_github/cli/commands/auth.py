"""Login and logout commands - prime or clear the credential helper's cache."""

import click

from git_github.cli.ensure import handle_errors
from git_github.cli.output import user_output
from git_github.core.context import GitGitHubContext


@click.command("login")
@click.pass_obj
@handle_errors
def login_cmd(ctx: GitGitHubContext) -> None:
    """Sign in to the host through the Git credential manager."""
    credential = ctx.credential_helper.fill(ctx.host)
    signed_in = f"Signed in to {ctx.host} as {credential.username}"
    user_output(click.style("✓ ", fg="green") + signed_in)


@click.command("logout")
@click.pass_obj
@handle_errors
def logout_cmd(ctx: GitGitHubContext) -> None:
    """Erase credentials cached for the host by the Git credential manager."""
    ctx.credential_helper.reject(ctx.host)
    user_output(click.style("✓ ", fg="green") + f"Signed out of {ctx.host}")
