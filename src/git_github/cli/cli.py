import logging
import os

import click

from git_github.cli.commands.auth import login_cmd, logout_cmd
from git_github.cli.commands.config import config_group
from git_github.cli.commands.issues import issues_cmd
from git_github.cli.commands.orgs import orgs_cmd
from git_github.cli.commands.pulls import pulls_cmd
from git_github.cli.commands.status import status_cmd
from git_github.cli.commands.viewer import viewer_cmd
from git_github.cli.ensure import handle_errors
from git_github.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags
DEBUG_ENV_VAR = "GIT_GITHUB_DEBUG"


def configure_logging(debug: bool) -> None:
    """Enable debug logging when requested by flag or environment variable."""
    if debug or os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="git-github")
@click.option("--host", default=None, help="The host URL (default: https://github.com)")
@click.option(
    "--secret-store",
    default=None,
    help="Secret store to read tokens from: generic or named-alternate",
)
@click.option(
    "--username",
    default=None,
    help="Keyring account name, for backends that cannot look up by service alone",
)
@click.option("--debug", is_flag=True, help="Print debug logging to stderr")
@click.pass_context
@handle_errors
def cli(
    ctx: click.Context,
    host: str | None,
    secret_store: str | None,
    username: str | None,
    debug: bool,
) -> None:
    """Augment local git branch context with GitHub state."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(host=host, secret_store=secret_store, username=username)


cli.add_command(status_cmd)
cli.add_command(pulls_cmd)
cli.add_command(issues_cmd)
cli.add_command(viewer_cmd)
cli.add_command(orgs_cmd)
cli.add_command(login_cmd)
cli.add_command(logout_cmd)
cli.add_command(config_group)


def main() -> None:
    """CLI entry point used by the `git-github` console script."""
    cli()
