"""Config command group - view and edit ~/.git-github/config.toml."""

from dataclasses import replace

import click

from git_github.cli.ensure import Ensure, handle_errors
from git_github.cli.output import machine_output, user_output
from git_github.core.context import GitGitHubContext
from git_github.core.credentials.types import SecretStoreKind
from git_github.core.global_config import (
    CONFIG_KEYS,
    global_config_path,
    save_global_config,
)
from git_github.core.token import normalize_target_url


@click.group("config")
def config_group() -> None:
    """Manage git-github configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: GitGitHubContext) -> None:
    """Print the effective configuration."""
    machine_output(f"host={ctx.config.host}")
    machine_output(f"secret_store={ctx.config.secret_store.value}")
    machine_output(f"username={ctx.config.username or ''}")


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_obj
@handle_errors
def config_set(ctx: GitGitHubContext, key: str, value: str) -> None:
    """Set a configuration KEY to VALUE."""
    Ensure.invariant(
        key in CONFIG_KEYS,
        f"Unknown config key '{key}'. Valid keys: {', '.join(CONFIG_KEYS)}",
    )

    if key == "host":
        normalize_target_url(value)
        updated = replace(ctx.config, host=value.strip())
    elif key == "secret_store":
        updated = replace(ctx.config, secret_store=SecretStoreKind.parse(value))
    else:
        # An empty value clears the username
        updated = replace(ctx.config, username=value.strip() or None)

    save_global_config(updated, ctx.config_path)
    path = ctx.config_path if ctx.config_path is not None else global_config_path()
    user_output(f"Set {key} in {path}")
