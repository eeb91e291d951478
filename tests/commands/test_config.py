"""Tests for the config command group."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from git_github.cli.cli import cli
from git_github.core.context import GitGitHubContext
from git_github.core.credentials.types import SecretStoreKind
from git_github.core.global_config import load_global_config


def test_config_list_prints_effective_values() -> None:
    ctx = GitGitHubContext.for_test()

    result = CliRunner().invoke(cli, ["config", "list"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "host=https://github.com" in result.output
    assert "secret_store=generic" in result.output
    assert "username=\n" in result.output


def test_config_set_host_writes_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    ctx = GitGitHubContext.for_test(config_path=config_path)

    result = CliRunner().invoke(
        cli, ["config", "set", "host", "https://ghe.example.com"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert f"Set host in {config_path}" in result.output
    loaded = load_global_config(config_path)
    assert loaded.host == "https://ghe.example.com"
    assert loaded.secret_store == SecretStoreKind.GENERIC


def test_config_set_secret_store_normalizes_name(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    ctx = GitGitHubContext.for_test(config_path=config_path)

    result = CliRunner().invoke(
        cli, ["config", "set", "secret_store", "Named_Alternate"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert load_global_config(config_path).secret_store == SecretStoreKind.NAMED_ALTERNATE


def test_config_set_unknown_key_fails(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    ctx = GitGitHubContext.for_test(config_path=config_path)

    result = CliRunner().invoke(cli, ["config", "set", "colour", "blue"], obj=ctx)

    assert result.exit_code == 1
    assert "Unknown config key 'colour'" in result.output
    assert not config_path.exists()


def test_config_set_unknown_secret_store_fails(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    ctx = GitGitHubContext.for_test(config_path=config_path)

    result = CliRunner().invoke(cli, ["config", "set", "secret_store", "vault"], obj=ctx)

    assert result.exit_code == 1
    assert "Unknown secret store 'vault'" in result.output
    assert not config_path.exists()


def test_config_set_invalid_host_fails(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    ctx = GitGitHubContext.for_test(config_path=config_path)

    result = CliRunner().invoke(cli, ["config", "set", "host", "github.com"], obj=ctx)

    assert result.exit_code == 1
    assert "Invalid host URL 'github.com'" in result.output


def test_config_set_username_then_clear(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    runner = CliRunner()

    result = runner.invoke(
        cli,
        ["config", "set", "username", "alice"],
        obj=GitGitHubContext.for_test(config_path=config_path),
    )
    assert result.exit_code == 0, result.output
    assert load_global_config(config_path).username == "alice"

    result = runner.invoke(
        cli,
        ["config", "set", "username", ""],
        obj=GitGitHubContext.for_test(
            config=load_global_config(config_path), config_path=config_path
        ),
    )
    assert result.exit_code == 0, result.output
    assert load_global_config(config_path).username is None


def test_config_set_over_malformed_file_fails(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("host = \n", encoding="utf-8")
    ctx = GitGitHubContext.for_test(config_path=config_path)

    result = CliRunner().invoke(cli, ["config", "set", "host", "https://github.com"], obj=ctx)

    assert result.exit_code == 1
    assert f"Error: Invalid config file {config_path}" in result.output


def test_malformed_home_config_fails_before_any_command(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    config_dir = tmp_path / ".git-github"
    config_dir.mkdir()
    (config_dir / "config.toml").write_text("host = \n", encoding="utf-8")
    monkeypatch.setenv("HOME", str(tmp_path))

    result = CliRunner().invoke(cli, ["config", "list"])

    assert result.exit_code == 1
    assert "Error: Invalid config file" in result.output
    assert "Traceback" not in result.output
