"""Tests for login and logout commands."""

from click.testing import CliRunner

from git_github.cli.cli import cli
from git_github.core.context import GitGitHubContext
from git_github.core.credential_helper.fake import FakeCredentialHelper
from git_github.core.credentials.types import SecretStoreKind
from git_github.core.global_config import GlobalConfig


def test_login_reports_signed_in_user() -> None:
    helper = FakeCredentialHelper(
        responses={"https://github.com": {"username": "alice", "password": "gho_secret"}}
    )
    ctx = GitGitHubContext.for_test(credential_helper=helper)

    result = CliRunner().invoke(cli, ["login"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Signed in to https://github.com as alice" in result.output
    assert "gho_secret" not in result.output
    assert helper.filled == ["https://github.com"]


def test_login_uses_configured_host() -> None:
    host = "https://ghe.example.com"
    helper = FakeCredentialHelper(responses={host: {"username": "bob", "password": "x"}})
    config = GlobalConfig(host=host, secret_store=SecretStoreKind.GENERIC)
    ctx = GitGitHubContext.for_test(credential_helper=helper, config=config)

    result = CliRunner().invoke(cli, ["login"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert helper.filled == [host]


def test_login_with_incomplete_response_fails() -> None:
    helper = FakeCredentialHelper(responses={"https://github.com": {"username": "alice"}})
    ctx = GitGitHubContext.for_test(credential_helper=helper)

    result = CliRunner().invoke(cli, ["login"], obj=ctx)

    assert result.exit_code == 1
    assert "Credential helper response is missing: password" in result.output


def test_logout_rejects_host() -> None:
    helper = FakeCredentialHelper()
    ctx = GitGitHubContext.for_test(credential_helper=helper)

    result = CliRunner().invoke(cli, ["logout"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Signed out of https://github.com" in result.output
    assert helper.rejected == ["https://github.com"]
