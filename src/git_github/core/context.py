"""Application context with dependency injection."""

from dataclasses import dataclass, replace
from pathlib import Path

from git_github.core.credential_helper.abc import CredentialHelper
from git_github.core.credentials.types import SecretStoreKind
from git_github.core.git.abc import Git
from git_github.core.github.abc import GitHub
from git_github.core.global_config import GlobalConfig, load_global_config


@dataclass(frozen=True)
class GitGitHubContext:
    """Immutable context holding all dependencies for git-github commands.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHub
    credential_helper: CredentialHelper
    cwd: Path  # Current working directory at CLI invocation
    config: GlobalConfig
    config_path: Path | None  # None means the default ~/.git-github/config.toml

    @property
    def host(self) -> str:
        return self.config.host

    @staticmethod
    def for_test(
        git: Git | None = None,
        github: GitHub | None = None,
        credential_helper: CredentialHelper | None = None,
        cwd: Path | None = None,
        config: GlobalConfig | None = None,
        config_path: Path | None = None,
    ) -> "GitGitHubContext":
        """Create a context backed by empty fakes unless overridden.

        cwd defaults to Path("/test/default/cwd") to prevent accidental use
        of the real working directory in tests.
        """
        from git_github.core.credential_helper.fake import FakeCredentialHelper
        from git_github.core.git.fake import FakeGit
        from git_github.core.github.fake import FakeGitHub

        return GitGitHubContext(
            git=git if git is not None else FakeGit(),
            github=github if github is not None else FakeGitHub(),
            credential_helper=(
                credential_helper if credential_helper is not None else FakeCredentialHelper()
            ),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            config=config if config is not None else GlobalConfig.defaults(),
            config_path=config_path,
        )


def create_context(
    *,
    host: str | None = None,
    secret_store: str | None = None,
    username: str | None = None,
    config_path: Path | None = None,
) -> GitGitHubContext:
    """Create production context with real implementations.

    Args:
        host: Host URL overriding the configured one
        secret_store: Secret store name overriding the configured one
        username: Keyring account name overriding the configured one
        config_path: Config file location (defaults to ~/.git-github/config.toml)

    Raises:
        InvalidConfigFile: If the config file is not valid TOML
        UnknownSecretStore: If the configured or overriding store name is unknown
    """
    from git_github.core.credential_helper.real import RealCredentialHelper
    from git_github.core.credentials.real import create_credential_store
    from git_github.core.git.real import RealGit
    from git_github.core.github.real import RealGitHub

    # 1. Load config, then apply command-line overrides
    config = load_global_config(config_path)
    if host is not None:
        config = replace(config, host=host)
    if secret_store is not None:
        config = replace(config, secret_store=SecretStoreKind.parse(secret_store))
    if username is not None:
        config = replace(config, username=username)

    # 2. Resolve the secret store once for the process lifetime
    credential_store = create_credential_store(config.secret_store, config.username)

    return GitGitHubContext(
        git=RealGit(),
        github=RealGitHub(config.host, credential_store),
        credential_helper=RealCredentialHelper(),
        cwd=Path.cwd(),
        config=config,
        config_path=config_path,
    )
