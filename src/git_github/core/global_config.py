"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.git-github/config.toml.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import ParseError

from git_github.core.credentials.types import SecretStoreKind
from git_github.core.errors import InvalidConfigFile

DEFAULT_HOST = "https://github.com"
CONFIG_KEYS = ("host", "secret_store", "username")


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in GitGitHubContext.
    """

    host: str
    secret_store: SecretStoreKind
    username: str | None = None  # keyring account name, for backends that need one

    @staticmethod
    def defaults() -> "GlobalConfig":
        return GlobalConfig(host=DEFAULT_HOST, secret_store=SecretStoreKind.GENERIC)


def global_config_path() -> Path:
    """Get the path to the global config file."""
    return Path.home() / ".git-github" / "config.toml"


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config, falling back to defaults for a missing file or key.

    Raises:
        InvalidConfigFile: If the file is not valid TOML
        UnknownSecretStore: If secret_store names no known store
    """
    config_path = path if path is not None else global_config_path()
    if not config_path.exists():
        return GlobalConfig.defaults()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigFile(config_path, str(e)) from e

    username = data.get("username")
    return GlobalConfig(
        host=str(data.get("host", DEFAULT_HOST)),
        secret_store=SecretStoreKind.parse(
            str(data.get("secret_store", SecretStoreKind.GENERIC.value))
        ),
        username=str(username) if username else None,
    )


def save_global_config(config: GlobalConfig, path: Path | None = None) -> None:
    """Save global config, preserving comments and unknown keys in an existing file.

    Raises:
        InvalidConfigFile: If the existing file is not valid TOML
    """
    config_path = path if path is not None else global_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    if config_path.exists():
        try:
            doc = tomlkit.parse(config_path.read_text(encoding="utf-8"))
        except ParseError as e:
            raise InvalidConfigFile(config_path, str(e)) from e
    else:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Global git-github configuration"))

    doc["host"] = config.host
    doc["secret_store"] = config.secret_store.value
    if config.username is not None:
        doc["username"] = config.username
    elif "username" in doc:
        del doc["username"]
    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
