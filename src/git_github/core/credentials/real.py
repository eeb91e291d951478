"""Production secret store lookups backed by the OS keyring.

Both stores read the same OS-level keyring; they differ only in how the
entry name is derived from the target URL.

Backends that can enumerate entries (Windows Credential Manager, Secret
Service) find a credential by service name alone. Backends that only
implement get_password, such as the macOS Keychain, need the account
name, which comes from the `username` config key.
"""

import logging
from urllib.parse import urlsplit

import keyring
from keyring.errors import KeyringError

from git_github.core.credentials.abc import CredentialStore
from git_github.core.credentials.types import Credential, SecretStoreKind

logger = logging.getLogger(__name__)

GENERIC_NAMESPACE = "git"
NAMED_ALTERNATE_NAMESPACE = "GitHub"


def _read_keyring(service: str, username: str | None) -> Credential | None:
    logger.debug("Looking up keyring entry %s (username=%s)", service, username)
    try:
        found = keyring.get_credential(service, username)
    except KeyringError as e:
        # No usable backend is treated like an empty store
        logger.debug("Keyring unavailable: %s", e)
        return None

    if found is None or found.password is None:
        if username is None:
            logger.debug(
                "No entry for %s; %s may need a username to look it up (set 'username')",
                service,
                type(keyring.get_keyring()).__name__,
            )
        return None
    return Credential(username=found.username or username or "", password=found.password)


class GenericSecretStore(CredentialStore):
    """Entries keyed as "git:{scheme}://{authority}"."""

    def __init__(self, username: str | None = None) -> None:
        self._username = username

    def identity_key(self, target_url: str) -> str:
        parts = urlsplit(target_url)
        return f"{GENERIC_NAMESPACE}:{parts.scheme}://{parts.netloc}"

    def lookup(self, target_url: str) -> Credential | None:
        return _read_keyring(self.identity_key(target_url), self._username)


class NamedAlternateSecretStore(CredentialStore):
    """Entries keyed as "GitHub - {url}" with user, port and path kept.

    An empty path is written as "/" so "https://github.com" and
    "https://github.com/" share one entry.
    """

    def __init__(self, username: str | None = None) -> None:
        self._username = username

    def identity_key(self, target_url: str) -> str:
        parts = urlsplit(target_url)
        path = parts.path or "/"
        return f"{NAMED_ALTERNATE_NAMESPACE} - {parts.scheme}://{parts.netloc}{path}"

    def lookup(self, target_url: str) -> Credential | None:
        return _read_keyring(self.identity_key(target_url), self._username)


def create_credential_store(kind: SecretStoreKind, username: str | None = None) -> CredentialStore:
    """Resolve a configured store kind into a concrete store.

    Args:
        kind: Store layout to read
        username: Account name passed to the keyring, None to let the backend find it
    """
    if kind is SecretStoreKind.GENERIC:
        return GenericSecretStore(username)
    return NamedAlternateSecretStore(username)
