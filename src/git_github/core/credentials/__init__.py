from git_github.core.credentials.abc import CredentialStore
from git_github.core.credentials.types import Credential, SecretStoreKind

__all__ = ["Credential", "CredentialStore", "SecretStoreKind"]
