"""Type definitions for credential lookup."""

from dataclasses import dataclass, field
from enum import Enum

from git_github.core.errors import UnknownSecretStore


@dataclass(frozen=True)
class Credential:
    """Username and password/token pair held only in memory."""

    username: str
    password: str = field(repr=False)


class SecretStoreKind(Enum):
    """Which secret store layout tokens are looked up in."""

    GENERIC = "generic"
    NAMED_ALTERNATE = "named-alternate"

    @classmethod
    def parse(cls, value: str) -> "SecretStoreKind":
        """Parse a configuration value into a store kind.

        Raises:
            UnknownSecretStore: If value names no known store
        """
        normalized = value.strip().lower().replace("_", "-")
        for kind in cls:
            if kind.value == normalized:
                return kind
        raise UnknownSecretStore(value)
