"""Abstract base class for secret store lookups."""

from abc import ABC, abstractmethod

from git_github.core.credentials.types import Credential


class CredentialStore(ABC):
    """Read-only view of a secret store holding host credentials.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def lookup(self, target_url: str) -> Credential | None:
        """Look up the credential stored for a target URL.

        Args:
            target_url: Normalized scheme://authority URL (e.g. "https://github.com")

        Returns:
            The stored Credential, or None if the store has no entry
        """
        ...
