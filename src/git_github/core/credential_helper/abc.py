"""Abstract base class for the external credential helper."""

from abc import ABC, abstractmethod

from git_github.core.credentials.types import Credential


class CredentialHelper(ABC):
    """Interface for priming and clearing a credential helper's cache.

    Used only by the login and logout commands. Token resolution for queries
    reads the secret store directly and never goes through the helper.
    """

    @abstractmethod
    def fill(self, host_url: str) -> Credential:
        """Ask the helper for a credential, prompting the user if needed.

        Raises:
            IncompleteCredentialResponse: If the helper omits username or password
            CredentialHelperFailed: If the helper cannot run or exits non-zero
        """
        ...

    @abstractmethod
    def reject(self, host_url: str) -> None:
        """Tell the helper to erase any credential cached for the host.

        Raises:
            CredentialHelperFailed: If the helper cannot run or exits non-zero
        """
        ...
