"""Fake credential helper for testing."""

from git_github.core.credential_helper.abc import CredentialHelper
from git_github.core.credential_helper.protocol import credential_from_response
from git_github.core.credentials.types import Credential


class FakeCredentialHelper(CredentialHelper):
    """In-memory fake returning pre-configured helper responses.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, responses: dict[str, dict[str, str]] | None = None) -> None:
        """Create FakeCredentialHelper.

        Args:
            responses: Mapping of host URL -> raw key/value properties the helper
                       would print for a fill request
        """
        self._responses = responses or {}
        self._filled: list[str] = []
        self._rejected: list[str] = []

    @property
    def filled(self) -> list[str]:
        return self._filled

    @property
    def rejected(self) -> list[str]:
        return self._rejected

    def fill(self, host_url: str) -> Credential:
        self._filled.append(host_url)
        return credential_from_response(self._responses.get(host_url, {}))

    def reject(self, host_url: str) -> None:
        self._rejected.append(host_url)
