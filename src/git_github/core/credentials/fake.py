"""Fake secret store for testing.

FakeCredentialStore is an in-memory implementation that accepts pre-configured
state in its constructor.
"""

from git_github.core.credentials.abc import CredentialStore
from git_github.core.credentials.types import Credential


class FakeCredentialStore(CredentialStore):
    """In-memory fake keyed by normalized target URL.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, credentials: dict[str, Credential] | None = None) -> None:
        self._credentials = credentials or {}
        self._lookup_calls: list[str] = []

    @property
    def lookup_calls(self) -> list[str]:
        """Target URLs passed to lookup(), for test assertions."""
        return self._lookup_calls

    def lookup(self, target_url: str) -> Credential | None:
        self._lookup_calls.append(target_url)
        return self._credentials.get(target_url)
