"""Production implementation of GitHub queries over the GraphQL API.

A single POST per query, authenticated with a bearer token from the secret
store. No retries: any failure surfaces as RemoteQueryFailed.
"""

import logging
from typing import Any

import requests

from git_github import __version__
from git_github.core.credentials.abc import CredentialStore
from git_github.core.errors import RemoteQueryFailed
from git_github.core.github.abc import GitHub
from git_github.core.github.host import graphql_endpoint
from git_github.core.github.parsing import (
    parse_organizations,
    parse_remote_ref_status,
    parse_viewer,
    parse_viewer_items,
)
from git_github.core.github.queries import (
    REMOTE_REF_STATUS_QUERY,
    VIEWER_ISSUES_QUERY,
    VIEWER_ORGANIZATIONS_QUERY,
    VIEWER_PULL_REQUESTS_QUERY,
    VIEWER_QUERY,
)
from git_github.core.github.types import Organization, RemoteRefStatus, Viewer, ViewerItem
from git_github.core.token import resolve_token

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 30


def make_headers(token: str) -> dict[str, str]:
    """Build HTTP headers for a GraphQL request."""
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
        "User-Agent": f"git-github/{__version__}",
    }


class RealGitHub(GitHub):
    """Production implementation posting GraphQL documents with requests.

    The token is resolved from the credential store on the first query, so
    commands that never query GitHub never touch the store.
    """

    def __init__(
        self,
        host_url: str,
        credential_store: CredentialStore,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize RealGitHub.

        Args:
            host_url: GitHub host URL (e.g. "https://github.com")
            credential_store: Secret store the bearer token is read from
            session: Optional requests session (defaults to a new Session)
        """
        self._host_url = host_url
        self._credential_store = credential_store
        self._session = session or requests.Session()
        self._token: str | None = None

    def _bearer_token(self) -> str:
        if self._token is None:
            self._token = resolve_token(self._host_url, self._credential_store)
        return self._token

    def _run_query(self, query: str, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute a GraphQL query and return its `data` object."""
        endpoint = graphql_endpoint(self._host_url)
        headers = make_headers(self._bearer_token())
        logger.debug("POST %s variables=%s", endpoint, variables)

        try:
            response = self._session.post(
                endpoint,
                headers=headers,
                json={"query": query, "variables": variables or {}},
                timeout=REQUEST_TIMEOUT_SECONDS,
            )
        except requests.exceptions.RequestException as e:
            raise RemoteQueryFailed(str(e)) from e

        if response.status_code != 200:
            raise RemoteQueryFailed(f"HTTP {response.status_code} from {endpoint}: {response.text}")

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteQueryFailed(f"Invalid JSON from {endpoint}") from e

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(error.get("message", error)) for error in errors)
            raise RemoteQueryFailed(messages)

        data = payload.get("data")
        if data is None:
            raise RemoteQueryFailed(f"No data in response from {endpoint}")
        return data

    def get_remote_ref_status(
        self, owner: str, name: str, *, qualified_ref_name: str, head_ref_name: str
    ) -> RemoteRefStatus:
        data = self._run_query(
            REMOTE_REF_STATUS_QUERY,
            {
                "owner": owner,
                "name": name,
                "qualifiedName": qualified_ref_name,
                "headRefName": head_ref_name,
            },
        )
        repository = data.get("repository")
        if repository is None:
            raise RemoteQueryFailed(f"Repository {owner}/{name} not found")
        try:
            return parse_remote_ref_status(repository)
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteQueryFailed(f"Unexpected response shape: {e}") from e

    def get_viewer_pull_requests(self) -> list[ViewerItem]:
        data = self._run_query(VIEWER_PULL_REQUESTS_QUERY)
        try:
            return parse_viewer_items(data["viewer"]["pullRequests"]["nodes"])
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteQueryFailed(f"Unexpected response shape: {e}") from e

    def get_viewer_issues(self) -> list[ViewerItem]:
        data = self._run_query(VIEWER_ISSUES_QUERY)
        try:
            return parse_viewer_items(data["viewer"]["issues"]["nodes"])
        except (KeyError, TypeError, ValueError) as e:
            raise RemoteQueryFailed(f"Unexpected response shape: {e}") from e

    def get_viewer(self) -> Viewer:
        data = self._run_query(VIEWER_QUERY)
        try:
            return parse_viewer(data["viewer"])
        except (KeyError, TypeError) as e:
            raise RemoteQueryFailed(f"Unexpected response shape: {e}") from e

    def get_viewer_organizations(self) -> list[Organization]:
        data = self._run_query(VIEWER_ORGANIZATIONS_QUERY)
        try:
            return parse_organizations(data["viewer"]["organizations"]["nodes"])
        except (KeyError, TypeError) as e:
            raise RemoteQueryFailed(f"Unexpected response shape: {e}") from e
