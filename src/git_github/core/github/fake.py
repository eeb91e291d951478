"""Fake GitHub operations for testing.

FakeGitHub is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from git_github.core.errors import RemoteQueryFailed
from git_github.core.github.abc import GitHub
from git_github.core.github.types import Organization, RemoteRefStatus, Viewer, ViewerItem


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub queries.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        ref_statuses: dict[tuple[str, str], RemoteRefStatus] | None = None,
        viewer: Viewer | None = None,
        viewer_pull_requests: list[ViewerItem] | None = None,
        viewer_issues: list[ViewerItem] | None = None,
        organizations: list[Organization] | None = None,
        query_error: RemoteQueryFailed | None = None,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            ref_statuses: Mapping of ("owner/name", head_ref_name) -> RemoteRefStatus
            viewer: Identity returned by get_viewer
            viewer_pull_requests: Items returned by get_viewer_pull_requests
            viewer_issues: Items returned by get_viewer_issues
            organizations: Items returned by get_viewer_organizations
            query_error: If set, every query raises this error
        """
        self._ref_statuses = ref_statuses or {}
        self._viewer = viewer
        self._viewer_pull_requests = viewer_pull_requests or []
        self._viewer_issues = viewer_issues or []
        self._organizations = organizations or []
        self._query_error = query_error
        self._ref_status_calls: list[tuple[str, str, str, str]] = []

    @property
    def ref_status_calls(self) -> list[tuple[str, str, str, str]]:
        """Tracked get_remote_ref_status() calls for test assertions.

        Returns list of (owner, name, qualified_ref_name, head_ref_name) tuples.
        """
        return self._ref_status_calls

    def _check_error(self) -> None:
        if self._query_error is not None:
            raise self._query_error

    def get_remote_ref_status(
        self, owner: str, name: str, *, qualified_ref_name: str, head_ref_name: str
    ) -> RemoteRefStatus:
        self._ref_status_calls.append((owner, name, qualified_ref_name, head_ref_name))
        self._check_error()
        key = (f"{owner}/{name}", head_ref_name)
        if key not in self._ref_statuses:
            raise RemoteQueryFailed(f"Repository {owner}/{name} not found")
        return self._ref_statuses[key]

    def get_viewer_pull_requests(self) -> list[ViewerItem]:
        self._check_error()
        return self._viewer_pull_requests

    def get_viewer_issues(self) -> list[ViewerItem]:
        self._check_error()
        return self._viewer_issues

    def get_viewer(self) -> Viewer:
        self._check_error()
        if self._viewer is None:
            raise RemoteQueryFailed("viewer not configured")
        return self._viewer

    def get_viewer_organizations(self) -> list[Organization]:
        self._check_error()
        return self._organizations
