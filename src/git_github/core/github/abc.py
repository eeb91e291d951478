"""Abstract base class for GitHub GraphQL operations."""

from abc import ABC, abstractmethod

from git_github.core.github.types import Organization, RemoteRefStatus, Viewer, ViewerItem


class GitHub(ABC):
    """Abstract interface for GitHub queries.

    All implementations (real and fake) must implement this interface.
    Every method raises RemoteQueryFailed on transport or API errors.
    """

    @abstractmethod
    def get_remote_ref_status(
        self, owner: str, name: str, *, qualified_ref_name: str, head_ref_name: str
    ) -> RemoteRefStatus:
        """Get repository, fork parent, ref target and pull requests for a branch.

        Args:
            owner: Repository owner (e.g. "acme")
            name: Repository name (e.g. "widgets")
            qualified_ref_name: Fully qualified ref (e.g. "refs/heads/feature-x")
            head_ref_name: Branch name pull requests are matched on (e.g. "feature-x")

        Returns:
            RemoteRefStatus with up to 100 pull requests in OPEN, CLOSED or MERGED
            state, newest first, regardless of which repository they come from
        """
        ...

    @abstractmethod
    def get_viewer_pull_requests(self) -> list[ViewerItem]:
        """Get the signed-in user's open pull requests (up to 100, newest first)."""
        ...

    @abstractmethod
    def get_viewer_issues(self) -> list[ViewerItem]:
        """Get the signed-in user's open issues (up to 100, newest first)."""
        ...

    @abstractmethod
    def get_viewer(self) -> Viewer:
        """Get the signed-in user's identity."""
        ...

    @abstractmethod
    def get_viewer_organizations(self) -> list[Organization]:
        """Get organizations the signed-in user belongs to (up to 100)."""
        ...
