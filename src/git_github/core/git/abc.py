"""Local git repository reading interface.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TrackingInfo:
    """Tracking relationship of the checked-out branch.

    Attributes:
        remote_name: Name of the tracked remote (e.g. "origin")
        upstream_ref_canonical_name: Upstream ref on the remote (e.g. "refs/heads/feature-x")
        local_tip_commit_id: Commit id the local remote-tracking ref points at
    """

    remote_name: str
    upstream_ref_canonical_name: str
    local_tip_commit_id: str


class Git(ABC):
    """Abstract interface for reading local git state.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path:
        """Find the root of the repository containing cwd.

        Raises:
            NotInGitRepository: If cwd is not inside a git repository
        """
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the checked-out branch name, or None when HEAD is detached."""
        ...

    @abstractmethod
    def get_tracking_info(self, cwd: Path) -> TrackingInfo | None:
        """Get the tracking relationship of the checked-out branch.

        Returns:
            TrackingInfo, or None if HEAD is detached or the branch tracks no remote
        """
        ...

    @abstractmethod
    def get_remote_url(self, repo_root: Path, remote_name: str) -> str | None:
        """Get the URL configured for a remote, or None if the remote has none."""
        ...
