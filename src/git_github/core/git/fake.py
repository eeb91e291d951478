"""Fake git reader for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from git_github.core.errors import NotInGitRepository
from git_github.core.git.abc import Git, TrackingInfo


class FakeGit(Git):
    """In-memory fake implementation of git reading.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty dicts).
    """

    def __init__(
        self,
        *,
        repository_roots: dict[Path, Path] | None = None,
        current_branches: dict[Path, str | None] | None = None,
        tracking_infos: dict[Path, TrackingInfo | None] | None = None,
        remote_urls: dict[tuple[Path, str], str] | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            repository_roots: Mapping of cwd -> repository root
            current_branches: Mapping of cwd -> checked-out branch (None if detached)
            tracking_infos: Mapping of cwd -> TrackingInfo (None if not tracking)
            remote_urls: Mapping of (repo_root, remote_name) -> URL
        """
        self._repository_roots = repository_roots or {}
        self._current_branches = current_branches or {}
        self._tracking_infos = tracking_infos or {}
        self._remote_urls = remote_urls or {}

    def get_repository_root(self, cwd: Path) -> Path:
        if cwd not in self._repository_roots:
            raise NotInGitRepository(cwd)
        return self._repository_roots[cwd]

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branches.get(cwd)

    def get_tracking_info(self, cwd: Path) -> TrackingInfo | None:
        return self._tracking_infos.get(cwd)

    def get_remote_url(self, repo_root: Path, remote_name: str) -> str | None:
        return self._remote_urls.get((repo_root, remote_name))
