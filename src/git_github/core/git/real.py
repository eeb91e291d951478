"""Production Git implementation using subprocess."""

import logging
from pathlib import Path

from git_github.core.errors import NotInGitRepository
from git_github.core.git.abc import Git, TrackingInfo
from git_github.core.subprocess import run_command

logger = logging.getLogger(__name__)


def _git_output(args: list[str], cwd: Path) -> str | None:
    """Run a read-only git query, returning stripped stdout or None on failure.

    Raises:
        CommandFailed: If git is not installed
    """
    result = run_command(["git", *args], f"run git {args[0]}", cwd=cwd, check=False)
    if result.returncode != 0:
        return None
    output = result.stdout.strip()
    return output or None


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def get_repository_root(self, cwd: Path) -> Path:
        root = _git_output(["rev-parse", "--show-toplevel"], cwd)
        if root is None:
            raise NotInGitRepository(cwd)
        return Path(root)

    def get_current_branch(self, cwd: Path) -> str | None:
        branch = _git_output(["rev-parse", "--abbrev-ref", "HEAD"], cwd)
        if branch is None or branch == "HEAD":
            return None
        return branch

    def get_tracking_info(self, cwd: Path) -> TrackingInfo | None:
        branch = self.get_current_branch(cwd)
        if branch is None:
            return None

        remote = _git_output(["config", "--get", f"branch.{branch}.remote"], cwd)
        merge_ref = _git_output(["config", "--get", f"branch.{branch}.merge"], cwd)
        # "." means the upstream is another local branch
        if remote is None or merge_ref is None or remote == ".":
            logger.debug("Branch %s has no remote upstream", branch)
            return None

        # Prefer the remote-tracking ref; fall back to the branch tip if never fetched
        tip = _git_output(["rev-parse", "--verify", "--quiet", f"{branch}@{{upstream}}"], cwd)
        if tip is None:
            tip = _git_output(["rev-parse", "--verify", "--quiet", branch], cwd)
        if tip is None:
            return None

        logger.debug("Tracking info: remote=%s merge=%s tip=%s", remote, merge_ref, tip)
        return TrackingInfo(
            remote_name=remote,
            upstream_ref_canonical_name=merge_ref,
            local_tip_commit_id=tip,
        )

    def get_remote_url(self, repo_root: Path, remote_name: str) -> str | None:
        return _git_output(["remote", "get-url", remote_name], repo_root)
