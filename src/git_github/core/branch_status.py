"""Resolution of the current branch against its GitHub remote.

Given the local tracking relationship and the remote URL, one query fetches the
repository, its fork parent, the remote target of the tracked ref and the pull
requests opened from a branch of the same name. Only pull requests whose head
lives in the resolved repository itself are reported.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from git_github.core.errors import NoTrackedRemoteBranch, UnsupportedRefKind
from git_github.core.git.abc import Git, TrackingInfo
from git_github.core.github.abc import GitHub
from git_github.core.github.types import PullRequestSummary
from git_github.core.remote_url import parse_remote_url

logger = logging.getLogger(__name__)

LOCAL_BRANCH_PREFIX = "refs/heads/"


@dataclass(frozen=True)
class BranchReport:
    """Outcome of resolving a tracking branch against GitHub."""

    branch_name: str
    repository_full_name: str
    parent_full_name: str | None
    up_to_date: bool
    pull_requests: tuple[PullRequestSummary, ...]


def branch_name_from_ref(canonical_name: str) -> str | None:
    """Strip the local-branches prefix from a canonical ref name.

    Returns:
        Plain branch name, or None if the ref is not under refs/heads/
    """
    if not canonical_name.startswith(LOCAL_BRANCH_PREFIX):
        return None
    name = canonical_name.removeprefix(LOCAL_BRANCH_PREFIX)
    return name or None


def is_up_to_date(local_tip_commit_id: str, remote_target_commit_id: str | None) -> bool:
    """Commit id equality only; ancestry is not considered."""
    return remote_target_commit_id is not None and local_tip_commit_id == remote_target_commit_id


def filter_same_repository(
    pull_requests: Iterable[PullRequestSummary], repository_full_name: str
) -> tuple[PullRequestSummary, ...]:
    """Keep pull requests whose head repository is the given repository, preserving order."""
    return tuple(
        pr for pr in pull_requests if pr.head_repository_full_name == repository_full_name
    )


def read_tracking_info(git: Git, cwd: Path) -> TrackingInfo:
    """Read the checked-out branch's tracking info.

    Raises:
        NoTrackedRemoteBranch: If HEAD is detached or tracks no remote branch
    """
    tracking = git.get_tracking_info(cwd)
    if tracking is None:
        raise NoTrackedRemoteBranch(git.get_current_branch(cwd))
    return tracking


def resolve_branch_status(tracking: TrackingInfo, remote_url: str, github: GitHub) -> BranchReport:
    """Resolve a tracking branch into a BranchReport.

    Args:
        tracking: Tracking relationship of the checked-out branch
        remote_url: URL of the tracked remote
        github: Query gateway; its failures propagate unchanged

    Raises:
        UnsupportedRefKind: If the upstream is not a branch (e.g. refs/tags/v1)
        MalformedRemoteUrl: If the remote URL has no owner/repository
        RemoteQueryFailed: If the query fails
    """
    branch_name = branch_name_from_ref(tracking.upstream_ref_canonical_name)
    if branch_name is None:
        raise UnsupportedRefKind(tracking.upstream_ref_canonical_name)

    location = parse_remote_url(remote_url)
    logger.debug("Resolving %s on %s/%s", branch_name, location.owner, location.repository_name)

    status = github.get_remote_ref_status(
        location.owner,
        location.repository_name,
        qualified_ref_name=tracking.upstream_ref_canonical_name,
        head_ref_name=branch_name,
    )

    pull_requests = filter_same_repository(
        status.associated_pull_requests, status.repository_full_name
    )
    logger.debug(
        "Pull requests: %d associated, %d from %s",
        len(status.associated_pull_requests),
        len(pull_requests),
        status.repository_full_name,
    )

    return BranchReport(
        branch_name=branch_name,
        repository_full_name=status.repository_full_name,
        parent_full_name=status.parent_full_name,
        up_to_date=is_up_to_date(tracking.local_tip_commit_id, status.remote_target_commit_id),
        pull_requests=pull_requests,
    )
