"""Type definitions for GitHub GraphQL results."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

PRState = Literal["OPEN", "CLOSED", "MERGED"]


@dataclass(frozen=True)
class PullRequestSummary:
    """A pull request associated with a branch name."""

    number: int
    title: str
    url: str
    author: str | None  # None when the author account was deleted
    created_at: datetime
    author_association: str  # "OWNER", "MEMBER", "CONTRIBUTOR", "NONE", ...
    state: PRState
    head_ref_name: str
    head_repository_full_name: str | None  # None when the head fork was deleted
    base_ref_name: str
    base_repository_full_name: str | None


@dataclass(frozen=True)
class RemoteRefStatus:
    """Remote state of a repository and one of its branches."""

    repository_full_name: str
    parent_full_name: str | None  # None unless the repository is a fork
    remote_target_commit_id: str | None  # None when the ref does not exist remotely
    associated_pull_requests: tuple[PullRequestSummary, ...]


@dataclass(frozen=True)
class ViewerItem:
    """A pull request or issue listed for the signed-in user."""

    repository_full_name: str
    title: str
    number: int
    author: str | None
    created_at: datetime


@dataclass(frozen=True)
class Viewer:
    """Identity of the signed-in user."""

    login: str
    name: str | None
    email: str | None  # Empty public email is normalized to None


@dataclass(frozen=True)
class Organization:
    """Organization the signed-in user belongs to."""

    login: str
    name: str | None
    description: str | None
    url: str
