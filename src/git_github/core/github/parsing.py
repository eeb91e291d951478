"""Parsing of GitHub GraphQL response payloads into typed results.

Nullable GraphQL objects (author, parent, head/base repository, ref) become
None rather than placeholder strings.
"""

from datetime import datetime
from typing import Any

from git_github.core.github.types import (
    Organization,
    PullRequestSummary,
    RemoteRefStatus,
    Viewer,
    ViewerItem,
)


def _optional_field(obj: dict[str, Any] | None, key: str) -> str | None:
    """Read key from a nullable nested object."""
    if obj is None:
        return None
    return obj.get(key)


def parse_timestamp(value: str) -> datetime:
    """Parse a GraphQL DateTime such as "2024-03-01T12:00:00Z"."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def parse_pull_request_summary(node: dict[str, Any]) -> PullRequestSummary:
    return PullRequestSummary(
        number=node["number"],
        title=node["title"],
        url=node["url"],
        author=_optional_field(node.get("author"), "login"),
        created_at=parse_timestamp(node["createdAt"]),
        author_association=node["authorAssociation"],
        state=node["state"],
        head_ref_name=node["headRefName"],
        head_repository_full_name=_optional_field(node.get("headRepository"), "nameWithOwner"),
        base_ref_name=node["baseRefName"],
        base_repository_full_name=_optional_field(node.get("baseRepository"), "nameWithOwner"),
    )


def parse_remote_ref_status(repository: dict[str, Any]) -> RemoteRefStatus:
    """Parse the `repository` object of the remote ref status query."""
    ref = repository.get("ref")
    target = ref.get("target") if ref is not None else None
    nodes = repository["pullRequests"]["nodes"] or []

    return RemoteRefStatus(
        repository_full_name=repository["nameWithOwner"],
        parent_full_name=_optional_field(repository.get("parent"), "nameWithOwner"),
        remote_target_commit_id=_optional_field(target, "oid"),
        associated_pull_requests=tuple(
            parse_pull_request_summary(node) for node in nodes if node is not None
        ),
    )


def parse_viewer_items(nodes: list[dict[str, Any] | None]) -> list[ViewerItem]:
    """Parse viewer pull request or issue nodes."""
    return [
        ViewerItem(
            repository_full_name=node["repository"]["nameWithOwner"],
            title=node["title"],
            number=node["number"],
            author=_optional_field(node.get("author"), "login"),
            created_at=parse_timestamp(node["createdAt"]),
        )
        for node in nodes
        if node is not None
    ]


def parse_viewer(viewer: dict[str, Any]) -> Viewer:
    return Viewer(
        login=viewer["login"],
        name=viewer.get("name") or None,
        email=viewer.get("email") or None,
    )


def parse_organizations(nodes: list[dict[str, Any] | None]) -> list[Organization]:
    return [
        Organization(
            login=node["login"],
            name=node.get("name") or None,
            description=node.get("description") or None,
            url=node["url"],
        )
        for node in nodes
        if node is not None
    ]
