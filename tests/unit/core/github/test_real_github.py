"""Tests for RealGitHub request building and error mapping."""

from typing import Any
from unittest.mock import Mock

import pytest
import requests

from git_github.core.credentials.fake import FakeCredentialStore
from git_github.core.credentials.types import Credential
from git_github.core.errors import CredentialsNotFound, RemoteQueryFailed
from git_github.core.github.real import RealGitHub


def make_response(status_code: int = 200, payload: Any = None) -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = "body"
    response.json.return_value = payload
    return response


def make_github(
    session: Mock, host_url: str = "https://github.com", token: str = "tok_123"
) -> RealGitHub:
    store = FakeCredentialStore(
        credentials={host_url.rstrip("/"): Credential(username="alice", password=token)}
    )
    return RealGitHub(host_url, store, session=session)


def test_remote_ref_status_posts_query_with_bearer_token() -> None:
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(
        payload={
            "data": {
                "repository": {
                    "nameWithOwner": "acme/widgets",
                    "parent": None,
                    "ref": {"target": {"oid": "abc123"}},
                    "pullRequests": {"nodes": []},
                }
            }
        }
    )

    status = make_github(session).get_remote_ref_status(
        "acme", "widgets", qualified_ref_name="refs/heads/feature-x", head_ref_name="feature-x"
    )

    assert status.remote_target_commit_id == "abc123"
    args, kwargs = session.post.call_args
    assert args == ("https://api.github.com/graphql",)
    assert kwargs["headers"]["Authorization"] == "Bearer tok_123"
    assert kwargs["json"]["variables"] == {
        "owner": "acme",
        "name": "widgets",
        "qualifiedName": "refs/heads/feature-x",
        "headRefName": "feature-x",
    }
    query = kwargs["json"]["query"]
    assert "first: 100" in query
    assert "states: [OPEN, CLOSED, MERGED]" in query
    assert "direction: DESC" in query


def test_enterprise_host_uses_api_path() -> None:
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(
        payload={"data": {"viewer": {"login": "alice", "name": None, "email": None}}}
    )

    viewer = make_github(session, host_url="https://ghe.example.com").get_viewer()

    assert viewer.login == "alice"
    assert session.post.call_args.args == ("https://ghe.example.com/api/graphql",)


def test_missing_credentials_fail_before_any_request() -> None:
    session = Mock(spec=requests.Session)
    github = RealGitHub("https://github.com", FakeCredentialStore(), session=session)

    with pytest.raises(CredentialsNotFound):
        github.get_viewer()

    session.post.assert_not_called()


def test_transport_error_is_remote_query_failed() -> None:
    session = Mock(spec=requests.Session)
    session.post.side_effect = requests.exceptions.ConnectionError("connection reset")

    with pytest.raises(RemoteQueryFailed, match="connection reset"):
        make_github(session).get_viewer_pull_requests()

    assert session.post.call_count == 1


def test_http_error_status_is_remote_query_failed() -> None:
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(status_code=401)

    with pytest.raises(RemoteQueryFailed, match="HTTP 401"):
        make_github(session).get_viewer_issues()


def test_graphql_errors_are_remote_query_failed() -> None:
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(
        payload={
            "data": {"repository": None},
            "errors": [{"message": "Could not resolve to a Repository"}],
        }
    )

    with pytest.raises(RemoteQueryFailed, match="Could not resolve"):
        make_github(session).get_remote_ref_status(
            "acme", "nope", qualified_ref_name="refs/heads/x", head_ref_name="x"
        )


def test_token_is_resolved_once_per_instance() -> None:
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(
        payload={"data": {"viewer": {"organizations": {"nodes": []}}}}
    )
    store = FakeCredentialStore(
        credentials={"https://github.com": Credential(username="alice", password="tok")}
    )
    github = RealGitHub("https://github.com", store, session=session)

    github.get_viewer_organizations()
    github.get_viewer_organizations()

    assert store.lookup_calls == ["https://github.com"]
