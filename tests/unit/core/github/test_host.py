"""Tests for host URL to GraphQL endpoint mapping."""

import pytest

from git_github.core.errors import InvalidHostUrl
from git_github.core.github.host import graphql_endpoint, host_name


@pytest.mark.parametrize(
    ("host_url", "endpoint"),
    [
        ("https://github.com", "https://api.github.com/graphql"),
        ("https://GitHub.com/", "https://api.github.com/graphql"),
        ("https://ghe.example.com", "https://ghe.example.com/api/graphql"),
        ("http://ghe.local:8080/", "http://ghe.local:8080/api/graphql"),
    ],
)
def test_graphql_endpoint(host_url: str, endpoint: str) -> None:
    assert graphql_endpoint(host_url) == endpoint


def test_graphql_endpoint_rejects_bare_host() -> None:
    with pytest.raises(InvalidHostUrl):
        graphql_endpoint("github.com")


def test_host_name_drops_port_and_user() -> None:
    assert host_name("https://bob@GHE.example.com:8443/x") == "ghe.example.com"
