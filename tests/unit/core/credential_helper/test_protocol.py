"""Tests for the credential helper key=value protocol."""

import pytest

from git_github.core.credential_helper.protocol import (
    build_request,
    credential_from_response,
    format_request,
    parse_response,
)
from git_github.core.credentials.types import Credential
from git_github.core.errors import IncompleteCredentialResponse, InvalidHostUrl


def test_build_request_derives_protocol_host_and_path() -> None:
    assert build_request("https://github.com") == {
        "protocol": "https",
        "host": "github.com",
        "path": "/",
    }
    assert build_request("https://ghe.example.com:8443/org") == {
        "protocol": "https",
        "host": "ghe.example.com:8443",
        "path": "/org",
    }


def test_build_request_rejects_invalid_host() -> None:
    with pytest.raises(InvalidHostUrl):
        build_request("github.com")


def test_format_request_writes_one_line_per_property() -> None:
    request = {"protocol": "https", "host": "github.com", "path": "/"}

    assert format_request(request) == "protocol=https\nhost=github.com\npath=/\n"


def test_parse_response_splits_on_first_equals_only() -> None:
    """A value containing "=" is kept whole rather than rejected."""
    properties = parse_response(["username=alice\n", "password=tok_123\n", "extra=ignored=me\n"])

    assert properties == {"username": "alice", "password": "tok_123", "extra": "ignored=me"}


def test_parse_response_keeps_base64_padding_in_token() -> None:
    properties = parse_response(["password=dG9rZW4=\n"])

    assert properties["password"] == "dG9rZW4="


def test_parse_response_skips_lines_without_key() -> None:
    properties = parse_response(["garbage\n", "\n", "=novalue\n", "username=alice\r\n"])

    assert properties == {"username": "alice"}


def test_parse_response_allows_empty_value() -> None:
    assert parse_response(["path=\n"]) == {"path": ""}


def test_fill_scenario_with_malformed_extra_line() -> None:
    properties = parse_response(["username=alice", "password=tok_123", "extra=ignored=me"])

    assert credential_from_response(properties) == Credential(
        username="alice", password="tok_123"
    )


@pytest.mark.parametrize(
    ("properties", "missing"),
    [
        ({}, ["username", "password"]),
        ({"username": "alice"}, ["password"]),
        ({"password": "tok_123"}, ["username"]),
    ],
)
def test_credential_from_response_requires_username_and_password(
    properties: dict[str, str], missing: list[str]
) -> None:
    with pytest.raises(IncompleteCredentialResponse) as exc_info:
        credential_from_response(properties)

    assert exc_info.value.missing == missing
