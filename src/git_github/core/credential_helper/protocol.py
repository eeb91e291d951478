"""Line-oriented key=value protocol spoken with Git credential helpers.

Request lines are written to the helper's stdin, which is then closed.
Response lines are read from stdout until EOF.
"""

from collections.abc import Iterable
from urllib.parse import urlsplit

from git_github.core.credentials.types import Credential
from git_github.core.errors import IncompleteCredentialResponse, InvalidHostUrl

REQUIRED_FILL_KEYS = ("username", "password")


def build_request(host_url: str) -> dict[str, str]:
    """Derive protocol/host/path request properties from a host URL.

    Example:
        >>> build_request("https://github.com")
        {'protocol': 'https', 'host': 'github.com', 'path': '/'}
    """
    parts = urlsplit(host_url.strip())
    if not parts.scheme or not parts.netloc:
        raise InvalidHostUrl(host_url)
    return {
        "protocol": parts.scheme,
        "host": parts.netloc,
        "path": parts.path or "/",
    }


def format_request(properties: dict[str, str]) -> str:
    return "".join(f"{key}={value}\n" for key, value in properties.items())


def parse_response(lines: Iterable[str]) -> dict[str, str]:
    """Parse helper output into a property mapping.

    Each line is split on its first "=" only, so values may themselves contain
    "=" (tokens often do). Lines without "=" are skipped. Later keys win.
    """
    properties: dict[str, str] = {}
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        key, sep, value = line.partition("=")
        if not sep or not key:
            continue
        properties[key] = value
    return properties


def credential_from_response(properties: dict[str, str]) -> Credential:
    """Build a Credential from a fill response.

    Raises:
        IncompleteCredentialResponse: If username or password is absent
    """
    missing = [key for key in REQUIRED_FILL_KEYS if key not in properties]
    if missing:
        raise IncompleteCredentialResponse(missing)
    return Credential(username=properties["username"], password=properties["password"])
