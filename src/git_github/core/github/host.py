"""Mapping from a GitHub host URL to its API endpoints."""

from urllib.parse import urlsplit

from git_github.core.errors import InvalidHostUrl

DOTCOM_HOST = "github.com"
DOTCOM_GRAPHQL_URL = "https://api.github.com/graphql"


def graphql_endpoint(host_url: str) -> str:
    """Get the GraphQL endpoint for a host.

    github.com is served from api.github.com; GitHub Enterprise Server
    exposes the API under /api/graphql on the host itself.

    Example:
        >>> graphql_endpoint("https://github.com")
        'https://api.github.com/graphql'
        >>> graphql_endpoint("https://ghe.example.com/")
        'https://ghe.example.com/api/graphql'
    """
    parts = urlsplit(host_url.strip())
    if not parts.scheme or not parts.netloc:
        raise InvalidHostUrl(host_url)

    hostname = (parts.hostname or "").lower()
    if hostname in (DOTCOM_HOST, f"www.{DOTCOM_HOST}"):
        return DOTCOM_GRAPHQL_URL
    return f"{parts.scheme}://{parts.netloc}/api/graphql"


def host_name(host_url: str) -> str:
    """Lowercased host name of a host URL, without port or user info."""
    return (urlsplit(host_url.strip()).hostname or "").lower()
