"""Parsing of Git remote URLs into host/owner/repository."""

import re
from dataclasses import dataclass

from git_github.core.errors import MalformedRemoteUrl

# git@github.com:owner/repo.git
_SCP_PATTERN = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")
# https://github.com/owner/repo.git, ssh://git@github.com:22/owner/repo.git
_URL_PATTERN = re.compile(
    r"^[a-zA-Z][a-zA-Z0-9+.-]*://(?:[^@/]+@)?(?P<host>[^/:]+)(?::\d+)?/(?P<path>.*)$"
)


@dataclass(frozen=True)
class RemoteLocation:
    """Repository coordinates extracted from a remote URL."""

    host: str
    owner: str
    repository_name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repository_name}"


def parse_remote_url(url: str) -> RemoteLocation:
    """Parse an SSH (scp-like or ssh://) or HTTPS remote URL.

    Examples:
        >>> parse_remote_url("git@github.com:acme/widgets.git")
        RemoteLocation(host='github.com', owner='acme', repository_name='widgets')
        >>> parse_remote_url("https://github.com/acme/widgets")
        RemoteLocation(host='github.com', owner='acme', repository_name='widgets')

    Raises:
        MalformedRemoteUrl: If no owner/repository segment can be found
    """
    stripped = url.strip()
    match = _URL_PATTERN.match(stripped) or _SCP_PATTERN.match(stripped)
    if match is None:
        raise MalformedRemoteUrl(url)

    segments = [s for s in match.group("path").split("/") if s]
    if len(segments) < 2:
        raise MalformedRemoteUrl(url)

    owner, name = segments[-2], segments[-1]
    name = name.removesuffix(".git")
    if not name:
        raise MalformedRemoteUrl(url)

    return RemoteLocation(host=match.group("host"), owner=owner, repository_name=name)
