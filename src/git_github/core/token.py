"""Bearer token resolution from the configured secret store."""

import logging
from urllib.parse import urlsplit

from git_github.core.credentials.abc import CredentialStore
from git_github.core.errors import CredentialsNotFound, InvalidHostUrl

logger = logging.getLogger(__name__)


def normalize_target_url(host_url: str) -> str:
    """Reduce a host URL to scheme://authority, dropping path, query and fragment.

    Raises:
        InvalidHostUrl: If the URL has no scheme or authority
    """
    parts = urlsplit(host_url.strip())
    if not parts.scheme or not parts.netloc:
        raise InvalidHostUrl(host_url)
    return f"{parts.scheme}://{parts.netloc}"


def resolve_token(host_url: str, store: CredentialStore) -> str:
    """Resolve the bearer token for a host from a secret store.

    Only the local store is consulted; no network calls are made.

    Args:
        host_url: Host URL, e.g. "https://github.com" or "https://github.com/acme"
        store: Secret store selected from configuration

    Returns:
        The password/token field of the stored credential

    Raises:
        CredentialsNotFound: If the store has no credential for the host
    """
    target_url = normalize_target_url(host_url)
    credential = store.lookup(target_url)
    if credential is None:
        raise CredentialsNotFound(target_url)

    logger.debug("Resolved credential for %s (user %s)", target_url, credential.username)
    return credential.password
