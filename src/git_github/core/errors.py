"""Error taxonomy for git-github.

Every error is terminal for the current command. Lower layers raise these,
intermediate layers let them propagate, and the CLI boundary renders them.
"""


class GitGitHubError(Exception):
    """Base class for all user-facing git-github failures."""


class MalformedRemoteUrl(GitGitHubError):
    """Remote URL has no recognizable owner/repository path."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Could not parse owner/repository from remote URL '{url}'")
        self.url = url


class UnknownSecretStore(GitGitHubError):
    """Configured secret store name does not match a known store kind."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown secret store '{value}'")
        self.value = value


class CredentialsNotFound(GitGitHubError):
    """The secret store has no credential for the target URL."""

    def __init__(self, target_url: str) -> None:
        super().__init__(
            f"Couldn't find credentials for {target_url}\n"
            "Sign in with 'git-github login' and try again."
        )
        self.target_url = target_url


class NoTrackedRemoteBranch(GitGitHubError):
    """Current branch does not track a remote branch."""

    def __init__(self, branch: str | None) -> None:
        if branch is None:
            message = "HEAD is detached and is not tracking a remote branch"
        else:
            message = f"Branch '{branch}' is not tracking a remote branch"
        super().__init__(message)
        self.branch = branch


class UnsupportedRefKind(GitGitHubError):
    """Upstream ref is not a branch (for example a tag)."""

    def __init__(self, canonical_name: str) -> None:
        super().__init__(f"Upstream '{canonical_name}' is not a branch")
        self.canonical_name = canonical_name


class RemoteQueryFailed(GitGitHubError):
    """The GraphQL request failed at the transport or API level."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"GitHub query failed: {detail}")
        self.detail = detail


class IncompleteCredentialResponse(GitGitHubError):
    """Credential helper output lacked a required key."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(
            "Credential helper response is missing: " + ", ".join(missing)
        )
        self.missing = missing


class CredentialHelperFailed(GitGitHubError):
    """Credential helper could not be started or exited with an error."""


class NotInGitRepository(GitGitHubError):
    """Working directory is not inside a Git repository."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path


class InvalidHostUrl(GitGitHubError):
    """Host URL lacks a scheme or authority."""

    def __init__(self, url: str) -> None:
        super().__init__(f"Invalid host URL '{url}' (expected e.g. https://github.com)")
        self.url = url


class CommandFailed(GitGitHubError):
    """An external command could not be run or exited with an error."""

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(f"Failed to {operation}: {detail}")
        self.operation = operation
        self.detail = detail


class InvalidConfigFile(GitGitHubError):
    """Config file exists but cannot be parsed."""

    def __init__(self, path: object, detail: str) -> None:
        super().__init__(f"Invalid config file {path}: {detail}")
        self.path = path
        self.detail = detail
