"""Credential helper bridge running `git credential-manager` as a subprocess."""

import logging
import os
import subprocess

from git_github.core.credential_helper.abc import CredentialHelper
from git_github.core.credential_helper.protocol import (
    build_request,
    credential_from_response,
    format_request,
    parse_response,
)
from git_github.core.credentials.types import Credential
from git_github.core.errors import CredentialHelperFailed

logger = logging.getLogger(__name__)

AUTHORITY_ENV_VAR = "GCM_AUTHORITY"
AUTHORITY = "GitHub"


class RealCredentialHelper(CredentialHelper):
    """Production implementation invoking `git credential-manager <command>`."""

    def __init__(self, helper_cmd: list[str] | None = None) -> None:
        """Initialize with an optional helper command prefix.

        Args:
            helper_cmd: Command prefix the subcommand is appended to.
                        Defaults to ["git", "credential-manager"].
        """
        self._helper_cmd = helper_cmd or ["git", "credential-manager"]

    def fill(self, host_url: str) -> Credential:
        properties = self._run("fill", build_request(host_url))
        return credential_from_response(properties)

    def reject(self, host_url: str) -> None:
        self._run("reject", build_request(host_url))

    def _run(self, command: str, request: dict[str, str]) -> dict[str, str]:
        cmd = [*self._helper_cmd, command]
        env = dict(os.environ)
        env[AUTHORITY_ENV_VAR] = AUTHORITY
        logger.debug("Running credential helper: %s (host=%s)", " ".join(cmd), request["host"])

        try:
            # Popen's context manager closes all pipes and waits on every exit path
            with subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                env=env,
            ) as process:
                assert process.stdin is not None
                assert process.stdout is not None
                process.stdin.write(format_request(request))
                process.stdin.close()
                properties = parse_response(process.stdout)
                returncode = process.wait()
        except FileNotFoundError as e:
            raise CredentialHelperFailed(
                f"Credential helper not found while trying to {command}: {cmd[0]}"
            ) from e
        except BrokenPipeError as e:
            raise CredentialHelperFailed(
                f"Credential helper exited before reading the {command} request"
            ) from e

        if returncode != 0:
            raise CredentialHelperFailed(
                f"Credential helper '{' '.join(cmd)}' exited with code {returncode}"
            )

        logger.debug("Credential helper returned keys: %s", sorted(properties))
        return properties
