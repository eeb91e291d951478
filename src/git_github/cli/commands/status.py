"""Status command - current branch compared with its GitHub remote."""

import click

from git_github.cli.ensure import Ensure, handle_errors
from git_github.cli.output import format_long_date, machine_output, user_output
from git_github.core.branch_status import BranchReport, read_tracking_info, resolve_branch_status
from git_github.core.context import GitGitHubContext
from git_github.core.errors import MalformedRemoteUrl
from git_github.core.github.host import host_name
from git_github.core.github.types import PullRequestSummary
from git_github.core.remote_url import parse_remote_url


def _warn_on_host_mismatch(remote_name: str, remote_url: str, host_url: str) -> None:
    try:
        location = parse_remote_url(remote_url)
    except MalformedRemoteUrl:
        # resolve_branch_status reports it after validating the ref kind
        return
    if location.host.lower() != host_name(host_url):
        user_output(
            click.style("Warning: ", fg="yellow")
            + f"remote '{remote_name}' is on {location.host} but queries go to {host_url}"
        )


def _format_pull_request(pr: PullRequestSummary) -> list[str]:
    author = pr.author if pr.author is not None else "ghost"
    base = pr.base_ref_name
    if pr.base_repository_full_name is not None:
        base = f"{pr.base_repository_full_name}:{pr.base_ref_name}"
    return [
        f"#{pr.number} [{pr.state}] {pr.title}",
        f"    {pr.url}",
        f"    {author} ({pr.author_association}) opened on {format_long_date(pr.created_at)}",
        f"    {pr.head_ref_name} -> {base}",
    ]


def render_branch_report(report: BranchReport) -> list[str]:
    lines = [f"Repository: {report.repository_full_name}"]
    if report.parent_full_name is not None:
        lines.append(f"Forked from: {report.parent_full_name}")

    if report.up_to_date:
        lines.append(click.style(f"Branch '{report.branch_name}' is up to date", fg="green"))
    else:
        lines.append(click.style(f"New commits available on '{report.branch_name}'", fg="yellow"))

    lines.append("")
    if not report.pull_requests:
        lines.append(f"No pull requests from '{report.branch_name}'")
        return lines

    lines.append("Pull requests:")
    for pr in report.pull_requests:
        lines.extend(_format_pull_request(pr))
    return lines


@click.command("status")
@click.pass_obj
@handle_errors
def status_cmd(ctx: GitGitHubContext) -> None:
    """Show GitHub status of the current branch and its pull requests."""
    repo_root = ctx.git.get_repository_root(ctx.cwd)
    tracking = read_tracking_info(ctx.git, ctx.cwd)
    remote_url = Ensure.not_none(
        ctx.git.get_remote_url(repo_root, tracking.remote_name),
        f"Remote '{tracking.remote_name}' has no URL configured",
    )
    _warn_on_host_mismatch(tracking.remote_name, remote_url, ctx.host)

    report = resolve_branch_status(tracking, remote_url, ctx.github)
    for line in render_branch_report(report):
        machine_output(line)
