"""Bring a local branch back in line with its remote counterpart."""

import enum

import click

from .core import GitCommandError


class SyncResult(enum.Enum):
    FAST_FORWARDED = "fast-forwarded"
    RESET = "reset"
    DECLINED = "declined"


def parse_ahead_behind(text):
    """
    Parse `git rev-list --left-right --count` output into (ahead, behind).

    Missing or non-numeric fields count as 0.
    """
    fields = (text or "").split()
    counts = []
    for field in fields[:2]:
        try:
            counts.append(max(0, int(field)))
        except ValueError:
            counts.append(0)
    counts += [0] * (2 - len(counts))
    return counts[0], counts[1]


def resolve_divergence(git, settings, confirm=click.confirm):
    """
    Fast-forward the local branch from the primary remote, or offer a hard reset.

    Returns a SyncResult. Declining the reset leaves the local branch untouched.
    """
    branch = settings.branch
    remote_ref = settings.primary_ref
    try:
        git.run("pull", "--ff-only", settings.primary_remote, branch)
        return SyncResult.FAST_FORWARDED
    except GitCommandError:
        click.secho(
            f"Local {branch} cannot be fast-forwarded to {remote_ref}.",
            fg="yellow",
            err=True,
        )

    counts = git.capture("rev-list", "--left-right", "--count", f"{branch}...{remote_ref}")
    ahead, behind = parse_ahead_behind(counts)
    click.echo(f"Local {branch} is {ahead} commit(s) ahead and {behind} behind {remote_ref}.")
    if not confirm(
        f"Reset local {branch} to {remote_ref}? Local-only commits will be lost.",
        default=False,
    ):
        return SyncResult.DECLINED

    git.run("reset", "--hard", remote_ref)
    return SyncResult.RESET
