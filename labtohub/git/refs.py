"""Ref queries: remote branch existence, merge bases, staged diffs."""

import enum

from ..config import UNRELATED_HISTORY_PATTERNS
from .core import GitCommandError


class MergeBaseFailure(enum.Enum):
    UNRELATED_HISTORIES = "unrelated-histories"
    FATAL = "fatal"


def remote_branch_exists(git, remote, branch):
    """Return True if `remote` has `branch`; exit code 2 means it does not."""
    code = git.status(
        "ls-remote", "--exit-code", "--heads", remote, f"refs/heads/{branch}",
        ok_codes=(0, 2),
    )
    return code == 0


def classify_merge_base_failure(stderr, stdout=""):
    """
    Decide whether a failed `git merge-base` means "no shared history".

    git exits 1 with no output at all when two commits have no common
    ancestor, so empty output counts as unrelated too.
    """
    stderr = (stderr or "").strip()
    stdout = (stdout or "").strip()
    if not stderr and not stdout:
        return MergeBaseFailure.UNRELATED_HISTORIES
    text = f"{stderr}\n{stdout}"
    if any(pattern in text for pattern in UNRELATED_HISTORY_PATTERNS):
        return MergeBaseFailure.UNRELATED_HISTORIES
    return MergeBaseFailure.FATAL


def merge_base(git, ref_a, ref_b):
    """Return the merge base of two refs, or None for unrelated histories."""
    try:
        return git.capture("merge-base", ref_a, ref_b)
    except GitCommandError as exc:
        if exc.returncode is None:
            raise
        verdict = classify_merge_base_failure(exc.stderr, exc.stdout)
        if verdict is MergeBaseFailure.UNRELATED_HISTORIES:
            return None
        raise GitCommandError(
            exc.command,
            exc.returncode,
            stderr=f"merge-base {ref_a} {ref_b} failed: {exc.stderr.strip()}",
        ) from exc


def has_staged_changes(git):
    """True if the index differs from HEAD."""
    return git.status("diff", "--cached", "--quiet", ok_codes=(0, 1)) == 1
