"""Git utilities package."""

from .core import Git, GitCommandError
from .refs import (
    MergeBaseFailure,
    classify_merge_base_failure,
    has_staged_changes,
    merge_base,
    remote_branch_exists,
)
from .sync import SyncResult, parse_ahead_behind, resolve_divergence
from .worktree import remove_worktree, temporary_worktree

__all__ = [
    "Git",
    "GitCommandError",
    "MergeBaseFailure",
    "classify_merge_base_failure",
    "has_staged_changes",
    "merge_base",
    "remote_branch_exists",
    "SyncResult",
    "parse_ahead_behind",
    "resolve_divergence",
    "remove_worktree",
    "temporary_worktree",
]
