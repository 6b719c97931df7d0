"""labtohub: publish a private git history to a public mirror remote."""

# Re-export the public API for library-style usage (and tests).
from .cli import cli, main, publish_command, squash_command
from .config import Settings, __version__
from .git import (  # noqa: F401
    Git,
    GitCommandError,
    MergeBaseFailure,
    SyncResult,
    classify_merge_base_failure,
    has_staged_changes,
    merge_base,
    parse_ahead_behind,
    remote_branch_exists,
    remove_worktree,
    resolve_divergence,
    temporary_worktree,
)
from .naming import branch_name_from_message
from .pipeline import Outcome, RunAborted
from .publish import WorktreePublisher
from .squash import SquashPublisher

__all__ = [
    "__version__",
    "Settings",
    # CLI
    "cli",
    "main",
    "publish_command",
    "squash_command",
    # Git
    "Git",
    "GitCommandError",
    "MergeBaseFailure",
    "SyncResult",
    "classify_merge_base_failure",
    "has_staged_changes",
    "merge_base",
    "parse_ahead_behind",
    "remote_branch_exists",
    "remove_worktree",
    "resolve_divergence",
    "temporary_worktree",
    # Naming
    "branch_name_from_message",
    # Pipelines
    "Outcome",
    "RunAborted",
    "WorktreePublisher",
    "SquashPublisher",
]
