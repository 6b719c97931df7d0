"""Configuration constants and settings for labtohub."""

import os
from dataclasses import dataclass

__version__ = "0.1.0"

PRIMARY_REMOTE = "origin"
MIRROR_REMOTE = "github"
MAIN_BRANCH = "main"
TMP_WORKTREE = ".labtohub-tmp"
MAIN_STAGING_BRANCH = "labtohub-main"

FALLBACK_BRANCH_NAME = "new"

# Substrings in `git merge-base` failures that mean "no shared history".
UNRELATED_HISTORY_PATTERNS = (
    "no merge base",
    "no common ancestor",
    "unrelated histories",
    "Not a valid object name",
    "not a valid commit",
)


@dataclass(frozen=True)
class Settings:
    """Remote aliases, branch names and scratch paths used by both tools."""

    primary_remote: str = PRIMARY_REMOTE
    mirror_remote: str = MIRROR_REMOTE
    branch: str = MAIN_BRANCH
    worktree_path: str = TMP_WORKTREE
    staging_branch: str = MAIN_STAGING_BRANCH

    @property
    def primary_ref(self):
        return f"{self.primary_remote}/{self.branch}"

    @property
    def mirror_ref(self):
        return f"{self.mirror_remote}/{self.branch}"

    @classmethod
    def from_env(cls, environ=None):
        """Build settings, letting LABTOHUB_* variables rename the remotes."""
        env = os.environ if environ is None else environ
        return cls(
            primary_remote=env.get("LABTOHUB_PRIMARY_REMOTE") or PRIMARY_REMOTE,
            mirror_remote=env.get("LABTOHUB_MIRROR_REMOTE") or MIRROR_REMOTE,
        )
