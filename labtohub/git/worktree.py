"""Temporary worktree lifecycle."""

import shutil
from contextlib import contextmanager

import click

from .core import GitCommandError


def remove_worktree(git, path):
    """Best-effort removal of a worktree registration and its directory."""
    try:
        git.status("worktree", "remove", "--force", path, check=False)
    except GitCommandError:
        pass
    shutil.rmtree(git.resolve(path), ignore_errors=True)


@contextmanager
def temporary_worktree(git, path, branch, start_point):
    """
    Add a worktree at `path` on a (re)created `branch` from `start_point`.

    The worktree is removed on every exit from the `with` block. If adding it
    fails nothing has been acquired, so nothing is cleaned up.
    """
    click.echo(f"Adding temporary worktree '{path}' from {start_point}...")
    git.run("worktree", "add", "--force", "-B", branch, path, start_point)
    try:
        yield git.at(path)
    finally:
        remove_worktree(git, path)
