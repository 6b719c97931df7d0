"""Publish the primary remote's main onto the mirror through a temporary worktree."""

import enum

import click

from .git import has_staged_changes, remove_worktree, temporary_worktree
from .naming import branch_name_from_message
from .pipeline import Outcome, Pipeline, RunAborted
from .ui import format_plan, report_done


class Step(enum.Enum):
    INPUT = "input"
    FETCH = "fetch"
    TEARDOWN_PRIOR = "teardown-prior"
    CREATE = "create"
    BRANCH = "branch"
    OVERLAY = "overlay"
    COMMIT = "commit"
    MERGE = "merge"
    PUBLISH = "publish"
    CLEANUP = "cleanup"


class WorktreePublisher(Pipeline):
    """
    Copy `origin/main` onto `github/main` without exposing origin's history.

    A worktree is seeded from the mirror's main, its content replaced with the
    primary's main and committed on a branch named after the message. That
    branch is merged with --no-ff into a staging branch which is pushed to the
    mirror. The worktree never outlives the run.
    """

    def __init__(self, git, settings, message, confirm=click.confirm):
        super().__init__(git, settings, message, confirm)
        self.branch = branch_name_from_message(message)

    def run(self):
        self.enter(Step.INPUT)
        click.echo(format_plan(self.branch, self.message))
        if not self.confirm(
            "Proceed? Uses a temporary worktree; your current files stay untouched.",
            default=False,
        ):
            raise RunAborted("Aborted")

        self.enter(Step.FETCH)
        self.fetch_remotes()

        self.enter(Step.TEARDOWN_PRIOR)
        remove_worktree(self.git, self.settings.worktree_path)

        self.enter(Step.CREATE)
        created = False
        try:
            with temporary_worktree(
                self.git,
                self.settings.worktree_path,
                self.settings.staging_branch,
                self.settings.mirror_ref,
            ) as worktree:
                created = True
                outcome = self.publish_from(worktree)
        finally:
            # Recorded once temporary_worktree has removed the worktree.
            if created:
                self.enter(Step.CLEANUP)

        if outcome is Outcome.NOTHING_TO_PUBLISH:
            report_done("Done. No changes to publish.")
        else:
            report_done(
                f"Done: {self.settings.primary_ref} copied onto {self.settings.mirror_ref} "
                f"via branch '{self.branch}' (worktree cleaned)."
            )
        return outcome

    def fetch_remotes(self):
        s = self.settings
        click.echo(f"Fetching {s.mirror_ref} and {s.primary_ref}...")
        self.git.run("fetch", s.mirror_remote, s.branch)
        self.git.run("fetch", s.primary_remote, s.branch)

    def publish_from(self, worktree):
        """Steps that run inside the worktree once it exists."""
        s = self.settings

        self.enter(Step.BRANCH)
        click.echo(f"Creating branch '{self.branch}' in worktree...")
        worktree.run("switch", "-C", self.branch)

        self.enter(Step.OVERLAY)
        click.echo(f"Overwriting worktree with {s.primary_ref} contents...")
        worktree.run("restore", "--source", s.primary_ref, "--staged", "--worktree", ".")
        worktree.run("clean", "-fd")

        self.enter(Step.COMMIT)
        worktree.run("add", "-A")
        if not has_staged_changes(worktree):
            click.echo(
                f"No differences between {s.mirror_ref} and {s.primary_ref}; nothing to commit."
            )
            return Outcome.NOTHING_TO_PUBLISH
        worktree.run("commit", "-m", self.message)

        self.enter(Step.MERGE)
        click.echo(f"Merging '{self.branch}' into staging main branch...")
        worktree.run("switch", s.staging_branch)
        worktree.run("merge", "--no-ff", self.branch, "-m", self.message)

        self.enter(Step.PUBLISH)
        click.echo(f"Pushing merged main to {s.mirror_ref}...")
        worktree.run("push", s.mirror_remote, f"{s.staging_branch}:{s.branch}")
        return Outcome.PUBLISHED
