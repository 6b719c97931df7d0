"""Keep a single squashed commit on the mirror in step with local main."""

import enum

import click

from .git import (
    SyncResult,
    has_staged_changes,
    merge_base,
    remote_branch_exists,
    resolve_divergence,
)
from .pipeline import Outcome, Pipeline
from .ui import report_aborted, report_done


class Step(enum.Enum):
    INPUT = "input"
    SWITCH = "switch"
    SYNC = "sync"
    EXISTENCE_CHECK = "existence-check"
    BOOTSTRAP = "bootstrap"
    FETCH_MIRROR = "fetch-mirror"
    MERGE_BASE = "merge-base"
    OVERWRITE = "overwrite"
    SQUASH = "squash"
    PUSH = "push"


class SquashPublisher(Pipeline):
    """
    Sync local main with the primary remote, then squash it onto the mirror.

    If the mirror has no main yet, or its history is unrelated and the user
    agrees to overwrite it, local main is replaced by one parentless commit
    holding the working tree. Otherwise local history since the merge base
    with the mirror is squashed into one commit on top of that base.
    """

    def run(self):
        s = self.settings

        self.enter(Step.INPUT)
        click.echo(f"Publishing local {s.branch} to {s.mirror_ref} as one squashed commit.")
        click.echo(f'Commit message: "{self.message}"')
        if not self.confirm("Proceed?", default=False):
            report_aborted()
            return Outcome.ABORTED

        self.enter(Step.SWITCH)
        self.git.run("switch", s.branch)

        self.enter(Step.SYNC)
        if resolve_divergence(self.git, s, confirm=self.confirm) is SyncResult.DECLINED:
            report_aborted()
            return Outcome.ABORTED

        self.enter(Step.EXISTENCE_CHECK)
        if not remote_branch_exists(self.git, s.mirror_remote, s.branch):
            click.echo(f"{s.mirror_ref} does not exist yet; creating it from a single commit.")
            return self.bootstrap()

        self.enter(Step.FETCH_MIRROR)
        self.git.run("fetch", s.mirror_remote, s.branch)

        self.enter(Step.MERGE_BASE)
        base = merge_base(self.git, s.branch, s.mirror_ref)
        if base is None:
            self.enter(Step.OVERWRITE)
            click.secho(
                f"Local {s.branch} and {s.mirror_ref} have unrelated histories.",
                fg="yellow",
            )
            if not self.confirm(
                f"Force-overwrite {s.mirror_ref} with a single commit?", default=False
            ):
                report_aborted()
                return Outcome.ABORTED
            return self.bootstrap()

        return self.squash_onto(base)

    def bootstrap(self):
        """Replace local main with one root commit of the working tree and force-push it."""
        self.enter(Step.BOOTSTRAP)
        self.git.run("add", "-A")
        tree = self.git.capture("write-tree")
        commit = self.git.capture("commit-tree", tree, "-m", self.message)
        self.git.run("reset", "--hard", commit)
        return self.push()

    def squash_onto(self, base):
        self.enter(Step.SQUASH)
        click.echo(f"Squashing local {self.settings.branch} onto {base[:12]}...")
        self.git.run("reset", "--soft", base)
        self.git.run("add", "-A")
        if not has_staged_changes(self.git):
            report_done("Nothing to publish.")
            return Outcome.NOTHING_TO_PUBLISH
        self.git.run("commit", "-m", self.message)
        return self.push()

    def push(self):
        s = self.settings
        self.enter(Step.PUSH)
        click.echo(f"Force-pushing {s.branch} to {s.mirror_ref}...")
        self.git.run("push", "--force", s.mirror_remote, f"{s.branch}:{s.branch}")
        report_done(f"Done: {s.mirror_ref} now holds one squashed commit.")
        return Outcome.PUBLISHED
