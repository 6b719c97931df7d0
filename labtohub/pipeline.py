"""Shared pieces of the publishing pipelines."""

import enum

import click


class Outcome(enum.Enum):
    PUBLISHED = "published"
    NOTHING_TO_PUBLISH = "nothing-to-publish"
    ABORTED = "aborted"


class RunAborted(RuntimeError):
    """The user declined a confirmation that the tool treats as fatal."""


class Pipeline:
    """
    Base for the linear publishing pipelines.

    Subclasses implement `run()`, declare a `Step` enum and call `enter()` as
    each state starts, so callers can see which path through the sequence a
    run took.
    """

    def __init__(self, git, settings, message, confirm=click.confirm):
        self.git = git
        self.settings = settings
        self.message = message
        self.confirm = confirm
        self.visited = []

    def enter(self, step):
        self.visited.append(step)
