"""CLI commands and entry points."""

import click

from .config import Settings, __version__
from .git import Git, GitCommandError
from .pipeline import RunAborted
from .publish import WorktreePublisher
from .squash import SquashPublisher
from .ui import always_yes, prompt_for_message


def tool_options(func):
    """Options shared by both publishing commands."""
    func = click.option("-v", "--verbose", is_flag=True, help="Echo every git command before running it")(func)
    func = click.option("-y", "--yes", is_flag=True, help="Answer yes to every confirmation")(func)
    func = click.option("-m", "--message", default=None, help="Commit/merge message (prompted if omitted)")(func)
    return click.version_option(version=__version__)(func)


def _execute(pipeline_cls, message, yes, verbose, prompt):
    message = prompt_for_message(message, prompt=prompt)
    pipeline = pipeline_cls(
        Git(echo=verbose),
        Settings.from_env(),
        message,
        confirm=always_yes if yes else click.confirm,
    )
    try:
        return pipeline.run()
    except RunAborted as exc:
        raise click.ClickException(str(exc)) from exc
    except GitCommandError as exc:
        raise click.ClickException(str(exc)) from exc


@click.command(name="publish")
@tool_options
def publish_command(message, yes, verbose):
    """Copy origin/main onto github/main through a temporary worktree."""
    _execute(WorktreePublisher, message, yes, verbose, prompt="Enter merge message")


@click.command(name="squash")
@tool_options
def squash_command(message, yes, verbose):
    """Publish local main to github/main as a single squashed commit."""
    _execute(SquashPublisher, message, yes, verbose, prompt="Enter commit message")


@click.group()
@click.version_option(version=__version__)
def cli():
    """labtohub: publish a private git history to a public mirror."""
    pass


cli.add_command(publish_command)
cli.add_command(squash_command)


def main():
    """Main entry point."""
    cli()


def publish_main():
    """Entry point for the `labtohub` script."""
    publish_command()


def squash_main():
    """Entry point for the `labtohub-squash` script."""
    squash_command()


if __name__ == "__main__":
    main()
