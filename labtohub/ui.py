"""Prompts and status output."""

import click


def prompt_for_message(message=None, prompt="Enter merge message"):
    """Return `message`, asking for one when it is missing or empty."""
    if message:
        return message
    return click.prompt(prompt)


def format_plan(branch, message):
    """Format the plan shown before the worktree publisher starts."""
    return "\n".join(
        [
            f"Branch to create: '{branch}'",
            f'Merge message: "{message}"',
        ]
    )


def always_yes(text, default=False):
    """Confirmation callback used for --yes."""
    click.echo(f"{text} [auto-confirmed]")
    return True


def report_done(text):
    click.secho(text, fg="green", bold=True)


def report_aborted(text="Aborted"):
    click.secho(text, fg="yellow")
