"""Core git subprocess wrapper."""

import copy
import os
import subprocess

import click


class GitCommandError(RuntimeError):
    """A git invocation exited non-zero or could not be started."""

    def __init__(self, command, returncode=None, stdout="", stderr=""):
        self.command = list(command)
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        super().__init__(self._describe())

    def _describe(self):
        head, *args = self.command
        if self.returncode is None:
            exit_info = "could not be started"
        else:
            exit_info = f"exit status {self.returncode}"
        text = f"Command failed: {head} {args!r} ({exit_info})"
        detail = self.stderr.strip()
        if detail:
            text = f"{text}\n{detail}"
        return text


class Git:
    """
    Run git commands, optionally inside another checkout (`git -C <cwd>`).

    `run` inherits the terminal so git can print progress and ask for
    credentials; `capture` returns stripped stdout; `status` returns the exit
    code when it is one of `ok_codes` and raises otherwise, or
    returns any exit code with `check=False`.
    """

    def __init__(self, executable="git", cwd=None, echo=False):
        self.executable = executable
        self.cwd = cwd
        self.echo = echo

    def resolve(self, path):
        """Resolve a relative `path` against this runner's directory."""
        path = str(path)
        if self.cwd is None or os.path.isabs(path):
            return path
        return os.path.join(self.cwd, path)

    def at(self, path):
        """Return a copy of this runner that operates inside `path`."""
        clone = copy.copy(self)
        clone.cwd = self.resolve(path)
        return clone

    def argv(self, args):
        prefix = [self.executable]
        if self.cwd is not None:
            prefix += ["-C", self.cwd]
        return prefix + list(args)

    def _spawn(self, args, **kwargs):
        argv = self.argv(args)
        if self.echo:
            click.secho("$ " + " ".join(argv), fg="cyan", err=True)
        try:
            return argv, subprocess.run(argv, **kwargs)
        except OSError as exc:
            raise GitCommandError(argv, stderr=str(exc)) from exc

    def run(self, *args):
        argv, result = self._spawn(args)
        if result.returncode != 0:
            raise GitCommandError(argv, result.returncode)

    def capture(self, *args):
        argv, result = self._spawn(args, capture_output=True)
        stdout = result.stdout.decode("utf-8", errors="ignore")
        stderr = result.stderr.decode("utf-8", errors="ignore")
        if result.returncode != 0:
            raise GitCommandError(argv, result.returncode, stdout, stderr)
        return stdout.strip()

    def status(self, *args, ok_codes=(0,), check=True):
        argv, result = self._spawn(
            args, stdout=subprocess.DEVNULL, stderr=subprocess.PIPE
        )
        if check and result.returncode not in ok_codes:
            stderr = (result.stderr or b"").decode("utf-8", errors="ignore")
            raise GitCommandError(argv, result.returncode, stderr=stderr)
        return result.returncode
