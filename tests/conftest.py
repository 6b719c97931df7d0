import subprocess
from pathlib import Path

import pytest

import labtohub as lh


def _git(cwd, *args, input=None):
    return subprocess.run(
        ["git", "-C", str(cwd), *args],
        check=True,
        capture_output=True,
        text=True,
        input=input,
    ).stdout.strip()


@pytest.fixture
def tmp_git_repo(tmp_path):
    """Create a temporary git repository with user config set."""
    repo = tmp_path / "repo"
    repo.mkdir()

    def git(*args, input=None):
        return _git(repo, *args, input=input)

    git("init", "-b", "main")
    git("config", "user.email", "test@example.com")
    git("config", "user.name", "Test User")
    git("config", "commit.gpgsign", "false")
    return repo, git


@pytest.fixture
def remotes(tmp_path, tmp_git_repo):
    """
    Working repo wired to two bare remotes, `origin` and `github`.

    Returns (repo, git, bare) where `bare(name, *args)` runs git inside the
    named bare remote.
    """
    repo, git = tmp_git_repo
    for name in ("origin", "github"):
        path = tmp_path / f"{name}.git"
        subprocess.run(
            ["git", "init", "--bare", "-b", "main", str(path)],
            check=True,
            capture_output=True,
        )
        git("remote", "add", name, str(path))

    def bare(name, *args):
        return _git(tmp_path / f"{name}.git", *args)

    return repo, git, bare


@pytest.fixture(autouse=True)
def clear_remote_overrides(monkeypatch):
    """Ensure LABTOHUB_* remote overrides are absent during tests."""
    monkeypatch.delenv("LABTOHUB_PRIMARY_REMOTE", raising=False)
    monkeypatch.delenv("LABTOHUB_MIRROR_REMOTE", raising=False)
    return


@pytest.fixture
def write_file():
    def _write(base: Path, name: str, content: str = "sample"):
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def commit_file(write_file):
    """Write a file in a repo and commit it; returns the new commit sha."""

    def _commit(repo, git, name, content, message):
        write_file(repo, name, content)
        git("add", name)
        git("commit", "-m", message)
        return git("rev-parse", "HEAD")

    return _commit


@pytest.fixture
def settings():
    return lh.Settings()


class RecordingGit(lh.Git):
    """Git runner that remembers every argv it ran and can fail on demand."""

    def __init__(self, *args, fail_on=None, calls=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.fail_on = fail_on
        self.calls = [] if calls is None else calls

    def _spawn(self, args, **kwargs):
        self.calls.append(list(args))
        if self.fail_on and args and args[0] == self.fail_on:
            raise lh.GitCommandError(self.argv(args), 1, stderr="CONFLICT (simulated)")
        return super()._spawn(args, **kwargs)


@pytest.fixture
def recording_git():
    return RecordingGit
