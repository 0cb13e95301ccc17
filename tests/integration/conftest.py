"""Fixtures and helpers for tests that run the real git binary."""

import shutil
import subprocess
from pathlib import Path

import pytest

from repo_probe.probe import RepositoryProbe, create_repository_probe

DEFAULT_BRANCH = "main"


def _git(repo: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def init_git_repo(repo: Path, default_branch: str) -> None:
    """Initialize an empty repository with a local identity and no signing."""
    _git(repo, "init", "-q")
    _git(repo, "symbolic-ref", "HEAD", f"refs/heads/{default_branch}")
    _git(repo, "config", "user.email", "test@example.com")
    _git(repo, "config", "user.name", "Test User")
    _git(repo, "config", "commit.gpgsign", "false")
    _git(repo, "config", "tag.gpgsign", "false")


def make_commit(repo: Path, message: str) -> None:
    _git(repo, "commit", "--allow-empty", "--message", message)


def make_tag(repo: Path, name: str) -> None:
    _git(repo, "tag", name)


def git(repo: Path, *args: str) -> str:
    """Run an arbitrary git command in repo for test setup."""
    return _git(repo, *args)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    repo_dir = tmp_path / "repo"
    repo_dir.mkdir()
    init_git_repo(repo_dir, DEFAULT_BRANCH)
    return repo_dir


@pytest.fixture
def probe(repo: Path) -> RepositoryProbe:
    return create_repository_probe(repo)
