"""Repository provenance queries.

RepositoryProbe answers four questions about a working directory: which
commit HEAD is at, whether the tree is clean, which branch is checked out,
and how HEAD relates to the nearest tag. Every query runs git afresh; nothing
is cached because the repository can change between calls.
"""

import logging
from pathlib import Path

from repo_probe.config import ProbeConfig
from repo_probe.errors import CommandFailed, CommandTimeout, NoCommits
from repo_probe.runner.abc import GitRunner
from repo_probe.runner.printing import PrintingGitRunner
from repo_probe.runner.real import RealGitRunner
from repo_probe.types import (
    Branch,
    CleanlinessState,
    CommitId,
    DetachedHead,
    NamedBranch,
    RepositoryInfo,
    Summary,
)

logger = logging.getLogger(__name__)

# `rev-parse --verify --quiet` exits 1 without output when HEAD is unborn.
_UNBORN_HEAD_EXIT_STATUS = 1

# Explicit so core.abbrev in user or repo config cannot lengthen the hash.
# git still extends it when 7 characters would be ambiguous.
ABBREV_LENGTH = 7


class RepositoryProbe:
    """Read-only view of a git working directory.

    The repository root is fixed at construction and every command runs there,
    independent of the calling process's working directory.
    """

    def __init__(self, repo_root: Path, runner: GitRunner) -> None:
        self._repo_root = repo_root
        self._runner = runner

    @property
    def repo_root(self) -> Path:
        return self._repo_root

    def run_command(self, *args: str) -> str:
        """Run a git subcommand in the repository root and return trimmed stdout.

        Raises:
            CommandFailed: If git exits non-zero or cannot be started
            CommandTimeout: If git exceeds the configured timeout
        """
        return self._runner.run(self._repo_root, args)

    def commit(self) -> CommitId:
        """Get the abbreviated hash of HEAD.

        Raises:
            NoCommits: If the repository has no commits yet
            CommandFailed: If git fails for any other reason
        """
        try:
            output = self.run_command(
                "rev-parse", f"--short={ABBREV_LENGTH}", "--verify", "--quiet", "HEAD"
            )
        except CommandFailed as e:
            if e.returncode == _UNBORN_HEAD_EXIT_STATUS and not e.stderr.strip():
                raise NoCommits(self._repo_root) from e
            raise
        return CommitId(output)

    def state(self) -> CleanlinessState:
        """Report whether the working tree differs from HEAD, untracked files included."""
        output = self.run_command("status", "--porcelain", "--untracked-files=normal")
        if output.strip():
            return CleanlinessState.DIRTY
        return CleanlinessState.CLEAN

    def branch(self) -> Branch:
        """Get the checked-out branch, or DetachedHead when HEAD is not on a branch.

        Never raises a command error: a name that cannot be resolved is
        reported as DetachedHead.
        """
        try:
            name = self.run_command("symbolic-ref", "--quiet", "--short", "HEAD")
        except (CommandFailed, CommandTimeout) as e:
            logger.debug("No symbolic name for HEAD in %s: %s", self._repo_root, e)
            return DetachedHead()
        if not name:
            return DetachedHead()
        return NamedBranch(name)

    def summary(self) -> Summary:
        """Describe HEAD relative to the nearest reachable tag.

        Tag choice and distance come from `git describe --tags`. Dirtiness is
        read afterwards via state(), so untracked files also mark the summary dirty.

        Raises:
            NoCommits: If the repository has no commits yet
            CommandFailed: If git fails for any other reason
        """
        self.commit()
        described = self.run_command(
            "describe", "--tags", "--long", "--always", f"--abbrev={ABBREV_LENGTH}"
        )
        dirty = self.state() is CleanlinessState.DIRTY
        return Summary.parse(described, dirty=dirty)

    def snapshot(self) -> RepositoryInfo:
        """Read all four values, one query after another.

        Raises:
            NoCommits: If the repository has no commits yet
        """
        return RepositoryInfo(
            commit=self.commit(),
            state=self.state(),
            branch=self.branch(),
            summary=self.summary(),
        )


def create_repository_probe(repo_root: Path, config: ProbeConfig | None = None) -> RepositoryProbe:
    """Create a RepositoryProbe backed by the git binary.

    Args:
        repo_root: Working directory of the repository to inspect
        config: Runner settings; defaults to ProbeConfig()
    """
    if config is None:
        config = ProbeConfig()
    runner: GitRunner = RealGitRunner(
        executable=config.git_executable,
        timeout=config.timeout_seconds,
        env=config.env,
    )
    if config.verbose:
        runner = PrintingGitRunner(runner)
    return RepositoryProbe(repo_root, runner)
