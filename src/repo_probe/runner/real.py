"""Production implementation of GitRunner using subprocess."""

from collections.abc import Mapping, Sequence
from pathlib import Path

from repo_probe.runner.abc import GitRunner
from repo_probe.subprocess_utils import copied_env_for_git_subprocess, run_git


class RealGitRunner(GitRunner):
    """Real implementation of GitRunner using subprocess."""

    def __init__(
        self,
        *,
        executable: str = "git",
        timeout: float | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize RealGitRunner.

        Args:
            executable: git binary name or path
            timeout: Seconds before a command is killed, or None for no limit
            env: Extra environment variables layered over the process environment
        """
        self._executable = executable
        self._timeout = timeout
        self._extra_env = dict(env) if env else {}

    def run(self, cwd: Path, args: Sequence[str]) -> str:
        """Run a git subcommand in cwd and return trimmed stdout."""
        result = run_git(
            self._executable,
            args,
            cwd=cwd,
            timeout=self._timeout,
            env=copied_env_for_git_subprocess(self._extra_env),
        )
        return result.stdout.rstrip()
