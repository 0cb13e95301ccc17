"""Error types raised by repository probes.

CommandFailed and CommandTimeout come from the execution primitive.
NoCommits is the expected "repository is simply new" condition and is
kept separate so callers can branch on it instead of treating it as a fault.
"""

from pathlib import Path


class ProbeError(Exception):
    """Base class for all repo_probe errors."""


class CommandFailed(ProbeError):
    """Raised when a git command exits non-zero or cannot be started.

    Attributes:
        git_args: Arguments passed to git (without the executable)
        cwd: Directory the command ran in
        returncode: Exit status, or None if the process never started
        stdout: Captured standard output
        stderr: Captured standard error
    """

    def __init__(
        self,
        *,
        git_args: tuple[str, ...],
        cwd: Path,
        returncode: int | None,
        stdout: str,
        stderr: str,
    ) -> None:
        self.git_args = git_args
        self.cwd = cwd
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(self._format_message())

    @property
    def command(self) -> str:
        return " ".join(("git", *self.git_args))

    def _format_message(self) -> str:
        if self.returncode is None:
            status = "could not be started"
        else:
            status = f"exited with status {self.returncode}"
        message = f"'{self.command}' {status} (cwd: {self.cwd})"
        stderr = self.stderr.strip()
        if stderr:
            message += f"\nstderr: {stderr}"
        return message


class CommandTimeout(ProbeError):
    """Raised when a git command is killed after exceeding its timeout."""

    def __init__(self, *, git_args: tuple[str, ...], cwd: Path, timeout: float) -> None:
        self.git_args = git_args
        self.cwd = cwd
        self.timeout = timeout
        command = " ".join(("git", *git_args))
        super().__init__(f"'{command}' timed out after {timeout}s (cwd: {cwd})")


class NoCommits(ProbeError):
    """Raised when HEAD is unborn: the repository has no commits yet."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root
        super().__init__(f"Repository at {repo_root} has no commits yet")
