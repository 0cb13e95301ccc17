"""Subprocess helpers for running git with context-rich errors."""

import logging
import os
import subprocess
import time
from collections.abc import Mapping, Sequence
from pathlib import Path

from repo_probe.errors import CommandFailed, CommandTimeout

logger = logging.getLogger(__name__)


def copied_env_for_git_subprocess(extra: Mapping[str, str] | None = None) -> dict[str, str]:
    """Copy the process environment for a git subprocess.

    GIT_TERMINAL_PROMPT=0 keeps git from blocking on a credential prompt.
    """
    env = os.environ.copy()
    env["GIT_TERMINAL_PROMPT"] = "0"
    if extra:
        env.update(extra)
    return env


def run_git(
    executable: str,
    args: Sequence[str],
    *,
    cwd: Path,
    timeout: float | None,
    env: Mapping[str, str] | None = None,
) -> subprocess.CompletedProcess[str]:
    """Run `executable args...` in cwd and return the completed process.

    Args:
        executable: git binary name or path
        args: Subcommand and its arguments
        cwd: Working directory for the child process
        timeout: Seconds before the child is killed, or None for no limit
        env: Full environment for the child

    Raises:
        CommandFailed: If the command exits non-zero or cannot be started
        CommandTimeout: If the command exceeds the timeout
    """
    git_args = tuple(args)
    description = " ".join((executable, *git_args))
    logger.debug("Executing: %s (cwd: %s)", description, cwd)

    start = time.monotonic()
    try:
        result = subprocess.run(
            [executable, *git_args],
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout,
            env=None if env is None else dict(env),
        )
    except subprocess.TimeoutExpired:
        # subprocess.run kills the child before re-raising
        logger.debug("Timed out after %ss: %s", timeout, description)
        raise CommandTimeout(git_args=git_args, cwd=cwd, timeout=timeout or 0.0) from None
    except OSError as e:
        raise CommandFailed(
            git_args=git_args,
            cwd=cwd,
            returncode=None,
            stdout="",
            stderr=str(e),
        ) from e
    elapsed_ms = (time.monotonic() - start) * 1000
    logger.debug("Completed in %.0fms (exit %d): %s", elapsed_ms, result.returncode, description)

    if result.returncode != 0:
        raise CommandFailed(
            git_args=git_args,
            cwd=cwd,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result
