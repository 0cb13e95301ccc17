"""Printing GitRunner wrapper for verbose output.

This module provides a wrapper that prints each git command, styled,
before delegating to the wrapped implementation.
"""

import shlex
from collections.abc import Sequence
from pathlib import Path

import click

from repo_probe.runner.abc import GitRunner


class PrintingGitRunner(GitRunner):
    """Wrapper that prints commands before delegating to inner implementation.

    Output goes to stderr so stdout of the host tool stays machine-readable.

    Usage:
        runner = PrintingGitRunner(RealGitRunner(timeout=30.0))
    """

    def __init__(self, wrapped: GitRunner) -> None:
        self._wrapped = wrapped

    def run(self, cwd: Path, args: Sequence[str]) -> str:
        """Print the command, then run it with the wrapped runner."""
        command = shlex.join(["git", *args])
        click.echo(click.style(f"$ {command}", fg="bright_black") + f"  ({cwd})", err=True)
        return self._wrapped.run(cwd, args)
