"""Abstract base class for running git commands.

The probe depends on this interface rather than on subprocess directly,
so unit tests can substitute an in-memory fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path


class GitRunner(ABC):
    """Abstract interface for executing git subcommands.

    All implementations (real, fake, printing) must implement this interface.
    """

    @abstractmethod
    def run(self, cwd: Path, args: Sequence[str]) -> str:
        """Run a git subcommand in cwd.

        Args:
            cwd: Directory the command runs in
            args: Subcommand and its arguments, e.g. ["rev-parse", "HEAD"]

        Returns:
            Standard output with trailing whitespace removed

        Raises:
            CommandFailed: If git exits non-zero or cannot be started
            CommandTimeout: If git exceeds the configured timeout
        """
        ...
