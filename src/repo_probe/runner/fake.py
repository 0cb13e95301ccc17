"""Fake implementation of GitRunner for testing."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from repo_probe.errors import CommandFailed, ProbeError
from repo_probe.runner.abc import GitRunner


class FakeGitRunner(GitRunner):
    """In-memory fake implementation of GitRunner.

    This fake accepts pre-configured state in its constructor and records
    every invocation for test assertions.

    Constructor Injection:
    ---------------------
    - outputs: Mapping of args tuple -> stdout returned for that command
    - errors: Mapping of args tuple -> exception raised for that command

    Commands present in neither mapping fail with CommandFailed (exit 1),
    so an unexpected invocation surfaces in the test instead of passing silently.
    """

    def __init__(
        self,
        *,
        outputs: dict[tuple[str, ...], str] | None = None,
        errors: dict[tuple[str, ...], ProbeError] | None = None,
    ) -> None:
        self._outputs = outputs if outputs is not None else {}
        self._errors = errors if errors is not None else {}
        self._calls: list[tuple[Path, tuple[str, ...]]] = []

    def run(self, cwd: Path, args: Sequence[str]) -> str:
        """Return the configured output for args, or raise the configured error."""
        key = tuple(args)
        self._calls.append((cwd, key))

        if key in self._errors:
            raise self._errors[key]
        if key in self._outputs:
            return self._outputs[key].rstrip()
        raise CommandFailed(
            git_args=key,
            cwd=cwd,
            returncode=1,
            stdout="",
            stderr=f"fake: no output configured for 'git {' '.join(key)}'",
        )

    def set_output(self, args: Sequence[str], output: str) -> None:
        """Configure (or replace) the output for a command, clearing any configured error."""
        key = tuple(args)
        self._errors.pop(key, None)
        self._outputs[key] = output

    def set_error(self, args: Sequence[str], error: ProbeError) -> None:
        """Configure (or replace) the error for a command."""
        self._errors[tuple(args)] = error

    @property
    def calls(self) -> list[tuple[Path, tuple[str, ...]]]:
        """Get the list of (cwd, args) invocations made during the test.

        This property is for test assertions only.
        """
        return list(self._calls)
