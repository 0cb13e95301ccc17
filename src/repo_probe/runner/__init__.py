"""Git command runner gateway."""

from repo_probe.runner.abc import GitRunner
from repo_probe.runner.fake import FakeGitRunner
from repo_probe.runner.printing import PrintingGitRunner
from repo_probe.runner.real import RealGitRunner

__all__ = [
    "GitRunner",
    "RealGitRunner",
    "FakeGitRunner",
    "PrintingGitRunner",
]
