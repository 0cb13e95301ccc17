"""Repository provenance for release tooling and build metadata."""

from repo_probe.config import ProbeConfig, load_probe_config
from repo_probe.errors import CommandFailed, CommandTimeout, NoCommits, ProbeError
from repo_probe.probe import RepositoryProbe, create_repository_probe
from repo_probe.types import (
    Branch,
    CleanlinessState,
    CommitId,
    DetachedHead,
    NamedBranch,
    RepositoryInfo,
    Summary,
)

__all__ = [
    "Branch",
    "CleanlinessState",
    "CommandFailed",
    "CommandTimeout",
    "CommitId",
    "DetachedHead",
    "NamedBranch",
    "NoCommits",
    "ProbeConfig",
    "ProbeError",
    "RepositoryInfo",
    "RepositoryProbe",
    "Summary",
    "create_repository_probe",
    "load_probe_config",
]
