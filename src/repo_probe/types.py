"""Tagged result values for repository queries.

Branch is a discriminated union: NamedBranch | DetachedHead. Detached HEAD
is a valid steady state, so it is a value rather than an error.
"""

import re
from dataclasses import dataclass
from enum import Enum

_COMMIT_ID_PATTERN = re.compile(r"[0-9a-f]{4,15}")

# git describe --long output: <tag>-<distance>-g<abbrev>. Tags may contain dashes,
# so the match is anchored on the trailing two fields.
_LONG_DESCRIBE_PATTERN = re.compile(r"(?P<tag>.+)-(?P<distance>\d+)-g(?P<commit>[0-9a-f]+)")

DETACHED_HEAD_NAME = "HEAD"
DIRTY_SUFFIX = "-dirty"


@dataclass(frozen=True)
class CommitId:
    """Abbreviated commit hash, lowercase hexadecimal."""

    sha: str

    def __post_init__(self) -> None:
        if _COMMIT_ID_PATTERN.fullmatch(self.sha) is None:
            raise ValueError(f"Not an abbreviated commit hash: {self.sha!r}")

    def __str__(self) -> str:
        return self.sha


class CleanlinessState(Enum):
    """Whether the working tree matches HEAD, untracked files included."""

    CLEAN = "clean"
    DIRTY = "dirty"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class NamedBranch:
    """HEAD points at a branch."""

    name: str

    @property
    def is_detached(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class DetachedHead:
    """HEAD points directly at a commit. Reported under the name "HEAD"."""

    @property
    def name(self) -> str:
        return DETACHED_HEAD_NAME

    @property
    def is_detached(self) -> bool:
        return True

    def __str__(self) -> str:
        return DETACHED_HEAD_NAME


Branch = NamedBranch | DetachedHead


@dataclass(frozen=True)
class Summary:
    """Tag-relative description of HEAD, in the shape of `git describe --tags --dirty`.

    Attributes:
        tag: Nearest reachable tag, or None when no tag is reachable
        distance: Commits between the tag and HEAD (0 when untagged)
        commit: Abbreviated hash of HEAD
        dirty: Whether the working tree had uncommitted changes
    """

    tag: str | None
    distance: int
    commit: str
    dirty: bool

    @property
    def is_exact_tag(self) -> bool:
        return self.tag is not None and self.distance == 0

    def render(self) -> str:
        if self.tag is None:
            text = self.commit
        elif self.distance == 0:
            text = self.tag
        else:
            text = f"{self.tag}-{self.distance}-g{self.commit}"
        if self.dirty:
            text += DIRTY_SUFFIX
        return text

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def parse(cls, describe_output: str, *, dirty: bool) -> "Summary":
        """Build a Summary from `git describe --tags --long --always` output.

        Args:
            describe_output: Trimmed stdout of the describe command
            dirty: Cleanliness of the working tree, evaluated separately

        Raises:
            ValueError: If the output is neither the long form nor a bare hash
        """
        match = _LONG_DESCRIBE_PATTERN.fullmatch(describe_output)
        if match is not None:
            return cls(
                tag=match.group("tag"),
                distance=int(match.group("distance")),
                commit=match.group("commit"),
                dirty=dirty,
            )
        if _COMMIT_ID_PATTERN.fullmatch(describe_output) is not None:
            return cls(tag=None, distance=0, commit=describe_output, dirty=dirty)
        raise ValueError(f"Unrecognized describe output: {describe_output!r}")


@dataclass(frozen=True)
class RepositoryInfo:
    """The four provenance values read from one repository.

    The values are read one after another, not atomically.
    """

    commit: CommitId
    state: CleanlinessState
    branch: Branch
    summary: Summary

    def to_dict(self) -> dict[str, str]:
        return {
            "commit": str(self.commit),
            "state": str(self.state),
            "branch": self.branch.name,
            "summary": self.summary.render(),
        }
