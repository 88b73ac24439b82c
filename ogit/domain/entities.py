"""Value objects describing repository state as ogit sees it."""

from dataclasses import dataclass, field
from enum import Enum


class CursorState(str, Enum):
    """Where the last navigation left the cursor relative to the view."""

    ON_SCREEN = "on_screen"
    OFF_SCREEN_UP = "off_screen_up"
    OFF_SCREEN_DOWN = "off_screen_down"


class LineKind(str, Enum):
    """What a line of the base view shows."""

    HEADER = "header"
    UNTRACKED = "untracked"
    TRACKED = "tracked"
    STAGED = "staged"
    REF = "ref"
    COMMIT = "commit"
    BLANK = "blank"
    HELP = "help"


FILE_KINDS = frozenset({LineKind.UNTRACKED, LineKind.TRACKED, LineKind.STAGED})


@dataclass(frozen=True)
class CommitSummary:
    """One entry of the recent commit history.

    Attributes:
        short_hash: Abbreviated commit hash (7 characters).
        message: Commit subject line.
    """

    short_hash: str
    message: str


@dataclass(frozen=True)
class StatusSnapshot:
    """Working copy files grouped by status.

    A file with both staged and unstaged changes appears in both
    ``tracked`` and ``staged``.
    """

    untracked: tuple[str, ...] = ()
    tracked: tuple[str, ...] = ()
    staged: tuple[str, ...] = ()


@dataclass(frozen=True)
class RepoSnapshot:
    """Everything the base view needs, read from the repository at once.

    Ref fields hold whatever git printed, including failure text such as
    ``fatal: no upstream configured``.
    """

    commits: tuple[CommitSummary, ...] = ()
    head: str = ""
    head_message: str = ""
    upstream: str = ""
    upstream_message: str = ""
    push: str = ""
    push_message: str = ""
    status: StatusSnapshot = field(default_factory=StatusSnapshot)


@dataclass(frozen=True)
class DisplayLine:
    """A line of the base view.

    Attributes:
        kind: What the line represents.
        text: Text to display.
        target: File name for file lines, hash for commit lines, else None.
    """

    kind: LineKind
    text: str
    target: str | None = None
