"""Session state for the interactive controller.

A Session is an immutable snapshot of what the user sees and is doing.
The transition engine replaces it on every turn.
"""

from dataclasses import dataclass, field, replace

from ogit.domain.entities import (
    FILE_KINDS,
    CommitSummary,
    CursorState,
    DisplayLine,
    LineKind,
    RepoSnapshot,
)
from ogit.domain.modes import Base, Mode

HISTORY_LIMIT = 10
HELP_LINE = "(To toggle help, press 'i'.)"
REF_SEPARATOR = "   "


@dataclass(frozen=True)
class Session:
    """Everything the controller knows between two turns.

    Attributes:
        commits: Recent commits, newest first (at most HISTORY_LIMIT).
        head: Current branch name, or git's failure text.
        head_message: Subject of the commit at head.
        upstream: Upstream ref, or git's failure text.
        upstream_message: Subject of the upstream's last commit.
        push: Push ref, or git's failure text.
        push_message: Subject of the push ref's last commit.
        untracked: Files git does not track.
        tracked: Tracked files with unstaged changes.
        staged: Files with changes in the index.
        cursor: Index into display_lines(), never negative.
        mode: Active interaction mode.
        cursor_state: Whether the last move stayed inside the view.
    """

    commits: tuple[CommitSummary, ...] = ()
    head: str = ""
    head_message: str = ""
    upstream: str = ""
    upstream_message: str = ""
    push: str = ""
    push_message: str = ""
    untracked: tuple[str, ...] = ()
    tracked: tuple[str, ...] = ()
    staged: tuple[str, ...] = ()
    cursor: int = 0
    mode: Mode = field(default_factory=Base)
    cursor_state: CursorState = CursorState.ON_SCREEN

    def __post_init__(self) -> None:
        if self.cursor < 0:
            raise ValueError(f"cursor cannot be negative, got {self.cursor}")

    @classmethod
    def from_snapshot(cls, snapshot: RepoSnapshot) -> "Session":
        """Build the initial session: base mode, cursor on the first line."""
        return cls().refresh(snapshot)

    def refresh(self, snapshot: RepoSnapshot) -> "Session":
        """Replace repository data, keeping cursor, mode and cursor state.

        Args:
            snapshot: Fresh repository state.

        Returns:
            New Session.
        """
        return replace(
            self,
            commits=tuple(snapshot.commits[:HISTORY_LIMIT]),
            head=snapshot.head,
            head_message=snapshot.head_message,
            upstream=snapshot.upstream,
            upstream_message=snapshot.upstream_message,
            push=snapshot.push,
            push_message=snapshot.push_message,
            untracked=snapshot.status.untracked,
            tracked=snapshot.status.tracked,
            staged=snapshot.status.staged,
        )

    def display_lines(self) -> list[DisplayLine]:
        """Flatten the session into the lines of the base view.

        The cursor indexes into this list, so every cursor-dependent lookup
        goes through it.
        """
        lines: list[DisplayLine] = []
        for title, kind, names in (
            ("Untracked", LineKind.UNTRACKED, self.untracked),
            ("Tracked", LineKind.TRACKED, self.tracked),
            ("Staged", LineKind.STAGED, self.staged),
        ):
            lines.append(DisplayLine(LineKind.HEADER, title))
            lines.extend(DisplayLine(kind, name, name) for name in names)

        lines.append(DisplayLine(LineKind.BLANK, ""))
        for title, ref, message in (
            ("Head", self.head, self.head_message),
            ("Merge", self.upstream, self.upstream_message),
            ("Push", self.push, self.push_message),
        ):
            lines.append(DisplayLine(LineKind.HEADER, title))
            lines.append(DisplayLine(LineKind.REF, _ref_line(ref, message), ref))

        lines.append(DisplayLine(LineKind.BLANK, ""))
        lines.append(DisplayLine(LineKind.HEADER, "Recent Commits"))
        lines.extend(
            DisplayLine(LineKind.COMMIT, f"{c.short_hash} {c.message}", c.short_hash)
            for c in self.commits
        )
        lines.append(DisplayLine(LineKind.BLANK, ""))
        lines.append(DisplayLine(LineKind.HELP, HELP_LINE))
        return lines

    @property
    def max_cursor(self) -> int:
        """Largest valid cursor position in the base view."""
        return len(self.display_lines()) - 1

    def line_under_cursor(self) -> DisplayLine | None:
        lines = self.display_lines()
        if self.cursor < len(lines):
            return lines[self.cursor]
        return None

    def file_under_cursor(self) -> str | None:
        """File name on the cursor line, or None if it is not a file line."""
        line = self.line_under_cursor()
        if line is not None and line.kind in FILE_KINDS:
            return line.target
        return None

    def commit_under_cursor(self) -> str | None:
        """Short hash on the cursor line, or None if it is not a commit line."""
        line = self.line_under_cursor()
        if line is not None and line.kind == LineKind.COMMIT:
            return line.target
        return None


def _ref_line(ref: str, message: str) -> str:
    if not message:
        return ref
    return f"{ref}{REF_SEPARATOR}{message}"
