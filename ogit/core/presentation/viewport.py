"""Scrolling window over the base view."""

from dataclasses import dataclass

from ogit.core.presentation.colors import LINE_STYLES, StyledFragments
from ogit.core.session import Session
from ogit.domain.entities import CursorState, DisplayLine


@dataclass(frozen=True)
class ViewModel:
    """Visible slice of the base view.

    Attributes:
        lines: Every line of the base view.
        cursor: Cursor position within lines.
        top_line: Index of the first visible line.
        height: Number of visible lines.
    """

    lines: tuple[DisplayLine, ...]
    cursor: int
    top_line: int
    height: int

    @property
    def visible(self) -> tuple[DisplayLine, ...]:
        return self.lines[self.top_line : self.top_line + self.height]

    def fragments(self) -> StyledFragments:
        """Formatted text for the visible lines, cursor line highlighted."""
        result: StyledFragments = []
        for offset, line in enumerate(self.visible):
            style = LINE_STYLES[line.kind]
            if self.top_line + offset == self.cursor:
                style = f"{style} class:cursor".strip()
            result.append((style, (line.text or " ") + "\n"))
        return result


def render(session: Session, previous_top: int, height: int) -> ViewModel:
    """Work out which part of the base view to show after a turn.

    An off-screen move scrolls the window one line in its direction.
    Otherwise the window stays put unless the cursor has left it, in which
    case it follows the cursor.

    Args:
        session: Session after the turn.
        previous_top: First visible line before the turn.
        height: Number of lines available.

    Returns:
        ViewModel for the next render.
    """
    lines = tuple(session.display_lines())
    height = max(1, height)
    max_top = max(0, len(lines) - height)
    top = min(max(0, previous_top), max_top)

    if session.cursor_state == CursorState.OFF_SCREEN_UP:
        top = max(0, top - 1)
    elif session.cursor_state == CursorState.OFF_SCREEN_DOWN:
        top = min(top + 1, max_top)
    elif session.cursor < top:
        top = session.cursor
    elif session.cursor >= top + height:
        top = min(session.cursor - height + 1, max_top)

    return ViewModel(lines=lines, cursor=session.cursor, top_line=top, height=height)
