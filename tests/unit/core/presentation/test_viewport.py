"""Unit tests for the scrolling window over the base view."""

from dataclasses import replace

import pytest

from ogit.core.presentation.viewport import render
from ogit.core.session import Session
from ogit.domain.entities import CommitSummary, CursorState, RepoSnapshot, StatusSnapshot


@pytest.fixture
def session() -> Session:
    """Session with 25 base view lines (indices 0..24)."""
    return Session.from_snapshot(
        RepoSnapshot(
            commits=tuple(CommitSummary(f"{i:07x}", f"commit {i}") for i in range(5)),
            head="master",
            status=StatusSnapshot(untracked=tuple(f"file{i}.txt" for i in range(6))),
        )
    )


class TestRender:
    def test_starts_at_top(self, session: Session) -> None:
        view = render(session, 0, 10)
        assert view.top_line == 0
        assert len(view.visible) == 10
        assert view.visible[0].text == "Untracked"

    def test_off_screen_down_scrolls_one_line(self, session: Session) -> None:
        moved = replace(session, cursor=9, cursor_state=CursorState.OFF_SCREEN_DOWN)
        assert render(moved, 0, 10).top_line == 1

    def test_off_screen_up_scrolls_one_line(self, session: Session) -> None:
        moved = replace(session, cursor=5, cursor_state=CursorState.OFF_SCREEN_UP)
        assert render(moved, 5, 10).top_line == 4

    def test_scroll_is_bounded(self, session: Session) -> None:
        up = replace(session, cursor_state=CursorState.OFF_SCREEN_UP)
        assert render(up, 0, 10).top_line == 0

        max_top = len(session.display_lines()) - 10
        down = replace(session, cursor=24, cursor_state=CursorState.OFF_SCREEN_DOWN)
        assert render(down, max_top, 10).top_line == max_top

    def test_window_follows_cursor(self, session: Session) -> None:
        """After a jump such as Clear the cursor is brought back into view."""
        assert render(replace(session, cursor=15), 0, 10).top_line == 6
        assert render(replace(session, cursor=2), 10, 10).top_line == 2

    def test_window_stays_when_cursor_visible(self, session: Session) -> None:
        assert render(replace(session, cursor=7), 3, 10).top_line == 3

    def test_short_content_never_scrolls(self) -> None:
        view = render(Session(), 4, 100)
        assert view.top_line == 0
        assert len(view.visible) == len(Session().display_lines())

    def test_non_positive_height(self, session: Session) -> None:
        assert render(session, 0, 0).height == 1


class TestFragments:
    def test_cursor_line_is_highlighted(self, session: Session) -> None:
        view = render(replace(session, cursor=1), 0, 5)
        fragments = view.fragments()
        assert len(fragments) == 5
        assert fragments[1] == ("class:untracked class:cursor", "file0.txt\n")
        assert fragments[0] == ("class:header", "Untracked\n")

    def test_blank_lines_keep_their_row(self) -> None:
        view = render(replace(Session(), cursor=3), 0, 4)
        style, text = view.fragments()[3]
        assert text == " \n"
        assert style == "class:cursor"
