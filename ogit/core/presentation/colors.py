"""Centralized color definitions for ogit output.

Provides the prompt_toolkit style sheet used by the full-screen UI and
diff colouring built on Pygments' diff lexer.
"""

from typing import TYPE_CHECKING

from ogit.domain.entities import LineKind

if TYPE_CHECKING:
    from pygments.token import _TokenType

# prompt_toolkit formatted text: list of (style, text) fragments
StyledFragments = list[tuple[str, str]]


class OgitColors:
    """Centralized color palette for the terminal UI.

    Uses ANSI color names so colors adapt to the user's terminal theme.
    """

    @staticmethod
    def get_prompt_toolkit_style() -> dict[str, str]:
        """Get style dictionary for prompt_toolkit Style.from_dict().

        Returns:
            Dictionary mapping style class names to style definitions.

        Example:
            from prompt_toolkit.styles import Style
            style = Style.from_dict(OgitColors.get_prompt_toolkit_style())
        """
        return {
            "separator": "fg:ansibrightblack",
            "header": "fg:ansiyellow bold",
            "untracked": "fg:ansired",
            "tracked": "fg:ansimagenta",
            "staged": "fg:ansigreen",
            "ref": "fg:ansicyan",
            "commit": "",
            "help": "fg:ansibrightblack",
            "cursor": "reverse",
            "menu.key": "fg:ansigreen bold",
            "menu.label": "",
            "title": "bold",
            "prompt": "fg:ansicyan bold",
            "result": "",
            "diff.file": "fg:ansiwhite bold",
            "diff.hunk": "fg:ansicyan",
            "diff.inserted": "fg:ansigreen",
            "diff.deleted": "fg:ansired",
            "diff.heading": "bold",
        }


LINE_STYLES: dict[LineKind, str] = {
    LineKind.HEADER: "class:header",
    LineKind.UNTRACKED: "class:untracked",
    LineKind.TRACKED: "class:tracked",
    LineKind.STAGED: "class:staged",
    LineKind.REF: "class:ref",
    LineKind.COMMIT: "class:commit",
    LineKind.BLANK: "",
    LineKind.HELP: "class:help",
}


def _get_token_style_map() -> dict["_TokenType", str]:
    """Get the mapping from Pygments diff tokens to style classes."""
    from pygments.token import Generic

    return {
        Generic.Inserted: "class:diff.inserted",
        Generic.Deleted: "class:diff.deleted",
        Generic.Subheading: "class:diff.hunk",
        Generic.Heading: "class:diff.heading",
    }


def _find_token_style(
    token_type: "_TokenType", style_map: dict["_TokenType", str]
) -> str:
    """Find the style for a token, checking parent token types.

    Args:
        token_type: The Pygments token type to look up.
        style_map: Mapping from token types to style classes.

    Returns:
        The style class for the token, or "" if no match found.
    """
    for ttype in [token_type] + list(token_type.split()):
        if ttype in style_map:
            return style_map[ttype]
    return ""


def highlight_diff(text: str) -> StyledFragments:
    """Colour diff output line by line.

    File header lines (``+++``/``---``) are shown neutral, hunk headers in
    cyan, insertions in green and deletions in red.

    Args:
        text: Raw ``git diff`` output.

    Returns:
        Formatted text fragments, one per line, each ending in a newline.
    """
    from pygments import lex
    from pygments.lexers import DiffLexer

    style_map = _get_token_style_map()
    fragments: StyledFragments = []
    for token_type, value in lex(text, DiffLexer()):
        if value.startswith(("+++", "---")):
            style = "class:diff.file"
        else:
            style = _find_token_style(token_type, style_map)
        fragments.append((style, value))
    return fragments


def plain_lines(text: str, style: str = "") -> StyledFragments:
    """Split text into newline-terminated fragments with one style."""
    return [(style, line + "\n") for line in text.splitlines()]
