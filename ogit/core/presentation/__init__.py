"""Presentation model for the terminal UI.

Components:
- OgitColors / highlight_diff: Style sheet and diff colouring
- panel_text / prompt_for: What each mode shows and asks for
- render / ViewModel: Scrolling window over the base view
"""

from ogit.core.presentation.colors import OgitColors, highlight_diff
from ogit.core.presentation.screen import is_secret_input, panel_text, prompt_for
from ogit.core.presentation.viewport import ViewModel, render

__all__ = [
    "OgitColors",
    "highlight_diff",
    "is_secret_input",
    "panel_text",
    "prompt_for",
    "ViewModel",
    "render",
]
