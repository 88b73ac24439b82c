"""prompt_toolkit terminal UI."""

from .app import OgitUI

__all__ = ["OgitUI"]
