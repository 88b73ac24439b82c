"""Git CLI adapter."""

from .git_adapter import GitAdapter, parse_status_lines, parse_status_z, run_git

__all__ = ["GitAdapter", "parse_status_lines", "parse_status_z", "run_git"]
