"""CLI error handling with actionable hints."""

from typing import NoReturn

import click


class OgitCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise OgitCliError(
            "Not a git repository: /tmp",
            hint="Run ogit inside a working copy or pass -C <path>",
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize the error with message and optional hint.

        Args:
            message: The primary error message.
            hint: Optional actionable suggestion for the user.
        """
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present.

        Returns:
            Formatted error message, with hint on a new line if provided.
        """
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


def not_a_repository_error(path: str) -> NoReturn:
    """Raise error when the target directory is not a working copy.

    Args:
        path: Directory that was checked.

    Raises:
        OgitCliError: Always raises with a hint about -C.
    """
    raise OgitCliError(
        f"Not a git repository: {path}",
        hint="Run ogit inside a working copy or pass -C <path>",
    )


def git_not_found_error() -> NoReturn:
    """Raise error when the git executable cannot be started.

    Raises:
        OgitCliError: Always raises with an installation hint.
    """
    raise OgitCliError(
        "git executable not found",
        hint="Install git and make sure it is on your PATH",
    )
