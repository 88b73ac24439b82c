"""Domain exceptions for ogit.

These exceptions signal integration errors between the interpreter, the
transition engine and the presentation layer. They are not recoverable
inside the session loop and are converted to user-facing errors at the
CLI boundary.
"""


class OgitDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class ModeMismatchError(OgitDomainError):
    """Raised when a text or prompt operation runs in a mode without input."""

    def __init__(self, mode: object, operation: str) -> None:
        super().__init__(
            f"Cannot {operation} while in {type(mode).__name__} mode",
            hint="This is a bug in ogit, please report it",
        )
        self.mode = mode
        self.operation = operation
