"""Usage errors raised by the `example-function` parser."""

from __future__ import annotations


class UsageError(Exception):
    """Base class for invalid invocations. Terminal for the current call."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingValueError(UsageError):
    """`--param` was given without a value."""

    def __init__(self, option: str = "--param") -> None:
        super().__init__(f"Error: {option} requires a value. Example: {option}=xxx")
        self.option = option


class UnexpectedArgumentError(UsageError):
    """A third positional token was supplied."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Error: Unexpected argument (got '{token}').")
        self.token = token


class HelpRequested(Exception):
    """Raised when -h/--help short-circuits parsing. Not an error."""
