"""
Exceptions raised by modeset.

Every error is raised at the offending call and left for the caller to
handle. A failed call never leaves a mode half-updated.
"""
from typing import Any, Optional


class ModeError(Exception):
    """Base class for all mode errors."""


class ModeConstructionError(ModeError, ValueError):
    """Raised when constructor arguments match no known mode shape."""

    def __init__(self, message: str, args_shape: Optional[str] = None):
        self.args_shape = args_shape

        if args_shape is not None:
            full_message = f"{message} (got {args_shape})"
        else:
            full_message = message

        super().__init__(full_message)


class InvalidOperationError(ModeError):
    """Raised when an operation does not apply to the mode's kind."""

    def __init__(self, message: str, operation: str):
        super().__init__(message)
        self.operation = operation


class UnrecognizedValueError(ModeError, ValueError):
    """Raised when set() cannot resolve a value for the mode."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class ModeTypeError(ModeError, TypeError):
    """Raised when a mode attribute is given a value of the wrong type."""


class UnknownCommandError(ModeError, ValueError):
    """Raised when a text command names no known mode operation."""

    def __init__(self, message: str, command: str = ""):
        super().__init__(message)
        self.command = command


def describe_shape(args: tuple) -> str:
    """Summarize positional arguments for error messages.

    Args:
        args: The positional arguments passed to a constructor.

    Returns:
        A short string such as "(str, int)" or "no arguments".
    """
    if not args:
        return "no arguments"
    return "(" + ", ".join(type(arg).__name__ for arg in args) + ")"
