"""Exceptions raised by trycatch itself.

The wrappers never raise these; they only surface when a caller explicitly
asks a ``Failure`` for its value.
"""

from typing import Any


class TryCatchError(Exception):
    """Base class for all trycatch exceptions."""


class UnwrapError(TryCatchError):
    """Raised when the value of a ``Failure`` is requested."""

    def __init__(self, error: Any) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"Called unwrap on Failure: {self.error!r}"


__all__ = ["TryCatchError", "UnwrapError"]
