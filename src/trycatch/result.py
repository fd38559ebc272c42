"""
Defines the tagged ``Result`` value returned by the trycatch wrappers.

A ``Result`` is either a ``Success`` holding the produced value in ``data`` or a
``Failure`` holding the captured error in ``error``. Both variants expose the
same three fields, so callers can branch on the ``success`` tag without an
``isinstance`` check:

    result = try_catch_sync(lambda: json.loads(raw))
    if result.success:
        use(result.data)
    else:
        report(result.error)

The field that is not the payload is always ``None``. Both variants are frozen,
so a produced ``Result`` reads the same every time it is inspected.
"""

from dataclasses import dataclass, field
from typing import Literal, NoReturn

from .errors import UnwrapError


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Represents a completed computation and the value it produced."""

    data: T
    error: None = field(default=None, init=False)
    success: Literal[True] = field(default=True, init=False)

    def unwrap(self) -> T:
        return self.data

    def unwrap_or[D](self, default: D) -> T:
        return self.data

    def raise_for_status(self) -> None:
        """Does nothing for a successful result."""
        pass


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """Represents a computation that raised, holding the raised value as-is."""

    error: E
    data: None = field(default=None, init=False)
    success: Literal[False] = field(default=False, init=False)

    def unwrap(self) -> NoReturn:
        """Raises ``UnwrapError``, chained from the captured error when it is an exception."""
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(self.error) from cause

    def unwrap_or[D](self, default: D) -> D:
        return default

    def raise_for_status(self) -> NoReturn:
        """Re-raises the captured exception.

        Errors that are not exceptions (a ``Failure`` built by hand around a
        string, for instance) are reported through ``UnwrapError`` instead.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)


# The Result type is a union of Success and Failure, discriminated by ``success``.
type Result[T, E] = Success[T] | Failure[E]


__all__ = ["Failure", "Result", "Success"]
