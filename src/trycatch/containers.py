"""Conversion between trycatch results and ``returns`` containers.

This lets a ``Result`` produced by the wrappers flow into code written against
``returns.result`` (``bind``, ``map``, ``alt``, ...) and back again.
"""

from typing import Any

from returns.result import Failure as ContainerFailure
from returns.result import Result as ContainerResult
from returns.result import Success as ContainerSuccess

from .result import Failure, Result, Success


def to_container[T, E](result: Result[T, E]) -> ContainerResult[T, E]:
    """Turn a trycatch Success/Failure into the matching ``returns`` container."""
    match result:
        case Success(data):
            return ContainerSuccess(data)
        case Failure(error):
            return ContainerFailure(error)
        case _:
            raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")


def from_container[T, E](container: ContainerResult[T, E] | Any) -> Result[T, E]:
    """Turn a ``returns`` Success/Failure into the matching trycatch variant."""
    if isinstance(container, ContainerSuccess):
        return Success(container.unwrap())
    if isinstance(container, ContainerFailure):
        return Failure(container.failure())
    raise TypeError(f"Expected a returns Result container, got {type(container).__name__}")


__all__ = ["from_container", "to_container"]
