"""Result types for railway-oriented programming.

An ``Outcome`` stores its state as one of these two cases, and
``Outcome.into_inner()`` hands the case back to callers so a computation can be
terminated with ordinary ``match`` syntax.

Usage:
    from moneta.core.result import Failure, Success

    match (eur_total + usd_fee).into_inner():
        case Success(value=amount):
            print(f"Total: {amount}")
        case Failure(error=error):
            print(f"Error: {error}")
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]


def is_success(result: "Result[T, E]") -> bool:
    """Return True if ``result`` is a Success."""
    return isinstance(result, Success)


def map_success(result: "Result[T, E]", fn: Callable[[T], U]) -> "Result[U, E]":
    """Apply ``fn`` to the value of a Success, pass a Failure through unchanged.

    Args:
        result: Result to transform.
        fn: Function applied to the success value.

    Returns:
        New Success wrapping ``fn(value)``, or the original Failure.
    """
    if isinstance(result, Success):
        return Success(value=fn(result.value))
    return result
