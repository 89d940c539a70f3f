"""Result pattern for composable error handling.

Provides the Success and Failure variants of Try and the constructors that
produce them. map and flat_map capture exceptions raised by their function
into a Failure; on_success, on_failure and on_any_failure let exceptions
raised by their consumer propagate to the caller.

Example:
    >>> of_value("Hello").map(len).map(str).to_optional()
    '5'
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from tryplay.domain.exceptions import (
    InvalidCauseError,
    MissingValueError,
    NotATryError,
)
from tryplay.shared.config import get_settings
from tryplay.shared.logging import get_logger

if TYPE_CHECKING:
    from tryplay.domain.contracts import (
        CategoryDescriptor,
        ThrowsConsumer,
        ThrowsFunction,
        ThrowsSupplier,
    )

V = TypeVar("V")
S = TypeVar("S")
C = TypeVar("C", bound=Exception)


def _captured(operation: str, exc: Exception) -> Failure[Any]:
    """Wrap an exception raised by user code in a Failure."""
    if get_settings().trace_captures:
        get_logger(__name__).debug(
            "cause_captured",
            operation=operation,
            cause_type=type(exc).__name__,
            cause_message=str(exc),
        )
    return Failure(exc)


@dataclass(frozen=True, slots=True)
class Success(Generic[V]):
    """Successful result.

    Attributes:
        value: The computed value, never None
    """

    value: V

    def __post_init__(self) -> None:
        """Reject None as a success value."""
        if self.value is None:
            raise MissingValueError()

    def is_success(self) -> bool:
        """Check if result is success."""
        return True

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return False

    def to_optional(self) -> V | None:
        """Return the value as the present side of the optional projection."""
        return self.value

    def map(self, func: ThrowsFunction[V, S]) -> Try[S]:
        """Transform the value.

        Args:
            func: Called once with the value

        Returns:
            Success of the returned value, or Failure of whatever func raised
        """
        try:
            return Success(func(self.value))
        except Exception as exc:
            return _captured("map", exc)

    def flat_map(self, func: ThrowsFunction[V, Try[S]]) -> Try[S]:
        """Chain a computation that itself returns a Try.

        Args:
            func: Called once with the value

        Returns:
            The Try returned by func as-is, or Failure of whatever func raised
        """
        try:
            result = func(self.value)
        except Exception as exc:
            return _captured("flat_map", exc)
        if not isinstance(result, (Success, Failure)):
            return _captured("flat_map", NotATryError(result))
        return result

    def on_success(self, consumer: ThrowsConsumer[V]) -> None:
        """Pass the value to consumer."""
        consumer(self.value)

    def on_failure(
        self, category: CategoryDescriptor, consumer: ThrowsConsumer[C],
    ) -> None:
        """Do nothing; there is no cause."""

    def on_any_failure(self, consumer: ThrowsConsumer[Exception]) -> None:
        """Do nothing; there is no cause."""


@dataclass(frozen=True, slots=True)
class Failure(Generic[V]):
    """Failed result.

    The type parameter is the value type the computation would have produced,
    so a Failure slots into the same chain as a Success.

    Attributes:
        cause: The captured exception
    """

    cause: Exception

    def __post_init__(self) -> None:
        """Reject causes that are not exceptions."""
        if not isinstance(self.cause, Exception):
            raise InvalidCauseError(self.cause)

    def is_success(self) -> bool:
        """Check if result is success."""
        return False

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return True

    def to_optional(self) -> V | None:
        """Return None; the cause is dropped."""
        return None

    def map(self, func: ThrowsFunction[V, S]) -> Try[S]:
        """Skip func and carry the same cause forward."""
        return Failure(self.cause)

    def flat_map(self, func: ThrowsFunction[V, Try[S]]) -> Try[S]:
        """Skip func and carry the same cause forward."""
        return Failure(self.cause)

    def on_success(self, consumer: ThrowsConsumer[V]) -> None:
        """Do nothing; there is no value."""

    def on_failure(
        self, category: CategoryDescriptor, consumer: ThrowsConsumer[C],
    ) -> None:
        """Pass the cause to consumer if it is an instance of category.

        Each call checks independently, so handlers for a base class and a
        subclass both run when both are registered.

        Args:
            category: Exception class, or tuple of classes, to match
            consumer: Called with the cause on a match
        """
        if isinstance(self.cause, category):
            consumer(self.cause)

    def on_any_failure(self, consumer: ThrowsConsumer[Exception]) -> None:
        """Pass the cause to consumer."""
        consumer(self.cause)


# Type alias
Try = Success[V] | Failure[V]


def try_to(supplier: ThrowsSupplier[V]) -> Try[V]:
    """Run a computation and capture its outcome.

    Args:
        supplier: Zero-argument callable, invoked exactly once

    Returns:
        Success wrapping the return value, or Failure wrapping the raised
        exception
    """
    try:
        return Success(supplier())
    except Exception as exc:
        return _captured("try_to", exc)


def of_value(value: V) -> Try[V]:
    """Create a Success result.

    Args:
        value: The success value (not None)

    Returns:
        Success wrapping the value
    """
    return Success(value)


def of_cause(cause: Exception) -> Try[Any]:
    """Create a Failure result.

    Args:
        cause: The exception to hold

    Returns:
        Failure wrapping the cause
    """
    return Failure(cause)
