"""Adapter contracts (Protocols).

Callables that the Result combinators accept. Any of them may raise; the
combinator decides whether the error is captured or propagated.
"""
from __future__ import annotations

from typing import Protocol, TypeAlias, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)
R_co = TypeVar("R_co", covariant=True)


@runtime_checkable
class ThrowsSupplier(Protocol[R_co]):
    """Zero-argument computation that returns a value or raises."""

    def __call__(self) -> R_co: ...


@runtime_checkable
class ThrowsFunction(Protocol[T_contra, R_co]):
    """Single-argument transformation that returns a value or raises."""

    def __call__(self, value: T_contra, /) -> R_co: ...


@runtime_checkable
class ThrowsConsumer(Protocol[T_contra]):
    """Single-argument side effect.

    Whatever it raises reaches the caller of the inspection combinator
    unchanged.
    """

    def __call__(self, value: T_contra, /) -> None: ...


# Checked with isinstance(), so subclasses of a category match too
CategoryDescriptor: TypeAlias = type[Exception] | tuple[type[Exception], ...]
