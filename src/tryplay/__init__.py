"""tryplay.

A Try type for Python: the outcome of a computation that may fail, either a
Success holding a value or a Failure holding the exception that was raised.
"""
from __future__ import annotations

__version__ = "0.1.0"

from tryplay.domain import (
    CategoryDescriptor,
    InvalidCauseError,
    MissingValueError,
    NotATryError,
    ThrowsConsumer,
    ThrowsFunction,
    ThrowsSupplier,
    TryError,
)
from tryplay.shared.result import (
    Failure,
    Success,
    Try,
    of_cause,
    of_value,
    try_to,
)

__all__ = [
    "__version__",
    "Try", "Success", "Failure",
    "try_to", "of_value", "of_cause",
    "ThrowsSupplier", "ThrowsFunction", "ThrowsConsumer", "CategoryDescriptor",
    "TryError", "MissingValueError", "InvalidCauseError", "NotATryError",
]
