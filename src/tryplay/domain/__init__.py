"""Domain Layer.

Adapter contracts and the library's own error taxonomy.
This layer has NO external dependencies.
"""
from __future__ import annotations

from tryplay.domain.contracts import (
    CategoryDescriptor,
    ThrowsConsumer,
    ThrowsFunction,
    ThrowsSupplier,
)
from tryplay.domain.exceptions import (
    InvalidCauseError,
    MissingValueError,
    NotATryError,
    TryError,
)

__all__ = [
    "ThrowsSupplier", "ThrowsFunction", "ThrowsConsumer", "CategoryDescriptor",
    "TryError", "MissingValueError", "InvalidCauseError", "NotATryError",
]
