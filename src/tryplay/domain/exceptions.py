"""Domain layer exceptions.

All errors raised by tryplay itself inherit from TryError. They signal misuse
of the Result type; causes captured inside a Failure can be any Exception.
"""
from __future__ import annotations

from typing import Any


class TryError(Exception):
    """Base exception for tryplay errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class MissingValueError(TryError, ValueError):
    def __init__(self) -> None:
        super().__init__("Success cannot hold None")


class InvalidCauseError(TryError, TypeError):
    def __init__(self, cause: object) -> None:
        super().__init__(
            "Failure cause must be an Exception instance",
            {"cause_type": type(cause).__name__},
        )
        self.cause = cause


class NotATryError(TryError, TypeError):
    def __init__(self, returned: object) -> None:
        super().__init__(
            "flat_map function must return a Success or Failure",
            {"returned_type": type(returned).__name__},
        )
        self.returned = returned
