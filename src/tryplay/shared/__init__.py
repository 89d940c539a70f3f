"""Shared module.

Cross-cutting concerns: configuration, logging, result pattern.
"""
from tryplay.shared.config import Settings, get_settings
from tryplay.shared.result import (
    Failure,
    Success,
    Try,
    of_cause,
    of_value,
    try_to,
)

__all__ = [
    "Settings",
    "get_settings",
    "Try",
    "Success",
    "Failure",
    "try_to",
    "of_value",
    "of_cause",
]
