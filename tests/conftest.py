"""Pytest configuration and fixtures."""
from __future__ import annotations

from collections.abc import Generator

import pytest

from tryplay import Try, of_value
from tryplay.shared.config import Settings, get_settings


@pytest.fixture
def test_settings() -> Settings:
    """Settings built from explicit values."""
    return Settings(
        log_level="DEBUG",
        log_format="json",
        trace_captures=True,
    )


@pytest.fixture
def fresh_settings() -> Generator[None, None, None]:
    """Drop the cached settings before and after the test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def hello_failure() -> Try[int]:
    """Failure produced by a flat_map that raised RuntimeError."""

    def boom(v: str) -> Try[int]:
        raise RuntimeError("wahA!:" + v)

    return of_value("Hello").flat_map(boom)
