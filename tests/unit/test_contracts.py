"""Tests for adapter contracts and library exceptions."""
from __future__ import annotations

import pytest

from tryplay import (
    Failure,
    InvalidCauseError,
    MissingValueError,
    NotATryError,
    ThrowsConsumer,
    ThrowsFunction,
    ThrowsSupplier,
    TryError,
    of_value,
    try_to,
)


class Doubler:
    """Callable object with one argument."""

    def __call__(self, value: int) -> int:
        return value * 2


class TestProtocols:
    """Tests for the callable protocols."""

    @pytest.mark.parametrize(
        "candidate",
        [lambda: 1, print, Doubler(), str.upper, of_value],
    )
    def test_callables_satisfy_protocols(self, candidate: object) -> None:
        """Test any callable is accepted as supplier, function or consumer."""
        assert isinstance(candidate, ThrowsSupplier)
        assert isinstance(candidate, ThrowsFunction)
        assert isinstance(candidate, ThrowsConsumer)

    def test_non_callable_rejected(self) -> None:
        """Test plain values do not satisfy the protocols."""
        assert not isinstance(42, ThrowsSupplier)
        assert not isinstance("text", ThrowsFunction)

    def test_callable_object_as_function(self) -> None:
        """Test a callable object works with map."""
        assert of_value(21).map(Doubler()).to_optional() == 42

    def test_bound_method_as_supplier(self) -> None:
        """Test a bound method works with try_to."""
        items = {"a": 1}
        assert try_to(items.copy).to_optional() == {"a": 1}


class TestExceptions:
    """Tests for the library error hierarchy."""

    def test_hierarchy(self) -> None:
        """Test every library error derives from TryError."""
        assert issubclass(MissingValueError, TryError)
        assert issubclass(MissingValueError, ValueError)
        assert issubclass(InvalidCauseError, TypeError)
        assert issubclass(NotATryError, TypeError)

    def test_str_with_details(self) -> None:
        """Test details are appended to the message."""
        error = NotATryError(5)
        assert error.message == "flat_map function must return a Success or Failure"
        assert str(error) == (
            "flat_map function must return a Success or Failure"
            " - {'returned_type': 'int'}"
        )

    def test_str_without_details(self) -> None:
        """Test plain message when there are no details."""
        error = MissingValueError()
        assert error.details == {}
        assert str(error) == "Success cannot hold None"

    def test_base_error_usable_as_cause(self) -> None:
        """Test library errors can themselves be captured."""
        error = TryError("custom", {"step": 2})

        def supplier() -> int:
            raise error

        result = try_to(supplier)
        assert isinstance(result, Failure)
        assert result.cause is error
