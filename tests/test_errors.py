"""Tests for the error hierarchy and collector."""

import pytest

from envload.coercion import ScalarKind
from envload.errors import (
    CoercionError,
    EnvLoadError,
    ErrorCollector,
    FieldError,
    LoadError,
    MissingRequiredError,
    SchemaError,
)


class TestErrorCollector:
    """Tests for ErrorCollector."""

    def test_empty(self) -> None:
        """Test that an empty collector raises nothing."""
        collector = ErrorCollector()
        assert not collector
        assert len(collector) == 0
        collector.raise_if_any()

    def test_raises_load_error(self) -> None:
        """Test that collected errors are raised in insertion order."""
        collector = ErrorCollector()
        first = MissingRequiredError("host", "HOST")
        second = CoercionError("port", "eighty", ScalarKind.INTEGER)
        collector.add(first)
        collector.add(second)

        assert collector
        assert collector.errors == (first, second)
        with pytest.raises(LoadError) as exc_info:
            collector.raise_if_any()
        assert exc_info.value.errors == (first, second)


class TestErrorHierarchy:
    """Tests for error classification."""

    def test_field_errors(self) -> None:
        """Test that per-field errors share a base class."""
        error = MissingRequiredError("host", "HOST")
        assert isinstance(error, FieldError)
        assert isinstance(error, EnvLoadError)
        assert not isinstance(error, SchemaError)

    def test_load_error_message(self) -> None:
        """Test that the composite message lists every field."""
        error = LoadError(
            [
                MissingRequiredError("host", "HOST"),
                CoercionError("port", "eighty", ScalarKind.INTEGER),
            ]
        )
        message = str(error)
        assert message.startswith("2 field error(s)")
        assert "required field: host" in message
        assert "'eighty' as integer for field port" in message
