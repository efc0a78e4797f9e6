"""Tests for the exception hierarchy.

Verifies that exceptions are properly formatted and contain
contextual information.
"""

from __future__ import annotations

from hrv.complexity.exceptions import (
    ComplexityError,
    ComputationCancelledError,
    InvalidInputError,
)


class TestComplexityError:
    """Tests for ComplexityError base class."""

    def test_message_only(self) -> None:
        err = ComplexityError("Something went wrong")
        assert str(err) == "Something went wrong"
        assert err.message == "Something went wrong"
        assert err.context == {}

    def test_message_with_context(self) -> None:
        err = ComplexityError("Failed", {"scale": 4, "n_samples": 12})
        assert "scale=4" in str(err)
        assert "n_samples=12" in str(err)

    def test_inheritance(self) -> None:
        assert isinstance(ComplexityError("test"), Exception)


class TestInvalidInputError:
    """Tests for InvalidInputError."""

    def test_basic_usage(self) -> None:
        err = InvalidInputError(
            "Invalid max_scale",
            parameter="max_scale",
            value=0,
            valid_range="integer >= 1",
        )
        assert err.parameter == "max_scale"
        assert err.value == 0
        assert err.valid_range == "integer >= 1"
        assert "parameter=max_scale" in str(err)
        assert "valid_range=integer >= 1" in str(err)
        assert isinstance(err, ComplexityError)

    def test_without_valid_range(self) -> None:
        err = InvalidInputError("Bad signal", parameter="signal", value="len=1")
        assert "valid_range" not in err.context

    def test_extra_context(self) -> None:
        err = InvalidInputError("Bad", parameter="m", value=0, context={"caller": "sampen"})
        assert err.context["caller"] == "sampen"


class TestComputationCancelledError:
    """Tests for ComputationCancelledError."""

    def test_completed_scales(self) -> None:
        err = ComputationCancelledError("Cancelled", completed_scales=3, context={"max_scale": 20})
        assert err.completed_scales == 3
        assert "completed_scales=3" in str(err)
        assert "max_scale=20" in str(err)
        assert isinstance(err, ComplexityError)
