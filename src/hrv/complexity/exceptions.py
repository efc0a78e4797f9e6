"""Custom exceptions for complexity analysis.

Provides a hierarchy of exceptions carrying contextual information
for debugging. Undefined entropy values are NOT exceptions: they are
reported as ``nan`` entries in the result.
"""

from __future__ import annotations

from typing import Any


class ComplexityError(Exception):
    """Base exception for complexity analysis errors.

    All package-specific exceptions inherit from this class,
    allowing callers to catch them with a single except.

    Attributes:
        message: Human-readable error message.
        context: Additional context dictionary.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize complexity error.

        Args:
            message: Human-readable error message.
            context: Additional context for debugging.
        """
        self.message = message
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context."""
        if not self.context:
            return self.message
        context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
        return f"{self.message} ({context_str})"


class InvalidInputError(ComplexityError):
    """Raised when a signal or configuration parameter is invalid.

    This occurs when:
    - The signal has fewer than 2 samples (variance undefined)
    - The signal has zero variance or non-finite samples
    - ``max_scale``, ``sampen_m`` or ``sampen_r`` is not positive

    Always raised before any computation begins.

    Attributes:
        parameter: Name of the offending input.
        value: Invalid value provided.
        valid_range: Description of valid values.
    """

    def __init__(
        self,
        message: str,
        parameter: str,
        value: Any,
        valid_range: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize invalid input error.

        Args:
            message: Human-readable error message.
            parameter: Name of the offending input.
            value: Invalid value provided.
            valid_range: Description of valid values.
            context: Additional context for debugging.
        """
        self.parameter = parameter
        self.value = value
        self.valid_range = valid_range
        full_context = {"parameter": parameter, "value": value}
        if valid_range is not None:
            full_context["valid_range"] = valid_range
        if context:
            full_context.update(context)
        super().__init__(message, full_context)


class ComputationCancelledError(ComplexityError):
    """Raised when a multiscale run is cancelled between scales.

    Attributes:
        completed_scales: Number of scales finished before cancellation.
    """

    def __init__(
        self,
        message: str,
        completed_scales: int,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.completed_scales = completed_scales
        full_context = {"completed_scales": completed_scales}
        if context:
            full_context.update(context)
        super().__init__(message, full_context)
