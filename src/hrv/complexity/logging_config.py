"""Logging configuration for complexity analysis.

Provides structured logging with:
- Module-specific loggers under the ``hrv.complexity`` namespace
- Consistent format across all entropy functions
- Signals summarized by length, never dumped
"""

from __future__ import annotations

import logging
from typing import Any

# Package logger
logger = logging.getLogger("hrv.complexity")


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific submodule.

    Args:
        name: Submodule name (e.g., "entropy", "multiscale").

    Returns:
        Logger configured for the submodule.
    """
    return logging.getLogger(f"hrv.complexity.{name}")


def describe_value(value: Any) -> Any:
    """Summarize a logged value; signals are reduced to shape and dtype.

    Args:
        value: Parameter value to log.

    Returns:
        Scalars unchanged, arrays as ``<ndarray shape=(n,) dtype=float64>``,
        other sized containers as ``<list len=n>``.
    """
    if isinstance(value, (int, float, str, bool, type(None))):
        return value
    if hasattr(value, "shape") and hasattr(value, "dtype"):
        return f"<{type(value).__name__} shape={tuple(value.shape)} dtype={value.dtype}>"
    if isinstance(value, (list, tuple)):
        return f"<{type(value).__name__} len={len(value)}>"
    return f"<{type(value).__name__}>"


def log_function_entry(
    logger: logging.Logger,
    func_name: str,
    **params: Any,
) -> None:
    """Log function entry with parameters.

    Args:
        logger: Logger instance.
        func_name: Name of the function.
        **params: Key parameters to log (summarized by describe_value).
    """
    safe_params = {key: describe_value(value) for key, value in params.items()}

    param_str = ", ".join(f"{k}={v}" for k, v in safe_params.items())
    logger.debug(f"Entering {func_name}({param_str})")


def log_function_exit(
    logger: logging.Logger,
    func_name: str,
    result_summary: str | None = None,
) -> None:
    """Log function exit with optional result summary."""
    if result_summary:
        logger.debug(f"Exiting {func_name}: {result_summary}")
    else:
        logger.debug(f"Exiting {func_name}")


def log_result(
    logger: logging.Logger,
    message: str,
    **metrics: Any,
) -> None:
    """Log a result or key metric at INFO level.

    Args:
        logger: Logger instance.
        message: Description of the result.
        **metrics: Key metrics to include.
    """
    if metrics:
        metric_str = ", ".join(f"{k}={v}" for k, v in metrics.items())
        logger.info(f"{message}: {metric_str}")
    else:
        logger.info(message)


def log_warning(
    logger: logging.Logger,
    message: str,
    **context: Any,
) -> None:
    """Log a warning with context."""
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        logger.warning(f"{message} ({context_str})")
    else:
        logger.warning(message)


def log_undefined_scale(
    logger: logging.Logger,
    scale: int,
    n_samples: int,
    reason: str,
) -> None:
    """Log, at DEBUG, a scale whose sample entropy is undefined.

    Args:
        logger: Logger instance.
        scale: Coarse-graining scale.
        n_samples: Length of the coarse-grained series.
        reason: Why no estimate exists (e.g. "too short", "no matches").
    """
    logger.debug(f"Scale {scale} undefined: {reason} (n_samples={n_samples})")
