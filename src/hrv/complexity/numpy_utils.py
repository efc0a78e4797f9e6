"""NumPy conversion helpers for signal inputs.

These helpers accept lists, numpy arrays and Polars Series, enforce float64
and avoid copies where the caller's data can be viewed read-only.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
import polars as pl

from hrv.complexity.exceptions import InvalidInputError

SignalLike = Union[Sequence[float], np.ndarray, pl.Series]


def to_numpy_float64(data: SignalLike, *, allow_copy: bool = False) -> np.ndarray:
    """Convert a 1-D signal to a read-only float64 numpy array."""
    if isinstance(data, pl.Series):
        try:
            arr = data.to_numpy(writable=False, allow_copy=allow_copy)
        except Exception:
            arr = data.to_numpy(writable=False, allow_copy=True)
    else:
        try:
            arr = np.asarray(data)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(
                "Signal could not be converted to a numeric array",
                parameter="signal",
                value=type(data).__name__,
            ) from exc

    if arr.ndim != 1:
        raise InvalidInputError(
            "Signal must be one-dimensional",
            parameter="signal",
            value=f"shape={arr.shape}",
            valid_range="1-D sequence",
        )

    if arr.dtype != np.float64:
        try:
            arr = arr.astype(np.float64, copy=False)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(
                "Signal must contain real numbers",
                parameter="signal",
                value=str(arr.dtype),
            ) from exc
    else:
        # Read-only view so the caller's buffer is never written through.
        arr = arr.view()
    arr.flags.writeable = False
    return arr
