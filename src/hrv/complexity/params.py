"""Parameter model for multiscale entropy runs.

Each computation carries its own ``MSEParams`` instance; there is no
process-wide default state to configure or reset.

Example:
    >>> from hrv.complexity.params import MSEParams
    >>> params = MSEParams.build(max_scale=10, sampen_r=0.15)
    >>> params.sampen_m
    2
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hrv.complexity.exceptions import InvalidInputError

DEFAULT_MAX_SCALE = 20
DEFAULT_SAMPEN_M = 2
DEFAULT_SAMPEN_R = 0.2  # fraction of the signal's standard deviation

_VALID_RANGES = {
    "max_scale": "integer >= 1",
    "sampen_m": "integer >= 1",
    "sampen_r": "finite float > 0",
}


class MSEParams(BaseModel):
    """Configuration of a multiscale entropy computation.

    Attributes:
        max_scale: Largest coarse-graining scale; scales run 1..max_scale.
        sampen_m: Template length used by sample entropy.
        sampen_r: Matching tolerance as a fraction of the original signal's
            standard deviation. It is fixed once from the normalized input and
            not recomputed per coarse-grained scale.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    max_scale: int = Field(default=DEFAULT_MAX_SCALE, ge=1)
    sampen_m: int = Field(default=DEFAULT_SAMPEN_M, ge=1)
    sampen_r: float = Field(default=DEFAULT_SAMPEN_R, gt=0)

    @field_validator("max_scale", "sampen_m", mode="before")
    @classmethod
    def _coerce_numpy_int(cls, value: Any) -> Any:
        # Strict mode rejects numpy integers; bools and floats stay rejected.
        if isinstance(value, np.integer):
            return int(value)
        return value

    @field_validator("sampen_r", mode="before")
    @classmethod
    def _coerce_r(cls, value: Any) -> Any:
        # Strict mode rejects ints and numpy scalars for float fields.
        if isinstance(value, (int, np.integer, np.floating)) and not isinstance(value, bool):
            return float(value)
        return value

    @field_validator("sampen_r")
    @classmethod
    def _finite_r(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("sampen_r must be finite")
        return value

    @classmethod
    def build(cls, **kwargs: Any) -> MSEParams:
        """Create params, converting validation failures to InvalidInputError.

        Raises:
            InvalidInputError: If any parameter is out of range or mistyped.
        """
        try:
            return cls(**kwargs)
        except ValidationError as exc:
            error = exc.errors()[0]
            parameter = str(error["loc"][0]) if error["loc"] else "params"
            raise InvalidInputError(
                f"Invalid {parameter}: {error['msg']}",
                parameter=parameter,
                value=kwargs.get(parameter),
                valid_range=_VALID_RANGES.get(parameter),
            ) from exc

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump()
