"""Result dataclass for multiscale entropy runs.

An ``MSEResult`` is the sole artifact returned to callers: the per-scale
sample entropy values paired with the scale axis. Undefined scales hold
``nan`` and are serialized as ``null``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

import polars as pl

from hrv.complexity.params import MSEParams


@dataclass
class MSEResult:
    """Multiscale entropy profile of a signal.

    Attributes:
        entropy_values: Sample entropy per scale; nan where undefined.
        scales: Scale factors ``1..max_scale`` matching ``entropy_values``.
        params: Parameters the profile was computed with.
        n_samples: Length of the input signal.
    """

    entropy_values: list[float]
    scales: list[int]
    params: MSEParams = field(default_factory=MSEParams)
    n_samples: int = 0

    def __post_init__(self) -> None:
        if len(self.entropy_values) != len(self.scales):
            raise ValueError(
                f"entropy_values and scales must have equal length "
                f"(got {len(self.entropy_values)} and {len(self.scales)})"
            )

    def __len__(self) -> int:
        return len(self.scales)

    def as_pair(self) -> tuple[list[float], list[int]]:
        """Return the ``(entropy_values, scales)`` pair consumed by renderers."""
        return list(self.entropy_values), list(self.scales)

    @property
    def defined_scales(self) -> list[int]:
        """Scales with a defined entropy estimate."""
        return [s for s, v in zip(self.scales, self.entropy_values) if not math.isnan(v)]

    @property
    def undefined_scales(self) -> list[int]:
        """Scales where sample entropy could not be computed."""
        return [s for s, v in zip(self.scales, self.entropy_values) if math.isnan(v)]

    @property
    def complexity_index(self) -> float:
        """Sum of the defined entropy values (area under the MSE curve)."""
        return float(sum(v for v in self.entropy_values if not math.isnan(v)))

    def to_frame(self) -> pl.DataFrame:
        """Convert to a Polars DataFrame with ``scale`` and ``sample_entropy`` columns."""
        return pl.DataFrame(
            {
                "scale": self.scales,
                "sample_entropy": [None if math.isnan(v) else v for v in self.entropy_values],
            },
            schema={"scale": pl.Int64, "sample_entropy": pl.Float64},
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "entropy_values": [None if math.isnan(v) else v for v in self.entropy_values],
            "scales": list(self.scales),
            "params": self.params.to_dict(),
            "n_samples": self.n_samples,
            "complexity_index": self.complexity_index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MSEResult:
        """Create from dictionary."""
        return cls(
            entropy_values=[math.nan if v is None else float(v) for v in data["entropy_values"]],
            scales=[int(s) for s in data["scales"]],
            params=MSEParams.build(**data.get("params", {})),
            n_samples=data.get("n_samples", 0),
        )
