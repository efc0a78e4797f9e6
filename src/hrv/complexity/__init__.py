"""Complexity measures for heart-rate-variability signals.

This package provides:
- Sample entropy with Chebyshev template matching
- Coarse-graining and normalization of physiological signals
- Multiscale entropy (MSE) profiles across temporal scales
- Shuffled-signal baselines for complexity comparison

Example:
    >>> import numpy as np
    >>> from hrv.complexity import multiscale_entropy, shuffled_baseline
    >>>
    >>> rr = np.random.default_rng(1).normal(0.8, 0.05, 2000)
    >>> result = multiscale_entropy(rr, max_scale=20, sampen_m=2, sampen_r=0.2)
    >>> values, scales = result.as_pair()
    >>>
    >>> # Baseline on a shuffled copy of the same signal
    >>> baseline = shuffled_baseline(rr, params=result.params, random_state=0)
"""

from hrv.complexity.entropy import (
    UNDEFINED,
    TemplateMatches,
    count_template_matches,
    is_undefined,
    sample_entropy,
)
from hrv.complexity.exceptions import (
    ComplexityError,
    ComputationCancelledError,
    InvalidInputError,
)
from hrv.complexity.multiscale import (
    coarse_grain,
    multiscale_entropy,
    normalize_signal,
    shuffled_baseline,
)
from hrv.complexity.params import (
    DEFAULT_MAX_SCALE,
    DEFAULT_SAMPEN_M,
    DEFAULT_SAMPEN_R,
    MSEParams,
)
from hrv.complexity.results import MSEResult

__all__ = [
    # Sample entropy
    "sample_entropy",
    "count_template_matches",
    "TemplateMatches",
    "UNDEFINED",
    "is_undefined",
    # Multiscale entropy
    "multiscale_entropy",
    "shuffled_baseline",
    "normalize_signal",
    "coarse_grain",
    # Parameters and results
    "MSEParams",
    "MSEResult",
    "DEFAULT_MAX_SCALE",
    "DEFAULT_SAMPEN_M",
    "DEFAULT_SAMPEN_R",
    # Exceptions
    "ComplexityError",
    "InvalidInputError",
    "ComputationCancelledError",
]
