"""Sample entropy of a numeric sequence.

Sample entropy (Richman & Moorman, 2000) is the negative log of the
conditional probability that two templates of length ``m`` which match
within tolerance ``r`` still match when extended to length ``m + 1``.

Conventions used here:
- Distance between templates is Chebyshev (max absolute difference).
- A match means distance ``<= r``; ``r`` is an absolute tolerance.
- Pairs are ordered ``(i, j)`` with ``i != j`` over the whole sequence.
- Both template lengths use the same ``L - m`` start indices, so ``A <= B``.
- ``nan`` is returned when either count is zero.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view
from scipy.spatial.distance import cdist

from hrv.complexity.exceptions import InvalidInputError
from hrv.complexity.logging_config import get_logger
from hrv.complexity.numpy_utils import SignalLike, to_numpy_float64

logger = get_logger("entropy")

UNDEFINED = float("nan")

# Distance-matrix entries evaluated per cdist call (32 MB of float64).
_BLOCK_ELEMENTS = 2**22


@dataclass(frozen=True)
class TemplateMatches:
    """Ordered-pair match counts behind a sample entropy value.

    Attributes:
        m: Template length.
        r: Absolute matching tolerance.
        n_templates: Number of template start indices compared.
        b: Pairs whose length-m templates match.
        a: Pairs whose length-(m+1) templates match.
    """

    m: int
    r: float
    n_templates: int
    b: int
    a: int

    @property
    def is_defined(self) -> bool:
        return self.a > 0 and self.b > 0

    @property
    def entropy(self) -> float:
        """``-ln(A / B)``, or nan when either count is zero."""
        if not self.is_defined:
            return UNDEFINED
        return math.log(self.b / self.a)


def is_undefined(value: float) -> bool:
    """Return True if ``value`` is the undefined entropy sentinel."""
    return math.isnan(value)


def _validate_m_r(m: int, r: float) -> None:
    if isinstance(m, bool) or not isinstance(m, (int, np.integer)) or m < 1:
        raise InvalidInputError(
            "Template length must be a positive integer",
            parameter="m",
            value=m,
            valid_range="integer >= 1",
        )
    if isinstance(r, bool) or not isinstance(r, (int, float, np.number)) or not (
        math.isfinite(r) and r > 0
    ):
        raise InvalidInputError(
            "Tolerance must be a positive finite number",
            parameter="r",
            value=r,
            valid_range="finite float > 0",
        )


def _count_ordered_matches(templates: np.ndarray, r: float) -> int:
    """Count ordered pairs ``(i, j)``, ``i != j``, within Chebyshev distance r."""
    n = len(templates)
    block_rows = max(1, _BLOCK_ELEMENTS // n)
    total = 0
    for start in range(0, n, block_rows):
        block = templates[start : start + block_rows]
        dist = cdist(block, templates, metric="chebyshev")
        total += int(np.count_nonzero(dist <= r))
    # Every template matches itself at distance 0.
    return total - n


def count_template_matches(series: SignalLike, m: int = 2, r: float = 0.2) -> TemplateMatches:
    """Count matching template pairs of length m and m+1.

    Args:
        series: 1-D numeric sequence.
        m: Template length.
        r: Absolute matching tolerance.

    Returns:
        TemplateMatches holding the ordered-pair counts B (length m)
        and A (length m+1).

    Raises:
        InvalidInputError: If m or r is out of range, or series is not 1-D.
    """
    _validate_m_r(m, r)
    x = to_numpy_float64(series)
    m = int(m)
    r = float(r)

    n_templates = len(x) - m
    if n_templates < 2:
        return TemplateMatches(m=m, r=r, n_templates=max(n_templates, 0), b=0, a=0)

    templates_m1 = sliding_window_view(x, m + 1)
    templates_m = templates_m1[:, :m]

    b = _count_ordered_matches(templates_m, r)
    a = _count_ordered_matches(templates_m1, r) if b > 0 else 0
    return TemplateMatches(m=m, r=r, n_templates=n_templates, b=b, a=a)


def sample_entropy(series: SignalLike, m: int = 2, r: float = 0.2) -> float:
    """Compute sample entropy for a series.

    ``r`` is used as given. It is not rescaled by the series' own standard
    deviation; normalize the input first when ``r`` is meant as a fraction
    of the standard deviation.

    Args:
        series: 1-D numeric sequence.
        m: Template length (default 2).
        r: Absolute matching tolerance (default 0.2).

    Returns:
        ``-ln(A / B)``, or nan when B == 0 or A == 0 (including series
        shorter than m + 2).

    Raises:
        InvalidInputError: If m or r is out of range.

    Example:
        >>> sample_entropy([1.0, 2.0] * 10, m=2, r=0.2)
        0.0
    """
    matches = count_template_matches(series, m=m, r=r)
    if not matches.is_defined:
        logger.debug(
            f"Sample entropy undefined (n_templates={matches.n_templates}, "
            f"B={matches.b}, A={matches.a})"
        )
    return matches.entropy
