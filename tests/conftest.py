"""Pytest configuration and shared fixtures for hrv-complexity tests."""

import numpy as np
import pytest


@pytest.fixture
def white_noise() -> np.ndarray:
    """1000 samples of Gaussian white noise."""
    rng = np.random.default_rng(42)
    return rng.normal(0.0, 1.0, 1000)


@pytest.fixture
def noisy_sine() -> np.ndarray:
    """1000 samples of a sine with a 40-sample period plus small noise."""
    rng = np.random.default_rng(7)
    t = np.arange(1000)
    return np.sin(2 * np.pi * t / 40) + rng.normal(0.0, 0.05, 1000)


@pytest.fixture
def rr_intervals() -> np.ndarray:
    """Synthetic RR-interval tachogram in seconds (respiratory modulation + noise)."""
    rng = np.random.default_rng(2024)
    n_beats = 600
    beats = np.arange(n_beats)
    return 0.8 + 0.03 * np.sin(2 * np.pi * beats / 4.5) + rng.normal(0.0, 0.02, n_beats)
