"""Pytest configuration and fixtures for discperf tests."""

from __future__ import annotations

import numpy as np
import pytest

from discperf import SweepParams, SweepPreset, Timer, sample_heights


# =============================================================================
# TOLERANCE SETTINGS
# =============================================================================

# Points should sit on the circle up to float64 rounding
CIRCLE_TOLERANCE = 1e-9

# The loop and the kernel sum hit x-coordinates in different orders
SUM_TOLERANCE = 1e-6


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(scope="session")
def params() -> SweepParams:
    """Small sweep shared across tests."""
    return SweepParams.from_preset(SweepPreset.SMALL)


@pytest.fixture(scope="session")
def heights(params: SweepParams) -> np.ndarray:
    """Impact heights for the shared sweep."""
    return sample_heights(params)


@pytest.fixture
def timer() -> Timer:
    """Get a Timer instance for measuring execution time."""
    return Timer()


# =============================================================================
# PYTEST HOOKS
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
