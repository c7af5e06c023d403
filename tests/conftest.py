"""Shared fixtures for the circle approximation tests."""

import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def noisy_target():
    return np.random.default_rng(99).integers(0, 256, size=(24, 32, 3), dtype=np.uint8)
