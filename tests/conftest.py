from __future__ import annotations

import numpy as np
import pytest


@pytest.fixture
def separable_1d():
    X = np.array([[0.0], [1.0], [2.0], [3.0]])
    y = np.array([-1, -1, 1, 1])
    return X, y


@pytest.fixture
def noisy_2d():
    """Two informative features plus label noise; not separable by one stump."""
    rng = np.random.default_rng(7)
    X = rng.normal(size=(80, 3))
    score = X[:, 0] + 0.5 * X[:, 1]
    y = np.where(score >= 0, 1, -1)
    flip = rng.random(80) < 0.1
    y[flip] = -y[flip]
    return X, y


@pytest.fixture
def uniform_weights():
    def _make(n: int) -> np.ndarray:
        return np.full(n, 1.0 / n)

    return _make
