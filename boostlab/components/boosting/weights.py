from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from boostlab.core.errors import InvalidInput

DEFAULT_EPSILON = 1e-10

_TINY = np.finfo(np.float64).tiny


@dataclass
class WeightState:
    """Sample-weight distribution carried from one boosting round to the next."""

    weights: np.ndarray
    round: int = 0

    @classmethod
    def uniform(cls, n_samples: int) -> "WeightState":
        if n_samples < 1:
            raise InvalidInput(f"Need at least 1 sample to initialise weights; got {n_samples}")
        return cls(weights=np.full(n_samples, 1.0 / n_samples, dtype=np.float64))

    @property
    def n_samples(self) -> int:
        return int(self.weights.shape[0])


def compute_alpha(error: float, epsilon: float = DEFAULT_EPSILON) -> float:
    """Confidence of a stump with weighted error ``error``; finite even when error == 0."""
    e = float(error)
    return 0.5 * math.log((1.0 - e + epsilon) / (e + epsilon))


def _normalize(w: np.ndarray) -> np.ndarray:
    w = w / w.sum()
    # exponential reweighting can underflow; weights stay strictly positive
    np.maximum(w, _TINY, out=w)
    return w / w.sum()


def update_weights(
    state: WeightState,
    y: np.ndarray,
    pred: np.ndarray,
    error: float,
    *,
    epsilon: float = DEFAULT_EPSILON,
) -> Tuple[float, WeightState]:
    """
    Advance the weight distribution by one round.

    Returns ``(alpha, next_state)`` where correctly classified samples are
    scaled by ``exp(-alpha)`` and misclassified ones by ``exp(alpha)``, then
    the weights are renormalised to sum to 1.
    """
    y = np.asarray(y, dtype=np.float64)
    pred = np.asarray(pred, dtype=np.float64)
    if y.shape != state.weights.shape or pred.shape != state.weights.shape:
        raise InvalidInput(
            f"Weight update shape mismatch: weights={state.weights.shape}, y={y.shape}, pred={pred.shape}"
        )

    alpha = compute_alpha(error, epsilon)
    w = state.weights * np.exp(-alpha * y * pred)
    return alpha, WeightState(weights=_normalize(w), round=state.round + 1)


__all__ = ["DEFAULT_EPSILON", "WeightState", "compute_alpha", "update_weights"]
