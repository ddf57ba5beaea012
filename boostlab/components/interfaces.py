from __future__ import annotations

from typing import Any, Dict, Protocol, Sequence

import numpy as np


class WeakLearner(Protocol):
    """A fitted elementary classifier returning +1/-1."""

    kind: str

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Return +1/-1 predictions for every row of X."""
        ...

    def predict_one(self, x: Sequence[float]) -> int:
        ...

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data description used by the model codec."""
        ...


class LearnerCandidate(Protocol):
    """Outcome of one round's search: the chosen learner and its weighted error (<= 0.5)."""

    @property
    def learner(self) -> WeakLearner:
        ...

    @property
    def error(self) -> float:
        ...


class WeakLearnerSearch(Protocol):
    """
    Strategy that fits one boosting round: given the training data and the
    current sample weights, return the learner with minimum weighted error.

    The ensemble only talks to this interface, so other weak learners can be
    registered without touching the boosting loop.
    """

    kind: str

    def search(self, X: np.ndarray, y: np.ndarray, w: np.ndarray) -> LearnerCandidate:
        ...
