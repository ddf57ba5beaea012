from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Sequence

import numpy as np

from boostlab.core.errors import InvalidInput


@dataclass(frozen=True)
class WeakStump:
    """
    Axis-aligned decision stump: one feature, one threshold, one polarity.

    Predicts ``polarity`` when ``x[feature_index] >= threshold`` and
    ``-polarity`` otherwise, so flipping the polarity negates every prediction.
    At ``x == threshold`` this deliberately differs from the literal
    ``polarity * x >= polarity * threshold`` rule: polarity -1 predicts -1
    there, so a flipped stump's weighted error is exactly ``1 - error``.
    """

    kind: ClassVar[str] = "stump"

    feature_index: int
    threshold: float
    polarity: int = 1

    def __post_init__(self) -> None:
        if int(self.feature_index) < 0:
            raise InvalidInput(f"feature_index must be >= 0; got {self.feature_index}")
        if self.polarity not in (-1, 1):
            raise InvalidInput(f"polarity must be -1 or +1; got {self.polarity}")

    def predict(self, X: np.ndarray) -> np.ndarray:
        """Return +1/-1 predictions (float64) for every row of X."""
        column = np.asarray(X, dtype=np.float64)[:, self.feature_index]
        p = float(self.polarity)
        return np.where(column >= self.threshold, p, -p)

    def predict_one(self, x: Sequence[float]) -> int:
        return self.polarity if float(x[self.feature_index]) >= self.threshold else -self.polarity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "feature_index": int(self.feature_index),
            "threshold": float(self.threshold),
            "polarity": int(self.polarity),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "WeakStump":
        try:
            return cls(
                feature_index=int(d["feature_index"]),
                threshold=float(d["threshold"]),
                polarity=int(d["polarity"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise InvalidInput(f"Malformed stump record {d!r}: {exc}") from exc


__all__ = ["WeakStump"]
