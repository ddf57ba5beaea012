from __future__ import annotations

"""Exhaustive weighted search for the best decision stump.

For every feature the candidate thresholds are the feature's distinct values:
any threshold strictly between two consecutive values behaves exactly like the
upper one, so nothing else needs to be tried.

Each candidate is scored with polarity +1; a weighted error above 0.5 is
turned into ``1 - error`` with polarity -1. The winner is the candidate with
the smallest ``(error, feature_index, threshold_rank)`` key, i.e. the first
minimum in feature-then-threshold order. Because that key is a total order,
the per-feature results can be computed in any order (or in parallel) and
reduced to the same stump.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

import numpy as np
from joblib import Parallel, delayed

from boostlab.core.errors import InvalidInput

from .stump import WeakStump

logger = logging.getLogger(__name__)

# Upper bound on (thresholds x samples) cells evaluated in one numpy block.
_BLOCK_CELLS = 1 << 20


@dataclass(frozen=True)
class StumpCandidate:
    stump: WeakStump
    error: float
    # position of the threshold within the feature's sorted distinct values
    rank: int = 0

    @property
    def learner(self) -> WeakStump:
        return self.stump

    def sort_key(self) -> Tuple[float, int, int]:
        return (self.error, self.stump.feature_index, self.rank)


def candidate_thresholds(column: np.ndarray) -> np.ndarray:
    """Distinct values of one feature, ascending."""
    return np.unique(np.asarray(column, dtype=np.float64))


def weighted_errors(column: np.ndarray, y: np.ndarray, w: np.ndarray, thresholds: np.ndarray) -> np.ndarray:
    """Weighted error of the polarity +1 stump at each threshold."""
    n = column.shape[0]
    out = np.empty(thresholds.shape[0], dtype=np.float64)
    step = max(1, _BLOCK_CELLS // max(n, 1))
    for start in range(0, thresholds.shape[0], step):
        block = thresholds[start:start + step]
        pred = np.where(column[None, :] >= block[:, None], 1.0, -1.0)
        miss = pred != y[None, :]
        out[start:start + step] = np.where(miss, w[None, :], 0.0).sum(axis=1)
    return out


def best_stump_for_feature(X: np.ndarray, y: np.ndarray, w: np.ndarray, feature_index: int) -> Optional[StumpCandidate]:
    """Best stump on a single feature, or None when the feature has one distinct value."""
    column = X[:, feature_index]
    thresholds = candidate_thresholds(column)
    if thresholds.shape[0] < 2:
        return None

    errors = weighted_errors(column, y, w, thresholds)
    flip = errors > 0.5
    effective = np.where(flip, 1.0 - errors, errors)

    # argmin returns the first minimum, i.e. the lowest threshold on ties
    k = int(np.argmin(effective))
    stump = WeakStump(
        feature_index=int(feature_index),
        threshold=float(thresholds[k]),
        polarity=-1 if bool(flip[k]) else 1,
    )
    return StumpCandidate(stump=stump, error=float(effective[k]), rank=k)


def reduce_candidates(candidates: Iterable[Optional[StumpCandidate]]) -> Optional[StumpCandidate]:
    """Pick the minimum-key candidate; None entries are ignored."""
    best: Optional[StumpCandidate] = None
    for c in candidates:
        if c is None:
            continue
        if best is None or c.sort_key() < best.sort_key():
            best = c
    return best


def constant_candidate(X: np.ndarray, y: np.ndarray, w: np.ndarray) -> StumpCandidate:
    """The single stump evaluated when no feature has two distinct values."""
    threshold = float(X[0, 0])
    error = float(np.where(y != 1.0, w, 0.0).sum())
    polarity = 1
    if error > 0.5:
        error = 1.0 - error
        polarity = -1
    return StumpCandidate(WeakStump(0, threshold, polarity), error=error, rank=0)


class StumpSearch:
    """Weighted exhaustive search over (feature, threshold, polarity).

    ``n_jobs`` fans features out over joblib workers (threads; numpy releases
    the GIL in the per-feature reductions). The result does not depend on it.
    """

    kind = "stump"

    def __init__(self, n_jobs: Optional[int] = None):
        self.n_jobs = n_jobs

    def _per_feature(self, X: np.ndarray, y: np.ndarray, w: np.ndarray) -> List[Optional[StumpCandidate]]:
        n_features = X.shape[1]
        if self.n_jobs in (None, 1) or n_features == 1:
            return [best_stump_for_feature(X, y, w, j) for j in range(n_features)]
        return Parallel(n_jobs=self.n_jobs, prefer="threads")(
            delayed(best_stump_for_feature)(X, y, w, j) for j in range(n_features)
        )

    def search(self, X: np.ndarray, y: np.ndarray, w: np.ndarray) -> StumpCandidate:
        X = np.asarray(X, dtype=np.float64)
        y = np.asarray(y, dtype=np.float64)
        w = np.asarray(w, dtype=np.float64)

        if X.ndim != 2 or X.shape[0] == 0 or X.shape[1] == 0:
            raise InvalidInput(f"Stump search needs at least 1 sample and 1 feature; got X={X.shape}")
        if y.shape != (X.shape[0],) or w.shape != (X.shape[0],):
            raise InvalidInput(
                f"Stump search shape mismatch: X={X.shape}, y={y.shape}, w={w.shape}"
            )

        best = reduce_candidates(self._per_feature(X, y, w))
        if best is None:
            best = constant_candidate(X, y, w)

        logger.debug(
            "best stump: feature=%d threshold=%r polarity=%+d error=%.6g",
            best.stump.feature_index,
            best.stump.threshold,
            best.stump.polarity,
            best.error,
        )
        return best


__all__ = [
    "StumpCandidate",
    "StumpSearch",
    "candidate_thresholds",
    "weighted_errors",
    "best_stump_for_feature",
    "reduce_candidates",
    "constant_candidate",
]
