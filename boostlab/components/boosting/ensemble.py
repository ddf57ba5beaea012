from __future__ import annotations

import logging
import threading
import warnings
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np
from pydantic import ValidationError
from sklearn.base import BaseEstimator, ClassifierMixin

from boostlab.components.interfaces import WeakLearner, WeakLearnerSearch
from boostlab.contracts.boosting_configs import BoostingConfig
from boostlab.contracts.types import FitState
from boostlab.core.errors import InvalidInput, InvalidState, ModelNotFitted
from boostlab.core.progress import NullProgress, ProgressCallback
from boostlab.core.shapes import check_inference_data, check_training_data
from boostlab.registries.weak_learners import make_weak_learner_search

from .weights import DEFAULT_EPSILON, WeightState, update_weights

logger = logging.getLogger(__name__)

# sign(0) resolves to the positive class
DEFAULT_LABEL = 1


@dataclass(frozen=True)
class EnsembleMember:
    stump: WeakLearner
    alpha: float

    def to_dict(self) -> Dict[str, Any]:
        return {**self.stump.to_dict(), "alpha": float(self.alpha)}


def required_width(members: Sequence[EnsembleMember]) -> int:
    """Smallest column count every member can read (0 for an empty ensemble)."""
    indices = [getattr(m.stump, "feature_index", -1) for m in members]
    return max(indices, default=-1) + 1


class AdaBoostClassifier(ClassifierMixin, BaseEstimator):
    """
    Binary AdaBoost over decision stumps, labels in {-1, +1}.

    Lifecycle: ``uninitialized -> training -> trained``.

    - ``fit`` validates everything before the first round starts.
    - Rounds run strictly in sequence; only the per-round search may use
      ``n_jobs`` workers, and the chosen stumps do not depend on it.
    - Members are published only after the last round. Any failed fit,
      including a re-fit rejected during validation, clears the previous
      model and leaves the estimator ``uninitialized``.
    - Re-fitting a trained estimator retrains from scratch and overwrites it.
    - A second ``fit`` started while one is running raises ``InvalidState``;
      ``predict`` from another thread waits for a running ``fit`` to finish,
      while ``predict`` from the fitting thread itself (e.g. a progress
      callback) raises ``InvalidState``.
    """

    def __init__(
        self,
        n_cls: int = 10,
        *,
        n_jobs: Optional[int] = None,
        epsilon: float = DEFAULT_EPSILON,
        weak_learner: str = "stump",
    ):
        self.n_cls = n_cls
        self.n_jobs = n_jobs
        self.epsilon = epsilon
        self.weak_learner = weak_learner

        self._lock = threading.Lock()
        self._fit_thread: Optional[int] = None
        self._state: FitState = "uninitialized"

    # ------------------------------------------------------------------
    # configuration
    # ------------------------------------------------------------------
    @classmethod
    def from_config(cls, cfg: BoostingConfig) -> "AdaBoostClassifier":
        return cls(
            n_cls=cfg.n_cls,
            n_jobs=cfg.n_jobs,
            epsilon=cfg.epsilon,
            weak_learner=cfg.weak_learner,
        )

    def to_config(self) -> BoostingConfig:
        try:
            return BoostingConfig(
                n_cls=self.n_cls,
                n_jobs=self.n_jobs,
                epsilon=self.epsilon,
                weak_learner=self.weak_learner,
            )
        except ValidationError as exc:
            raise InvalidInput(f"Invalid boosting configuration: {exc}") from exc

    @property
    def state(self) -> FitState:
        return self._state

    def __sklearn_is_fitted__(self) -> bool:
        return self._state == "trained"

    # threading.Lock cannot be pickled (joblib artifacts, clone via pickle)
    def __getstate__(self) -> Dict[str, Any]:
        state = dict(super().__getstate__())
        state.pop("_lock", None)
        state.pop("_fit_thread", None)
        if state.get("_state") == "training":
            state["_state"] = "uninitialized"
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        super().__setstate__(state)
        self._lock = threading.Lock()
        self._fit_thread = None

    # ------------------------------------------------------------------
    # training
    # ------------------------------------------------------------------
    def fit(self, X: Any, y: Any, *, progress: Optional[ProgressCallback] = None) -> "AdaBoostClassifier":
        if not self._lock.acquire(blocking=False):
            raise InvalidState("fit() is already running on this estimator.")
        self._fit_thread = threading.get_ident()
        try:
            try:
                cfg = self.to_config()
                X_arr, y_arr = check_training_data(X, y)
                search = make_weak_learner_search(cfg.weak_learner, n_jobs=cfg.n_jobs)

                self._state = "training"
                members, errors = self._run_rounds(X_arr, y_arr, cfg, search, progress)
            except BaseException:
                self._clear_fitted()
                self._state = "uninitialized"
                raise

            self.members_ = tuple(members)
            self.estimator_weights_ = np.array([m.alpha for m in members], dtype=np.float64)
            self.estimator_errors_ = np.array(errors, dtype=np.float64)
            self.n_features_in_ = int(X_arr.shape[1])
            self.classes_ = np.array([-1, 1])
            self._state = "trained"

            logger.info(
                "fitted %d-round %s ensemble on %d samples x %d features",
                len(members),
                cfg.weak_learner,
                X_arr.shape[0],
                X_arr.shape[1],
            )
            return self
        finally:
            self._fit_thread = None
            self._lock.release()

    def _run_rounds(
        self,
        X: np.ndarray,
        y: np.ndarray,
        cfg: BoostingConfig,
        search: WeakLearnerSearch,
        progress: Optional[ProgressCallback],
    ) -> Tuple[List[EnsembleMember], List[float]]:
        n_rounds = cfg.n_cls
        if n_rounds > 0 and np.all(np.ptp(X, axis=0) == 0):
            warnings.warn(
                "Every feature is constant; each round can only predict a single label.",
                UserWarning,
            )

        state = WeightState.uniform(X.shape[0])
        members: List[EnsembleMember] = []
        errors: List[float] = []

        progress = progress or NullProgress()
        progress.init(total=n_rounds, label="boosting")

        for r in range(n_rounds):
            candidate = search.search(X, y, state.weights)
            learner = candidate.learner
            pred = learner.predict(X)
            alpha, state = update_weights(state, y, pred, candidate.error, epsilon=cfg.epsilon)

            members.append(EnsembleMember(stump=learner, alpha=alpha))
            errors.append(float(candidate.error))
            logger.debug(
                "round %d/%d: %s error=%.6g alpha=%.6g",
                r + 1,
                n_rounds,
                learner.to_dict(),
                candidate.error,
                alpha,
            )
            progress.update(current=r + 1)

        progress.finalize(label="boosting")

        return members, errors

    def _clear_fitted(self) -> None:
        for name in ("members_", "estimator_weights_", "estimator_errors_", "n_features_in_", "classes_"):
            if name in self.__dict__:
                delattr(self, name)

    def _set_fitted(
        self,
        members: List[EnsembleMember],
        *,
        n_features_in: Optional[int],
        errors: Optional[List[float]] = None,
    ) -> None:
        """Install a trained ensemble without running fit (used by the model codec).

        ``n_features_in=None`` means the training width is unknown; inputs then
        only need the columns the members actually read.
        """
        with self._lock:
            self.members_ = tuple(members)
            self.estimator_weights_ = np.array([m.alpha for m in members], dtype=np.float64)
            self.estimator_errors_ = np.array(errors if errors is not None else [np.nan] * len(members), dtype=np.float64)
            self.n_features_in_ = None if n_features_in is None else int(n_features_in)
            self.classes_ = np.array([-1, 1])
            self._state = "trained"

    # ------------------------------------------------------------------
    # inference
    # ------------------------------------------------------------------
    def _fitted_snapshot(self) -> Tuple[Tuple[EnsembleMember, ...], Optional[int]]:
        if self._fit_thread == threading.get_ident():
            raise InvalidState("The model cannot be used from inside its own running fit().")
        # other threads wait for an in-flight fit
        with self._lock:
            if self._state != "trained":
                raise ModelNotFitted(
                    f"This {type(self).__name__} instance is not fitted yet. Call 'fit' first."
                )
            return self.members_, self.n_features_in_

    def decision_function(self, X: Any) -> np.ndarray:
        """Weighted vote ``sum_m alpha_m * h_m(x)`` for every row of X."""
        members, n_features = self._fitted_snapshot()
        X_arr = check_inference_data(X, n_features=n_features, min_features=required_width(members))

        scores = np.zeros(X_arr.shape[0], dtype=np.float64)
        for m in members:
            scores += m.alpha * m.stump.predict(X_arr)
        return scores

    def predict(self, X: Any) -> np.ndarray:
        scores = self.decision_function(X)
        return np.where(scores >= 0.0, DEFAULT_LABEL, -DEFAULT_LABEL).astype(np.int64)

    def staged_predict(self, X: Any) -> Iterator[np.ndarray]:
        """Yield the ensemble prediction after each round."""
        members, n_features = self._fitted_snapshot()
        X_arr = check_inference_data(X, n_features=n_features, min_features=required_width(members))

        scores = np.zeros(X_arr.shape[0], dtype=np.float64)
        for m in members:
            scores += m.alpha * m.stump.predict(X_arr)
            yield np.where(scores >= 0.0, DEFAULT_LABEL, -DEFAULT_LABEL).astype(np.int64)

    # ------------------------------------------------------------------
    # persistence
    # ------------------------------------------------------------------
    def to_state(self) -> Dict[str, Any]:
        from boostlab.io.codec import to_state

        return to_state(self)

    @classmethod
    def from_state(cls, record: Any) -> "AdaBoostClassifier":
        from boostlab.io.codec import from_state

        return from_state(record)


__all__ = ["DEFAULT_LABEL", "EnsembleMember", "AdaBoostClassifier", "required_width"]
