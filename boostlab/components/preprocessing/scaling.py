from __future__ import annotations

from typing import Any, Optional, Tuple

import numpy as np
from sklearn.preprocessing import Binarizer, MinMaxScaler

from boostlab.contracts.preprocessing_configs import BinarizeConfig, MinMaxScaleConfig
from boostlab.core.errors import InvalidInput


def make_minmax_scaler(cfg: Optional[MinMaxScaleConfig] = None) -> MinMaxScaler:
    """Per-column min-max scaler; constant columns map to the range minimum."""
    cfg = cfg or MinMaxScaleConfig()
    return MinMaxScaler(feature_range=tuple(cfg.feature_range), copy=True)


def make_binarizer(cfg: Optional[BinarizeConfig] = None, *, copy: bool = True) -> Binarizer:
    """Values strictly greater than the threshold become 1, everything else 0."""
    cfg = cfg or BinarizeConfig()
    return Binarizer(threshold=float(cfg.threshold), copy=copy)


def _as_numeric(X: Any, *, what: str) -> np.ndarray:
    try:
        arr = np.asarray(X, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{what} must be numeric: {exc}") from exc
    if arr.ndim == 1:
        arr = arr[:, None]
    if arr.ndim != 2 or arr.shape[0] < 1 or arr.shape[1] < 1:
        raise InvalidInput(f"{what} must be a non-empty 2D matrix; got shape {arr.shape}")
    return arr


def scale_train_test(
    X_train: Any,
    X_test: Any,
    *,
    cfg: Optional[MinMaxScaleConfig] = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Fit a min-max scaler on train, apply it to both train and test.

    Always fits **only on the training data** so test statistics never leak
    into the scaling.
    """
    Xtr = _as_numeric(X_train, what="X_train")
    Xte = _as_numeric(X_test, what="X_test")
    if Xtr.shape[1] != Xte.shape[1]:
        raise InvalidInput(f"X_train has {Xtr.shape[1]} columns but X_test has {Xte.shape[1]}")

    scaler = make_minmax_scaler(cfg)
    return scaler.fit_transform(Xtr), scaler.transform(Xte)


def binarize(X: Any, *, cfg: Optional[BinarizeConfig] = None) -> np.ndarray:
    Xn = _as_numeric(X, what="X")
    return make_binarizer(cfg).fit_transform(Xn)


__all__ = ["make_minmax_scaler", "make_binarizer", "scale_train_test", "binarize"]
