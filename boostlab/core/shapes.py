from __future__ import annotations

"""Input validation for the boosting estimators.

Conventions
-----------
- X is 2D: (n_samples, n_features), float64, finite
- y is 1D: (n_samples,), values in {-1, +1}

Unlike loaders that try to guess orientation, nothing here transposes or
truncates: a mismatch is the caller's to fix and is reported as
:class:`~boostlab.core.errors.InvalidInput`.
"""

from typing import Any, Optional, Tuple

import numpy as np
from sklearn.utils.validation import check_array

from boostlab.core.errors import InvalidInput, InvalidLabel

SIGNED_LABELS = (-1, 1)


def _as_matrix(X: Any, *, what: str) -> np.ndarray:
    try:
        return check_array(
            X,
            dtype=np.float64,
            ensure_2d=True,
            ensure_min_samples=1,
            ensure_min_features=1,
        )
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"{what} must be a non-empty rectangular numeric matrix: {exc}") from exc


def check_labels(y: Any) -> np.ndarray:
    """Return y as a float64 vector, raising InvalidLabel for anything outside {-1, +1}."""

    try:
        arr = np.asarray(y, dtype=np.float64).ravel()
    except (TypeError, ValueError) as exc:
        raise InvalidLabel(f"y must contain only -1 and +1 labels: {exc}") from exc

    bad = ~np.isin(arr, SIGNED_LABELS)
    if np.any(bad):
        offending = np.unique(arr[bad])[:10].tolist()
        raise InvalidLabel(f"y must contain only -1 and +1 labels; got {offending}")
    return arr


def check_training_data(X: Any, y: Any) -> Tuple[np.ndarray, np.ndarray]:
    """Strict training-set validation: 2D X, 1D y, matching lengths, signed labels."""

    try:
        y_arr = np.asarray(y)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"y could not be converted to an array: {exc}") from exc

    if y_arr.ndim != 1:
        raise InvalidInput(f"y must be 1D (n_samples,). Got shape {y_arr.shape}.")
    if y_arr.shape[0] < 1:
        raise InvalidInput("y must contain at least 1 label.")

    X_arr = _as_matrix(X, what="X")

    if X_arr.shape[0] != y_arr.shape[0]:
        raise InvalidInput(
            f"X and y length mismatch: {X_arr.shape[0]} vs {y_arr.shape[0]}."
        )

    return X_arr, check_labels(y_arr)


def check_inference_data(X: Any, *, n_features: Optional[int], min_features: int = 1) -> np.ndarray:
    """Validate X for prediction. A 1D input is treated as a single sample.

    With a known training width the column count must match it exactly;
    with ``n_features=None`` any X with at least ``min_features`` columns is
    accepted.
    """

    try:
        raw = np.asarray(X)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"X could not be converted to an array: {exc}") from exc

    if raw.ndim == 1 and raw.shape[0] > 0:
        raw = raw.reshape(1, -1)

    X_arr = _as_matrix(raw, what="X")

    if n_features is None:
        if X_arr.shape[1] < min_features:
            raise InvalidInput(
                f"X has {X_arr.shape[1]} features, but the model reads feature index {min_features - 1}."
            )
    elif X_arr.shape[1] != n_features:
        raise InvalidInput(
            f"X has {X_arr.shape[1]} features, but the model was trained with {n_features}."
        )
    return X_arr


__all__ = [
    "SIGNED_LABELS",
    "check_labels",
    "check_training_data",
    "check_inference_data",
]
