from __future__ import annotations

"""Training summary for a fitted boosting ensemble.

Payloads are JSON-friendly: plain lists and scalars only, and unknown values
(per-round errors of a model rebuilt from a record) are reported as None
rather than NaN.
"""

import math
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from boostlab.components.boosting.ensemble import AdaBoostClassifier, required_width


def _finite_or_none(x: Any) -> Optional[float]:
    try:
        f = float(x)
    except (TypeError, ValueError):
        return None
    return f if math.isfinite(f) else None


def effective_n_from_weights(w: Sequence[float]) -> float:
    """Effective number of rounds, ``(sum a)^2 / sum a^2`` over the positive alphas."""
    a = np.asarray(w, dtype=float)
    a = a[a > 0]
    if a.size == 0:
        return 0.0
    return float(np.sum(a)) ** 2 / float(np.sum(a * a))


def boosting_report(model: AdaBoostClassifier) -> Dict[str, Any]:
    """
    Summarise a trained ensemble:

    - per-round table (learner fields, alpha, weighted training error)
    - per-feature usage count and summed alpha
    - effective number of rounds
    """
    members, n_features = model._fitted_snapshot()
    width = n_features if n_features is not None else required_width(members)

    alphas = [float(m.alpha) for m in members]
    errors: List[Optional[float]] = [
        _finite_or_none(e) for e in getattr(model, "estimator_errors_", [None] * len(members))
    ]

    usage = [0] * width
    feature_alpha = [0.0] * width
    rounds: List[Dict[str, Any]] = []
    for i, m in enumerate(members):
        row = m.stump.to_dict()
        j = row.get("feature_index")
        if j is not None and 0 <= int(j) < width:
            usage[int(j)] += 1
            feature_alpha[int(j)] += alphas[i]
        row.update(round=i + 1, alpha=alphas[i], error=errors[i] if i < len(errors) else None)
        rounds.append(row)

    return {
        "n_rounds": len(members),
        "n_features_in": n_features,
        "alphas": alphas,
        "errors": errors,
        "effective_n_rounds": effective_n_from_weights(alphas),
        "feature_usage": usage,
        "feature_alpha": feature_alpha,
        "rounds": rounds,
    }


__all__ = ["boosting_report", "effective_n_from_weights"]
