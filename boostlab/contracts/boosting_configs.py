from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .types import EnsembleKind


class BoostingConfig(BaseModel):
    """
    Configuration of a stage-wise boosted binary classifier.

    Notes:
      - `n_cls` is the number of boosting rounds; 0 is allowed and yields an
        empty ensemble that predicts the default label.
      - `n_jobs` only parallelizes the per-round search over features; the
        selected stumps do not depend on it.
    """
    model_config = ConfigDict(extra="forbid")

    kind: EnsembleKind = "adaboost"
    # key into boostlab.registries.weak_learners
    weak_learner: str = "stump"

    n_cls: int = Field(default=10, ge=0)
    n_jobs: Optional[int] = None

    # smoothing for alpha = 0.5 * ln((1 - e + eps) / (e + eps))
    epsilon: float = Field(default=1e-10, gt=0.0)


__all__ = ["BoostingConfig"]
