from __future__ import annotations

from typing import Literal

# Lifecycle of a boosting estimator.
FitState = Literal["uninitialized", "training", "trained"]

EnsembleKind = Literal["adaboost"]

Polarity = Literal[-1, 1]
