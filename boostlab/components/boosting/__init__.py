from .ensemble import DEFAULT_LABEL, AdaBoostClassifier, EnsembleMember
from .search import StumpCandidate, StumpSearch
from .stump import WeakStump
from .weights import DEFAULT_EPSILON, WeightState, compute_alpha, update_weights

__all__ = [
    "DEFAULT_LABEL",
    "AdaBoostClassifier",
    "EnsembleMember",
    "StumpCandidate",
    "StumpSearch",
    "WeakStump",
    "DEFAULT_EPSILON",
    "WeightState",
    "compute_alpha",
    "update_weights",
]
