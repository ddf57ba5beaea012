"""Built-in weak learner registrations."""

from __future__ import annotations

from boostlab.components.boosting.search import StumpSearch
from boostlab.components.boosting.stump import WeakStump
from boostlab.registries.weak_learners import WeakLearnerKind, register_weak_learner

register_weak_learner("stump")(
    WeakLearnerKind(make_search=StumpSearch, decode=WeakStump.from_dict)
)
