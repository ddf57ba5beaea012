from dataclasses import dataclass

import numpy as np
import pytest

from boostlab import AdaBoostClassifier
from boostlab.components.boosting.search import StumpSearch
from boostlab.core.errors import InvalidInput
from boostlab.registries import list_weak_learner_kinds, make_weak_learner_search, register_weak_learner
from boostlab.registries.base import Registry
from boostlab.registries.weak_learners import WeakLearnerKind


def test_registry_basics():
    reg = Registry[int](_name="numbers")
    reg.register("one")(1)

    assert reg.get("one") == 1
    assert reg.try_get("two") is None
    with pytest.raises(KeyError, match="numbers"):
        reg.get("two")


def test_stump_is_builtin():
    assert "stump" in list_weak_learner_kinds()
    search = make_weak_learner_search("stump", n_jobs=2)
    assert isinstance(search, StumpSearch)
    assert search.n_jobs == 2


def test_unknown_kind_fails_before_training(separable_1d):
    X, y = separable_1d
    model = AdaBoostClassifier(weak_learner="no-such-learner")

    with pytest.raises(InvalidInput):
        model.fit(X, y)
    assert model.state == "uninitialized"


@dataclass(frozen=True)
class _SignOfFirstFeature:
    kind = "sign0"

    def predict(self, X):
        return np.where(np.asarray(X)[:, 0] >= 0, 1.0, -1.0)

    def predict_one(self, x):
        return 1 if x[0] >= 0 else -1

    def to_dict(self):
        return {}


@dataclass(frozen=True)
class _Candidate:
    learner: _SignOfFirstFeature
    error: float


class _SignSearch:
    kind = "sign0"

    def __init__(self, n_jobs=None):
        self.n_jobs = n_jobs

    def search(self, X, y, w):
        learner = _SignOfFirstFeature()
        error = float(np.sum(w[learner.predict(X) != y]))
        return _Candidate(learner, error)


def test_custom_weak_learner_plugs_into_the_boosting_loop():
    register_weak_learner("sign0", replace=True)(WeakLearnerKind(make_search=_SignSearch, decode=lambda d: _SignOfFirstFeature()))
    X = np.array([[-2.0], [-1.0], [1.0], [2.0]])
    y = np.array([-1, -1, 1, 1])

    model = AdaBoostClassifier(n_cls=2, weak_learner="sign0").fit(X, y)

    assert all(isinstance(m.stump, _SignOfFirstFeature) for m in model.members_)
    np.testing.assert_array_equal(model.predict(X), y)
