import pickle
import threading
import warnings

import numpy as np
import pytest
from sklearn.base import clone

from boostlab import AdaBoostClassifier, BoostingConfig
from boostlab.components.boosting import search as search_module
from boostlab.core.errors import InvalidInput, InvalidLabel, InvalidState, ModelNotFitted


def test_separable_data_is_fit_exactly(separable_1d):
    X, y = separable_1d
    model = AdaBoostClassifier(n_cls=3).fit(X, y)

    assert model.state == "trained"
    assert len(model.members_) == 3
    np.testing.assert_array_equal(model.predict(X), y)
    assert model.score(X, y) == 1.0


def test_zero_rounds_predicts_default_label(separable_1d):
    X, y = separable_1d
    model = AdaBoostClassifier(n_cls=0).fit(X, y)

    assert model.members_ == ()
    np.testing.assert_array_equal(model.predict([[10.0], [-10.0]]), [1, 1])
    np.testing.assert_array_equal(model.decision_function(X), np.zeros(4))


def test_shape_mismatch_leaves_model_uninitialized():
    model = AdaBoostClassifier(n_cls=2)
    X = np.arange(5, dtype=float).reshape(5, 1)
    y = np.array([1, -1, 1, -1])

    with pytest.raises(InvalidInput):
        model.fit(X, y)
    assert model.state == "uninitialized"
    assert not hasattr(model, "members_")


@pytest.mark.parametrize("X, y", [
    ([], []),
    ([[]], [1]),
    ([[1.0], [np.nan]], [1, -1]),
    ([[1.0, 2.0], [3.0]], [1, -1]),
    ([["a"], ["b"]], [1, -1]),
    ([1.0, 2.0], [1, -1]),
])
def test_malformed_training_data(X, y):
    with pytest.raises(InvalidInput):
        AdaBoostClassifier().fit(X, y)


@pytest.mark.parametrize("y", [[0, 1], [1, 2], [-1, np.nan], ["yes", "no"]])
def test_labels_outside_signed_domain(y):
    with pytest.raises(InvalidLabel):
        AdaBoostClassifier().fit([[0.0], [1.0]], y)


def test_invalid_round_count():
    with pytest.raises(InvalidInput):
        AdaBoostClassifier(n_cls=-1).fit([[0.0], [1.0]], [1, -1])


def test_predict_before_fit():
    model = AdaBoostClassifier()
    with pytest.raises(ModelNotFitted):
        model.predict([[1.0]])
    with pytest.raises(ModelNotFitted):
        model.to_state()


def test_predict_column_mismatch(noisy_2d):
    X, y = noisy_2d
    model = AdaBoostClassifier(n_cls=2).fit(X, y)

    with pytest.raises(InvalidInput):
        model.predict(X[:, :2])


def test_single_sample_predict_accepts_1d(separable_1d):
    X, y = separable_1d
    model = AdaBoostClassifier(n_cls=1).fit(X, y)

    np.testing.assert_array_equal(model.predict([3.0]), [1])


def test_predictions_are_always_signed(noisy_2d):
    X, y = noisy_2d
    model = AdaBoostClassifier(n_cls=15).fit(X, y)
    X_new = np.random.default_rng(1).normal(scale=5.0, size=(200, 3))

    pred = model.predict(X_new)
    assert set(np.unique(pred)) <= {-1, 1}
    assert np.all(model.estimator_weights_ >= 0)
    assert np.all(model.estimator_errors_ <= 0.5)


def test_fit_is_deterministic_and_independent_of_n_jobs(noisy_2d):
    X, y = noisy_2d
    a = AdaBoostClassifier(n_cls=8).fit(X, y)
    b = AdaBoostClassifier(n_cls=8).fit(X, y)
    c = AdaBoostClassifier(n_cls=8, n_jobs=2).fit(X, y)

    assert a.members_ == b.members_ == c.members_
    np.testing.assert_array_equal(a.estimator_weights_, c.estimator_weights_)


def test_refit_overwrites_previous_model(separable_1d, noisy_2d):
    X1, y1 = separable_1d
    X2, y2 = noisy_2d
    model = AdaBoostClassifier(n_cls=2).fit(X1, y1)
    model.fit(X2, y2)

    assert model.n_features_in_ == 3
    assert model.members_ == AdaBoostClassifier(n_cls=2).fit(X2, y2).members_


def test_failure_during_training_resets_state(separable_1d, monkeypatch):
    X, y = separable_1d
    model = AdaBoostClassifier(n_cls=2).fit(X, y)

    def boom(self, X, y, w):
        raise RuntimeError("search failed")

    monkeypatch.setattr(search_module.StumpSearch, "search", boom)
    with pytest.raises(RuntimeError):
        model.fit(X, y)

    assert model.state == "uninitialized"
    assert not hasattr(model, "members_")
    with pytest.raises(ModelNotFitted):
        model.predict(X)


def test_concurrent_fit_is_rejected(separable_1d):
    X, y = separable_1d
    model = AdaBoostClassifier(n_cls=2)

    class Reentrant:
        def init(self, *, total, label=None):
            model.fit(X, y)

        def update(self, *, current, label=None):
            pass

        def finalize(self, *, label=None):
            pass

    with pytest.raises(InvalidState):
        model.fit(X, y, progress=Reentrant())
    assert model.state == "uninitialized"


def test_progress_reports_each_round(separable_1d):
    X, y = separable_1d
    events = []

    class Recorder:
        def init(self, *, total, label=None):
            events.append(("init", total))

        def update(self, *, current, label=None):
            events.append(("update", current))

        def finalize(self, *, label=None):
            events.append(("finalize", None))

    AdaBoostClassifier(n_cls=3).fit(X, y, progress=Recorder())

    assert events == [("init", 3), ("update", 1), ("update", 2), ("update", 3), ("finalize", None)]


def test_staged_predict_ends_with_predict(noisy_2d):
    X, y = noisy_2d
    model = AdaBoostClassifier(n_cls=5).fit(X, y)
    stages = list(model.staged_predict(X))

    assert len(stages) == 5
    np.testing.assert_array_equal(stages[-1], model.predict(X))


def test_constant_features_warn_and_still_fit():
    X = np.ones((3, 2))
    y = np.array([1, 1, -1])

    with pytest.warns(UserWarning, match="constant"):
        model = AdaBoostClassifier(n_cls=2).fit(X, y)
    np.testing.assert_array_equal(model.predict(X), [1, 1, 1])


def test_from_config():
    cfg = BoostingConfig(n_cls=4, n_jobs=2)
    model = AdaBoostClassifier.from_config(cfg)

    assert model.n_cls == 4
    assert model.n_jobs == 2
    assert model.to_config() == cfg


def test_sklearn_clone_and_pickle(separable_1d):
    X, y = separable_1d
    model = AdaBoostClassifier(n_cls=3).fit(X, y)

    fresh = clone(model)
    assert fresh.get_params()["n_cls"] == 3
    assert fresh.state == "uninitialized"

    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        restored = pickle.loads(pickle.dumps(model))
    np.testing.assert_array_equal(restored.predict(X), model.predict(X))
    restored.fit(X, y)


def test_rejected_refit_clears_previous_model(separable_1d):
    X, y = separable_1d
    model = AdaBoostClassifier(n_cls=2).fit(X, y)

    with pytest.raises(InvalidLabel):
        model.fit(X, [0, 1, 0, 1])

    assert model.state == "uninitialized"
    assert not hasattr(model, "members_")
    with pytest.raises(ModelNotFitted):
        model.predict(X)


def test_predict_from_inside_fit_is_rejected(separable_1d):
    X, y = separable_1d
    model = AdaBoostClassifier(n_cls=2)
    outcome = {}

    class Peeking:
        def init(self, *, total, label=None):
            pass

        def update(self, *, current, label=None):
            model.predict(X)

        def finalize(self, *, label=None):
            pass

    def run():
        try:
            model.fit(X, y, progress=Peeking())
        except InvalidState as exc:
            outcome["error"] = exc

    t = threading.Thread(target=run, daemon=True)
    t.start()
    t.join(timeout=10)

    assert not t.is_alive()
    assert isinstance(outcome.get("error"), InvalidState)
    assert model.state == "uninitialized"


def test_predict_from_another_thread_waits_for_running_fit(separable_1d):
    X, y = separable_1d
    model = AdaBoostClassifier(n_cls=2)
    started, release = threading.Event(), threading.Event()
    results = {}

    class Gate:
        def init(self, *, total, label=None):
            started.set()
            release.wait(timeout=10)

        def update(self, *, current, label=None):
            pass

        def finalize(self, *, label=None):
            pass

    fitter = threading.Thread(target=lambda: model.fit(X, y, progress=Gate()), daemon=True)
    fitter.start()
    assert started.wait(timeout=10)

    reader = threading.Thread(target=lambda: results.update(pred=model.predict(X)), daemon=True)
    reader.start()
    reader.join(timeout=0.2)
    assert reader.is_alive()

    release.set()
    fitter.join(timeout=10)
    reader.join(timeout=10)

    assert not reader.is_alive()
    assert model.state == "trained"
    np.testing.assert_array_equal(results["pred"], y)
