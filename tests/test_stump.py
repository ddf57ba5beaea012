import numpy as np
import pytest

from boostlab.components.boosting.stump import WeakStump
from boostlab.core.errors import InvalidInput


def test_positive_polarity_predicts_plus_at_and_above_threshold():
    stump = WeakStump(feature_index=1, threshold=2.0, polarity=1)
    X = np.array([[9.0, 1.0], [9.0, 2.0], [9.0, 3.0]])

    np.testing.assert_array_equal(stump.predict(X), [-1.0, 1.0, 1.0])


def test_negative_polarity_negates_every_prediction():
    X = np.array([[1.0], [2.0], [3.0]])
    pos = WeakStump(0, 2.0, 1)
    neg = WeakStump(0, 2.0, -1)

    np.testing.assert_array_equal(neg.predict(X), -pos.predict(X))


def test_predict_one_matches_predict():
    stump = WeakStump(0, 0.5, -1)
    X = np.array([[0.0], [0.5], [1.0]])

    assert [stump.predict_one(row) for row in X] == stump.predict(X).astype(int).tolist()


def test_dict_round_trip():
    stump = WeakStump(3, -1.25, -1)
    assert WeakStump.from_dict(stump.to_dict()) == stump


@pytest.mark.parametrize("kwargs", [
    {"feature_index": -1, "threshold": 0.0, "polarity": 1},
    {"feature_index": 0, "threshold": 0.0, "polarity": 0},
])
def test_invalid_stump_is_rejected(kwargs):
    with pytest.raises(InvalidInput):
        WeakStump(**kwargs)


def test_from_dict_missing_field():
    with pytest.raises(InvalidInput):
        WeakStump.from_dict({"feature_index": 0, "threshold": 1.0})


def test_negative_polarity_at_threshold_predicts_minus_one():
    stump = WeakStump(0, 2.0, -1)

    assert stump.predict_one([2.0]) == -1
    np.testing.assert_array_equal(stump.predict(np.array([[1.0], [2.0], [3.0]])), [1.0, -1.0, -1.0])
