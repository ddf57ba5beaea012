"""Upstream preprocessing: turns records and raw columns into the numeric
matrix and signed label vector the boosting estimators consume."""

from .labels import to_signed_labels
from .records import FieldDecoder, OneHotEncoder
from .scaling import binarize, make_binarizer, make_minmax_scaler, scale_train_test

__all__ = [
    "to_signed_labels",
    "FieldDecoder",
    "OneHotEncoder",
    "binarize",
    "make_binarizer",
    "make_minmax_scaler",
    "scale_train_test",
]
