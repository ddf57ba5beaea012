"""Boosting exception types.

Every error is raised eagerly at the validation boundary of ``fit`` /
``predict`` / record decoding, before any computation starts. Nothing is
retried internally; callers fix their inputs and call again.
"""

from __future__ import annotations

from sklearn.exceptions import NotFittedError


class BoostingError(Exception):
    """Base class for all boostlab errors."""


class InvalidInput(BoostingError, ValueError):
    """Raised for empty, malformed or shape-mismatched data and records."""


class InvalidLabel(InvalidInput):
    """Raised when a training label is not -1 or +1."""


class ModelNotFitted(BoostingError, NotFittedError):
    """Raised when a model is used before a successful ``fit``."""


class InvalidState(BoostingError, RuntimeError):
    """Raised when ``fit`` is called while another ``fit`` is running on the same instance."""


__all__ = [
    "BoostingError",
    "InvalidInput",
    "InvalidLabel",
    "ModelNotFitted",
    "InvalidState",
]
