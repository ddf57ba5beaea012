from __future__ import annotations

"""Model codec: trained ensemble <-> plain record.

The record lists, per member, ``feature_index``, ``threshold``, ``polarity``
and ``alpha``, plus the configured round count and the training-time feature
count. Training data and sample weights are never persisted.

Example record::

    {
      "schema_version": "1",
      "kind": "adaboost",
      "weak_learner": "stump",
      "n_cls": 2,
      "n_features_in": 3,
      "members": [
        {"feature_index": 1, "threshold": 0.5, "polarity": 1, "alpha": 1.2},
        {"feature_index": 0, "threshold": 2.0, "polarity": -1, "alpha": 0.4}
      ]
    }
"""

import json
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from boostlab.components.boosting.ensemble import AdaBoostClassifier, EnsembleMember
from boostlab.contracts.model_records import MemberRecord, ModelRecord
from boostlab.core.errors import InvalidInput
from boostlab.registries.weak_learners import decode_weak_learner


def to_record(model: AdaBoostClassifier) -> ModelRecord:
    members, n_features = model._fitted_snapshot()
    return ModelRecord(
        weak_learner=model.weak_learner,
        n_cls=len(members),
        n_features_in=n_features,
        members=[MemberRecord(**m.to_dict()) for m in members],
    )


def to_state(model: AdaBoostClassifier) -> Dict[str, Any]:
    """Serialize a trained model to a JSON-friendly dict."""
    if not isinstance(model, AdaBoostClassifier):
        raise InvalidInput(f"to_state expects an AdaBoostClassifier, got {type(model).__name__}")
    return to_record(model).model_dump(mode="json")


def from_state(record: Union[ModelRecord, Dict[str, Any]]) -> AdaBoostClassifier:
    """Rebuild a trained model from a record; usable for predict immediately."""
    if isinstance(record, ModelRecord):
        rec = record
    else:
        try:
            rec = ModelRecord.model_validate(record)
        except ValidationError as exc:
            raise InvalidInput(f"Invalid model record: {exc}") from exc

    members = []
    for m in rec.members:
        learner = decode_weak_learner(rec.weak_learner, m.model_dump(exclude={"alpha"}))
        members.append(EnsembleMember(stump=learner, alpha=float(m.alpha)))

    model = AdaBoostClassifier(n_cls=rec.n_cls, weak_learner=rec.weak_learner)
    model._set_fitted(members, n_features_in=rec.n_features_in)
    return model


def dumps_state(model: AdaBoostClassifier, *, indent: int | None = None) -> str:
    return json.dumps(to_state(model), indent=indent)


def loads_state(text: Union[str, bytes]) -> AdaBoostClassifier:
    try:
        rec = ModelRecord.model_validate_json(text)
    except ValidationError as exc:
        raise InvalidInput(f"Invalid model record: {exc}") from exc
    return from_state(rec)


def save_state(model: AdaBoostClassifier, path: Union[str, Path]) -> Path:
    p = Path(path).expanduser()
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(to_state(model), f, ensure_ascii=False, indent=2)
    return p


def load_state(path: Union[str, Path]) -> AdaBoostClassifier:
    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(f"Model record not found: {p}")
    return loads_state(p.read_text(encoding="utf-8"))


__all__ = [
    "to_record",
    "to_state",
    "from_state",
    "dumps_state",
    "loads_state",
    "save_state",
    "load_state",
]
