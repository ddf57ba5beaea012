"""Binary model artifacts.

We persist a dict package via joblib with the structure:

{
  "__boostlab_artifact__": true,
  "schema_version": "1",
  "meta": <free-form JSON-friendly dict>,
  "model": <fitted AdaBoostClassifier>,
}

The JSON record from :mod:`boostlab.io.codec` is the portable format; this one
keeps the live estimator object (including per-round errors) for Python-only
round trips.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from datetime import datetime, timezone
from io import BytesIO
from typing import Any, Dict, Optional, Tuple, Union

import joblib

from boostlab.components.boosting.ensemble import AdaBoostClassifier
from boostlab.core.errors import InvalidInput

SCHEMA_VERSION = "1"
MAGIC_KEY = "__boostlab_artifact__"


@dataclass
class SaveResult:
    content_bytes: bytes
    size: int
    sha256: str


def _ensure_model_is_serializable(model: Any) -> None:
    if not isinstance(model, AdaBoostClassifier):
        raise InvalidInput(f"Artifacts hold AdaBoostClassifier models, got {type(model).__name__}")
    # raises ModelNotFitted for untrained models
    model._fitted_snapshot()


def _hash_bytes(b: bytes) -> str:
    return hashlib.sha256(b).hexdigest()


def save_model_artifact(model: AdaBoostClassifier, meta: Optional[Dict[str, Any]] = None) -> SaveResult:
    """Serialize a fitted model + meta to compressed joblib bytes."""

    _ensure_model_is_serializable(model)

    meta = dict(meta or {})
    meta.setdefault("created_at", datetime.now(timezone.utc).isoformat())
    meta.setdefault("n_cls", len(model.members_))
    meta.setdefault("n_features_in", model.n_features_in_)

    package = {
        MAGIC_KEY: True,
        "schema_version": SCHEMA_VERSION,
        "meta": meta,
        "model": model,
    }

    buf = BytesIO()
    joblib.dump(package, buf, compress=3)
    data = buf.getvalue()

    return SaveResult(content_bytes=data, size=len(data), sha256=_hash_bytes(data))


def load_model_artifact(payload: Union[bytes, BytesIO]) -> Tuple[AdaBoostClassifier, Dict[str, Any]]:
    """Deserialize an artifact payload and validate."""

    buf = BytesIO(payload) if isinstance(payload, bytes) else payload
    try:
        package = joblib.load(buf)
    except Exception as exc:
        raise InvalidInput(f"Could not read model artifact: {exc}") from exc

    if not isinstance(package, dict) or not package.get(MAGIC_KEY):
        raise InvalidInput("Not a valid boostlab artifact package")

    if str(package.get("schema_version")) != SCHEMA_VERSION:
        raise InvalidInput(
            f"Incompatible schema_version: {package.get('schema_version')}, expected {SCHEMA_VERSION}"
        )

    meta = package.get("meta")
    model = package.get("model")
    if meta is None or model is None:
        raise InvalidInput("Corrupt artifact: missing 'meta' or 'model'")

    _ensure_model_is_serializable(model)
    return model, meta
