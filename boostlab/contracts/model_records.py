from __future__ import annotations

"""Persisted model records.

A record is plain structured data (no executable content): it lists every
ensemble member and the configured round count, and is enough to rebuild a
trained model without the training data or sample weights.

Records are strict (extra fields forbidden) to prevent silent drift between
writers and readers.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import EnsembleKind, Polarity

RECORD_SCHEMA_VERSION = "1"


class RecordModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class MemberRecord(RecordModel):
    feature_index: int = Field(ge=0)
    threshold: float
    polarity: Polarity
    alpha: float


class ModelRecord(RecordModel):
    schema_version: str = RECORD_SCHEMA_VERSION
    kind: EnsembleKind = "adaboost"
    weak_learner: str = "stump"

    n_cls: int = Field(ge=0)
    # hand-written records may omit it; predict then only needs the columns the members read
    n_features_in: Optional[int] = Field(default=None, ge=1)
    members: List[MemberRecord] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_members(self) -> "ModelRecord":
        if self.schema_version != RECORD_SCHEMA_VERSION:
            raise ValueError(
                f"Incompatible schema_version: {self.schema_version}, expected {RECORD_SCHEMA_VERSION}"
            )
        if len(self.members) != self.n_cls:
            raise ValueError(f"Record lists {len(self.members)} members but n_cls={self.n_cls}")
        if self.n_features_in is not None:
            for i, m in enumerate(self.members):
                if m.feature_index >= self.n_features_in:
                    raise ValueError(
                        f"members[{i}].feature_index={m.feature_index} out of range for "
                        f"n_features_in={self.n_features_in}"
                    )
        return self


__all__ = ["RECORD_SCHEMA_VERSION", "MemberRecord", "ModelRecord"]
