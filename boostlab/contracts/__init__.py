"""Configuration and record contracts.

Pydantic models used to validate estimator configuration and persisted model
records. Keep module imports explicit in most of the codebase:

    from boostlab.contracts.boosting_configs import BoostingConfig
"""

from .boosting_configs import BoostingConfig
from .model_records import RECORD_SCHEMA_VERSION, MemberRecord, ModelRecord
from .preprocessing_configs import BinarizeConfig, MinMaxScaleConfig
from .types import EnsembleKind, FitState, Polarity

__all__ = [
    "BoostingConfig",
    "RECORD_SCHEMA_VERSION",
    "MemberRecord",
    "ModelRecord",
    "BinarizeConfig",
    "MinMaxScaleConfig",
    "EnsembleKind",
    "FitState",
    "Polarity",
]
