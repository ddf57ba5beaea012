"""Decision-stump AdaBoost and tabular preprocessing primitives."""

from boostlab.components.boosting.ensemble import AdaBoostClassifier
from boostlab.contracts.boosting_configs import BoostingConfig
from boostlab.core.errors import BoostingError, InvalidInput, InvalidLabel, InvalidState, ModelNotFitted
from boostlab.io.codec import from_state, to_state

__version__ = "0.1.0"

__all__ = [
    "AdaBoostClassifier",
    "BoostingConfig",
    "BoostingError",
    "InvalidInput",
    "InvalidLabel",
    "InvalidState",
    "ModelNotFitted",
    "from_state",
    "to_state",
]
