from .errors import BoostingError, InvalidInput, InvalidLabel, InvalidState, ModelNotFitted

__all__ = [
    "BoostingError",
    "InvalidInput",
    "InvalidLabel",
    "InvalidState",
    "ModelNotFitted",
]
