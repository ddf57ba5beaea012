"""Binary artifact persistence (joblib bytes).

For the portable JSON record see :mod:`boostlab.io.codec`.
"""

from .serialization import MAGIC_KEY, SCHEMA_VERSION, SaveResult, load_model_artifact, save_model_artifact

__all__ = [
    "SCHEMA_VERSION",
    "MAGIC_KEY",
    "SaveResult",
    "save_model_artifact",
    "load_model_artifact",
]
