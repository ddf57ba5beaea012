from __future__ import annotations

from typing import Any

import numpy as np

from boostlab.core.errors import InvalidLabel


def to_signed_labels(y: Any, positive: Any) -> np.ndarray:
    """Map a binary label vector to {-1, +1}, with ``positive`` becoming +1."""
    arr = np.asarray(y).ravel()
    values = list(dict.fromkeys(arr.tolist()))
    if len(values) > 2:
        raise InvalidLabel(f"Expected at most 2 distinct labels, got {len(values)}: {values[:10]}")
    if positive not in values and len(values) == 2:
        raise InvalidLabel(f"Positive label {positive!r} not found among {values}")
    return np.where(arr == positive, 1, -1).astype(np.int64)


__all__ = ["to_signed_labels"]
