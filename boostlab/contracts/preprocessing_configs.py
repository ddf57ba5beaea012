from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class MinMaxScaleConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    feature_range: Tuple[float, float] = (0.0, 1.0)

    @model_validator(mode="after")
    def _check_range(self) -> "MinMaxScaleConfig":
        lo, hi = self.feature_range
        if not lo < hi:
            raise ValueError(f"feature_range minimum must be smaller than maximum; got {self.feature_range}")
        return self


class BinarizeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    threshold: float = 0.0


__all__ = ["MinMaxScaleConfig", "BinarizeConfig"]
