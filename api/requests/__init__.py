from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator

from config import settings


def _check_set_count(v: int) -> int:
    if not settings.min_fuzzy_sets <= v <= settings.max_fuzzy_sets:
        raise ValueError(
            f"must be between {settings.min_fuzzy_sets} and {settings.max_fuzzy_sets} (got {v})"
        )
    return v


def _check_forecast_steps(v: Optional[int]) -> Optional[int]:
    if v is not None and v > settings.max_forecast_steps:
        raise ValueError(f"must be <= {settings.max_forecast_steps} (got {v})")
    return v


class ForecastRequest(BaseModel):
    series: List[float] = Field(min_length=1)
    universe_min: float
    universe_max: float
    num_fuzzy_sets: int = Field(default_factory=lambda: settings.default_num_fuzzy_sets)
    forecast_steps: int = Field(default=0, ge=0)
    include_trace: bool = False

    @field_validator("num_fuzzy_sets")
    @classmethod
    def validate_num_fuzzy_sets(cls, v: int) -> int:
        return _check_set_count(v)

    @field_validator("forecast_steps")
    @classmethod
    def validate_forecast_steps(cls, v: int) -> int:
        return _check_forecast_steps(v)


class ObservationIn(BaseModel):
    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    actual: float


class ObservationForecastRequest(BaseModel):
    observations: List[ObservationIn] = Field(min_length=1)
    universe_min: float
    universe_max: float
    num_fuzzy_sets: int = Field(default_factory=lambda: settings.default_num_fuzzy_sets)
    forecast_steps: Optional[int] = Field(default=None, ge=0)

    @field_validator("num_fuzzy_sets")
    @classmethod
    def validate_num_fuzzy_sets(cls, v: int) -> int:
        return _check_set_count(v)

    @field_validator("forecast_steps")
    @classmethod
    def validate_forecast_steps(cls, v: Optional[int]) -> Optional[int]:
        return _check_forecast_steps(v)


class SweepRequest(BaseModel):
    series: List[float] = Field(min_length=1)
    universe_min: float
    universe_max: float
    min_sets: int = Field(default_factory=lambda: settings.min_fuzzy_sets)
    max_sets: int = Field(default_factory=lambda: settings.max_fuzzy_sets)

    @field_validator("min_sets", "max_sets")
    @classmethod
    def validate_set_range(cls, v: int) -> int:
        return _check_set_count(v)
