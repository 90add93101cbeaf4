from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


class ThrottleSettings(BaseModel):
    # Attempts allowed per recent success once failures appear.
    overhead: float = Field(2.0, gt=0, allow_inf_nan=False)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    json_logs: bool = Field(True, alias="json")


class SimulationSettings(BaseModel):
    workers: int = Field(50, ge=1, le=1000)
    # Simulated seconds, measured on the scaled clock.
    duration_s: float = Field(3600.0, gt=0)
    speedup: float = Field(3600.0, gt=0)
    failure_rate: float = Field(0.5, ge=0.0, le=1.0)
    work_ms: float = Field(1.0, ge=0.0, le=1000.0)
    seed: int | None = 42


class Settings(BaseModel):
    throttle: ThrottleSettings = Field(default_factory=ThrottleSettings)
    zones: dict[str, ThrottleSettings] = Field(default_factory=dict)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    simulation: SimulationSettings = Field(default_factory=SimulationSettings)

    @field_validator("zones")
    @classmethod
    def _zone_names(cls, v: dict[str, ThrottleSettings]) -> dict[str, ThrottleSettings]:
        blank = [k for k in v if not k.strip()]
        if blank:
            raise ValueError("zone names must be non-empty")
        return v
