"""Lifecycle inputs — operating regime for the Weibull reliability model."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ac_comparator.config._numeric import finite_or
from ac_comparator.config.usage import DEFAULT_AMBIENT_TEMPERATURE_C, REFERENCE_HOURS_PER_DAY

Maintenance = Literal["regular", "irregular", "none"]
Environment = Literal["ideal", "hot", "severe"]
Technology = Literal["inverter", "conventional"]

# Source spellings are accepted as aliases; anything unknown is neutral.
_MAINTENANCE_ALIASES = {"regular": "regular", "irregular": "irregular", "none": "none", "sem": "none"}
_ENVIRONMENT_ALIASES = {"ideal": "ideal", "hot": "hot", "quente": "hot", "severe": "severe", "severo": "severe"}
_TECHNOLOGY_ALIASES = {"inverter": "inverter", "conventional": "conventional", "convencional": "conventional"}


def _normalize(value: Any, aliases: dict[str, str], neutral: str) -> str:
    key = str(value).strip().lower() if value is not None else ""
    return aliases.get(key, neutral)


class LifecycleSettings(BaseModel):
    """Shared regime applied to every equipment in a lifecycle comparison."""

    model_config = ConfigDict(frozen=True)

    hours_per_day: float = Field(
        default=REFERENCE_HOURS_PER_DAY,
        description="Daily hours of use. Only hours above 5.7 h/day shorten life.",
    )
    maintenance: Maintenance = Field(
        default="regular",
        description="Maintenance regime: 'regular' (no penalty), 'irregular', or 'none'.",
    )
    environment: Environment = Field(
        default="ideal",
        description="Installation environment: 'ideal' (no penalty), 'hot', or 'severe'.",
    )
    temperature_c: float = Field(
        default=DEFAULT_AMBIENT_TEMPERATURE_C,
        description="Ambient temperature (°C). Only temperatures above 26.2 °C shorten life.",
    )

    @field_validator("hours_per_day", mode="before")
    @classmethod
    def _hours(cls, v: Any) -> float:
        return finite_or(v, REFERENCE_HOURS_PER_DAY)

    @field_validator("temperature_c", mode="before")
    @classmethod
    def _temperature(cls, v: Any) -> float:
        return finite_or(v, DEFAULT_AMBIENT_TEMPERATURE_C)

    @field_validator("maintenance", mode="before")
    @classmethod
    def _maintenance(cls, v: Any) -> str:
        return _normalize(v, _MAINTENANCE_ALIASES, "regular")

    @field_validator("environment", mode="before")
    @classmethod
    def _environment(cls, v: Any) -> str:
        return _normalize(v, _ENVIRONMENT_ALIASES, "ideal")


class LifecycleParams(LifecycleSettings):
    """Settings resolved for one equipment: technology and base life."""

    technology: Technology = Field(default="inverter", description="Normalized technology class")
    base_life_years: float | None = Field(
        default=None,
        description="Characteristic life before penalties (years). None → 10.",
    )

    @field_validator("technology", mode="before")
    @classmethod
    def _technology(cls, v: Any) -> str:
        return _normalize(v, _TECHNOLOGY_ALIASES, "inverter")

    @field_validator("base_life_years", mode="before")
    @classmethod
    def _base_life(cls, v: Any) -> float | None:
        life = finite_or(v, None)
        return life if life is not None and life > 0 else None
