"""Usage profile — how the equipment is run and how money is discounted."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ac_comparator.config._numeric import finite_or

# Declared catalog consumption refers to 2080 h/year (365 days × 5.698 h/day).
BASE_ANNUAL_HOURS = 2080.0
REFERENCE_HOURS_PER_DAY = 5.698
DEFAULT_REAL_DISCOUNT_RATE = 0.01
DEFAULT_AMBIENT_TEMPERATURE_C = 26.2


class UsagePlan(BaseModel):
    """Per-calculation usage inputs.

    Every field is coerced rather than validated: a blank or non-finite
    value falls back to its default so the engines always see finite numbers.
    """

    model_config = ConfigDict(frozen=True)

    hours_per_day: float = Field(
        default=REFERENCE_HOURS_PER_DAY,
        description="Hours of operation per day. Non-finite → 5.698 (reference profile).",
    )
    days_per_year: float | None = Field(
        default=None,
        description="Days of operation per year. None → 2080 / max(hours_per_day, 1).",
    )
    tariff_per_kwh: float = Field(default=1.80, description="Energy tariff (currency/kWh)")
    real_discount_rate: float = Field(
        default=DEFAULT_REAL_DISCOUNT_RATE,
        description="Real annual discount rate as a fraction (0.01 = 1%). "
                    "Non-finite or ≤ −1 → 0.01.",
    )
    ambient_temperature_c: float = Field(
        default=DEFAULT_AMBIENT_TEMPERATURE_C,
        description="Ambient temperature during use (°C)",
    )

    @field_validator("hours_per_day", mode="before")
    @classmethod
    def _hours(cls, v: Any) -> float:
        return finite_or(v, REFERENCE_HOURS_PER_DAY)

    @field_validator("days_per_year", mode="before")
    @classmethod
    def _days(cls, v: Any) -> float | None:
        return finite_or(v, None)

    @field_validator("tariff_per_kwh", mode="before")
    @classmethod
    def _tariff(cls, v: Any) -> float:
        return finite_or(v, 0.0)

    @field_validator("real_discount_rate", mode="before")
    @classmethod
    def _rate(cls, v: Any) -> float:
        rate = finite_or(v, DEFAULT_REAL_DISCOUNT_RATE)
        return rate if rate > -1.0 else DEFAULT_REAL_DISCOUNT_RATE

    @field_validator("ambient_temperature_c", mode="before")
    @classmethod
    def _temperature(cls, v: Any) -> float:
        return finite_or(v, DEFAULT_AMBIENT_TEMPERATURE_C)

    @property
    def effective_days_per_year(self) -> float:
        """Days per year, derived from the reference hours when not given."""
        if self.days_per_year is not None:
            return self.days_per_year
        return BASE_ANNUAL_HOURS / max(self.hours_per_day, 1.0)

    @property
    def annual_hours(self) -> float:
        return self.hours_per_day * self.effective_days_per_year
