"""Comparison entry and cashflow inputs — one selected equipment plus its costs."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ac_comparator.config._numeric import finite_or
from ac_comparator.config.equipment import Equipment
from ac_comparator.config.usage import DEFAULT_REAL_DISCOUNT_RATE

DEFAULT_LIFE_YEARS = 10.0


class ComparisonEntry(BaseModel):
    """One slot of the comparison: the equipment and what it costs to own."""

    model_config = ConfigDict(frozen=True)

    key: int = Field(default=1, description="Slot number in the comparison (1-based)")
    equipment: Equipment = Field(default_factory=Equipment)
    acquisition_cost: float = Field(default=0.0, description="Purchase price (year 0)")
    installation_cost: float = Field(default=0.0, description="Installation cost (year 0)")
    life_years: float = Field(
        default=DEFAULT_LIFE_YEARS,
        description="Declared / estimated service life (years). Also the Weibull "
                    "base characteristic life when positive.",
    )
    annual_maintenance: float = Field(default=0.0, description="Maintenance cost per year")
    disposal_cost: float = Field(default=0.0, description="Residual / disposal cost at end of life")

    @field_validator("acquisition_cost", "installation_cost", "annual_maintenance", "disposal_cost", mode="before")
    @classmethod
    def _finite_or_zero(cls, v: Any) -> float:
        return finite_or(v, 0.0)

    @field_validator("life_years", mode="before")
    @classmethod
    def _life(cls, v: Any) -> float:
        return finite_or(v, DEFAULT_LIFE_YEARS)

    @property
    def capex(self) -> float:
        """Acquisition + installation, incurred at year 0."""
        return self.acquisition_cost + self.installation_cost

    @property
    def label(self) -> str:
        eq = self.equipment
        return f"{eq.brand} ({eq.technology or eq.normalized_technology})"


class CashflowParams(BaseModel):
    """Horizon and recurring costs for one year-by-year cashflow table."""

    model_config = ConfigDict(frozen=True)

    years: int = Field(default=1, description="Horizon in whole years (fractional values are floored)")
    annual_maintenance: float = Field(default=0.0, description="Maintenance cost per year")
    disposal_cost: float = Field(default=0.0, description="Residual cost booked in the final year")
    real_discount_rate: float = Field(default=DEFAULT_REAL_DISCOUNT_RATE, description="Real annual discount rate")

    @field_validator("years", mode="before")
    @classmethod
    def _years(cls, v: Any) -> int:
        years = finite_or(v, 1.0)
        return max(0, math.floor(years))

    @field_validator("annual_maintenance", "disposal_cost", mode="before")
    @classmethod
    def _finite_or_zero(cls, v: Any) -> float:
        return finite_or(v, 0.0)

    @field_validator("real_discount_rate", mode="before")
    @classmethod
    def _rate(cls, v: Any) -> float:
        rate = finite_or(v, DEFAULT_REAL_DISCOUNT_RATE)
        return rate if rate > -1.0 else DEFAULT_REAL_DISCOUNT_RATE
