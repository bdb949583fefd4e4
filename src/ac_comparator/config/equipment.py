"""Equipment record — one air conditioner from the catalog or manual entry."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ac_comparator.config._numeric import finite_or, text_or_blank


class Equipment(BaseModel):
    """Immutable catalog record.  The engines read it, never mutate it."""

    model_config = ConfigDict(frozen=True)

    id: int | str = Field(default=0, description="Catalog id (1-based) or 'custom-<key>' for manual entries")
    brand: str = Field(default="", description="Manufacturer / brand name")
    type: str = Field(default="", description="Form factor (split hi-wall, window, ...)")
    function: str = Field(default="", description="Cooling only or heat pump")
    technology: str = Field(
        default="",
        description="Free-text technology as declared. Anything containing 'conv' "
                    "is treated as conventional, everything else as inverter.",
    )
    voltage: int | str = Field(default=220, description="Supply voltage (V)")
    power_btu: float = Field(default=0.0, description="Rated cooling capacity (BTU/h)")
    power_w: float = Field(default=0.0, description="Rated electrical power (W)")
    model: str = Field(default="", description="Concatenated model designation")
    annual_consumption_kwh: float = Field(
        default=0.0,
        description="Declared annual consumption (kWh/year) for the 2080 h/year reference profile",
    )
    reliability_index: float = Field(default=0.0, description="Declared seasonal efficiency index (IDRS)")
    efficiency_class: str = Field(default="", description="Energy label class (A–F)")

    # --- Part-load power ratings (optional, informational) ---
    p_29_partial: float | None = Field(default=None, description="Partial-load power at 29 °C (W)")
    p_35_partial: float | None = Field(default=None, description="Partial-load power at 35 °C (W)")
    p_29_total: float | None = Field(default=None, description="Full-load power at 29 °C (W)")
    p_35_total: float | None = Field(default=None, description="Full-load power at 35 °C (W)")

    @field_validator("power_btu", "power_w", "annual_consumption_kwh", "reliability_index", mode="before")
    @classmethod
    def _finite_or_zero(cls, v: Any) -> float:
        return finite_or(v, 0.0)

    @field_validator("p_29_partial", "p_35_partial", "p_29_total", "p_35_total", mode="before")
    @classmethod
    def _finite_or_none(cls, v: Any) -> float | None:
        return finite_or(v, None)

    @field_validator("brand", "type", "function", "technology", "model", "efficiency_class", mode="before")
    @classmethod
    def _text(cls, v: Any) -> str:
        return text_or_blank(v)

    @field_validator("voltage", mode="before")
    @classmethod
    def _voltage(cls, v: Any) -> int | str:
        if isinstance(v, (int, str)) and not isinstance(v, bool):
            return v
        number = finite_or(v, None)
        if number is not None and number.is_integer():
            return int(number)
        return text_or_blank(v)

    @property
    def normalized_technology(self) -> str:
        """``"conventional"`` or ``"inverter"``."""
        return "conventional" if "conv" in self.technology.lower() else "inverter"
