"""Result types — the contract between the engines and their consumers.

Charts, tables, and document export read these models; nothing in them is
mutated after an engine returns.  All monetary fields are in the tariff's
currency, undiscounted unless the name says ``pv``.
"""

from __future__ import annotations

import math

from pydantic import BaseModel

from ac_comparator.config.equipment import Equipment
from ac_comparator.config.lifecycle import LifecycleParams, LifecycleSettings


# ═══════════════════════════════════════════════════════════════════════════
# Energy / cost
# ═══════════════════════════════════════════════════════════════════════════

class CostBreakdown(BaseModel):
    """Energy and ownership cost of one equipment over its life span.

    Key identity:
      total_life_value_pv = pv_energy_cost + capex + pv_maintenance + pv_disposal
    Capex is incurred at year 0 and never discounted.
    """

    label: str
    equipment: Equipment
    life_years: float
    """Horizon used for every lifetime / PV figure below."""

    # --- Capital ---
    acquisition_cost: float
    installation_cost: float
    capex: float
    """acquisition_cost + installation_cost."""

    # --- Energy ---
    annual_consumption_kwh: float
    """Declared consumption scaled to the usage profile (kWh/year)."""
    lifetime_consumption_kwh: float
    annual_energy_cost: float
    lifetime_energy_cost: float
    pv_energy_cost: float
    """Annual energy cost as a level annuity over life_years."""

    # --- Maintenance & disposal ---
    annual_maintenance: float
    pv_maintenance: float
    disposal_cost: float
    pv_disposal: float
    """Disposal discounted once, at the terminal year."""

    # --- Operating cost (COA) ---
    annual_operating_cost: float
    """energy + maintenance for one year."""
    lifetime_operating_cost: float
    """energy + maintenance over the horizon, plus disposal."""
    pv_operating_cost: float
    """pv_energy_cost + pv_maintenance + pv_disposal."""

    # --- Totals ---
    first_year_cost: float
    """capex + first year of energy."""
    lifetime_total: float
    """Undiscounted lifetime energy + capex."""
    total_life_value_pv: float


# ═══════════════════════════════════════════════════════════════════════════
# Cashflow table
# ═══════════════════════════════════════════════════════════════════════════

class CashflowRow(BaseModel):
    """One year of a cashflow table (also used for B − A difference rows)."""

    year: int
    capex: float
    energy: float
    maintenance: float
    residual: float
    """Disposal cost; non-zero only in the final year."""
    operating_cost: float
    """energy + maintenance + residual."""
    pv_operating_cost: float
    """operating_cost / (1 + r)^year."""
    total: float
    """capex + operating_cost."""
    pv_total: float
    """PV(capex) + pv_operating_cost, capex discounted by (1 + r)^max(year − 1, 0)."""
    cumulative_total: float
    cumulative_pv: float


class CashflowTotals(BaseModel):
    """Column sums of a cashflow table."""

    capex: float
    energy: float
    maintenance: float
    residual: float
    operating_cost: float
    pv_operating_cost: float
    total: float
    pv_total: float

    @classmethod
    def from_rows(cls, rows: list[CashflowRow]) -> CashflowTotals:
        """Sum every column; non-finite cells count as 0."""
        def column(name: str) -> float:
            return sum(v for v in (getattr(r, name) for r in rows) if math.isfinite(v))

        return cls(**{name: column(name) for name in cls.model_fields})


class PaybackResult(BaseModel):
    """Discounted payback between two cashflow tables (B − A)."""

    year: int | None
    """First year whose cumulative PV difference is ≥ 0.  None = no payback within horizon."""

    cumulative_diff: float
    """Cumulative PV difference at the last year."""

    horizon_years: int
    rows: list[CashflowRow]
    """Year-by-year difference rows; ``cumulative_pv`` is the payback curve."""

    totals: CashflowTotals

    @property
    def paid_back(self) -> bool:
        return self.year is not None


# ═══════════════════════════════════════════════════════════════════════════
# Weibull lifecycle
# ═══════════════════════════════════════════════════════════════════════════

class WeibullParams(BaseModel):
    """Shape/scale pair and summary statistics for one equipment."""

    beta: float
    eta: float
    """Characteristic life (years) after penalties and acceleration."""
    acceleration_factor: float
    """Arrhenius hook; 1.0 while temperature is handled by the linear penalty."""
    mttf: float
    """η × Γ(1 + 1/β) (years)."""
    penalties: dict[str, float]
    """Log-scale penalty per term (hours, maintenance, environment, technology, temperature)."""


class ReliabilityPoint(BaseModel):
    t: float
    reliability: float
    """R(t) in percent."""


class DensityPoint(BaseModel):
    t: float
    density: float
    """f(t) in percent per year."""


class HazardPoint(BaseModel):
    t: float
    hazard: float
    """h(t) in percent per year."""


class LifecycleResult(BaseModel):
    """Reliability curves and statistics for one equipment."""

    label: str
    params: LifecycleParams
    beta: float
    eta: float
    acceleration_factor: float
    mttf: float
    max_time: int
    """ceil(3 × MTTF) — right end of the sampled time axis (years)."""
    reliability: list[ReliabilityPoint]
    density: list[DensityPoint]
    hazard: list[HazardPoint]
    """Sampled from t = 0.5; h(0) is not part of the series."""


class AlignedCurves(BaseModel):
    """Several equipment's curves on one shared time axis for overlay.

    Values past an equipment's own ``max_time`` are ``None`` (omitted).
    """

    labels: list[str]
    time_axis: list[float]
    reliability: list[list[float | None]]
    density: list[list[float | None]]
    hazard_time_axis: list[float]
    hazard: list[list[float | None]]


# ═══════════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════════

class ComparisonResult(BaseModel):
    """Everything one comparison run produces."""

    life_years: float
    """Common horizon: the shortest positive service life among the entries."""

    breakdowns: list[CostBreakdown]

    best_index: int
    """Position in ``breakdowns`` of the lowest total_life_value_pv (first on ties)."""
    worst_index: int
    """Position in ``breakdowns`` of the highest total_life_value_pv (first on ties)."""
    best_label: str
    """Entry with the lowest total_life_value_pv."""
    worst_label: str
    saving_pv: float
    """worst − best total_life_value_pv; 0 when they coincide."""

    cashflow_a: list[CashflowRow]
    cashflow_b: list[CashflowRow]
    totals_a: CashflowTotals
    totals_b: CashflowTotals
    payback: PaybackResult

    lifecycle_settings: LifecycleSettings
    lifecycle: list[LifecycleResult]
