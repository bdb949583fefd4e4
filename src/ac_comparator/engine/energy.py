"""Energy & ownership cost — present-valued costs over an equipment's life.

Catalog consumption is declared for a fixed reference profile of 2080 h/year.
It is scaled to the user's profile before anything is priced:

  usage_factor          = (hours/day × days/year) / 2080
  annual_consumption    = declared_kwh × usage_factor
  annual_energy_cost    = annual_consumption × tariff
  pv_energy_cost        = annuity(annual_energy_cost, r, n)
  pv_maintenance        = annuity(annual_maintenance, r, n)
  pv_disposal           = disposal / (1 + r)^n
  total_life_value_pv   = capex + pv_energy_cost + pv_maintenance + pv_disposal

Capex happens at year 0 and is not discounted.  Bad numbers never raise:
they are coerced to defaults by the input models and by ``_life_years``,
and any figure that overflows is reported as 0.
"""

from __future__ import annotations

import logging

from ac_comparator.config._numeric import finite_or
from ac_comparator.config.entry import ComparisonEntry
from ac_comparator.config.equipment import Equipment
from ac_comparator.config.usage import BASE_ANNUAL_HOURS, UsagePlan
from ac_comparator.finance.discount import present_value_annuity, present_value_single
from ac_comparator.models.results import CostBreakdown

logger = logging.getLogger('ac_comparator.engine.energy')


def estimate_annual_consumption(equipment: Equipment) -> float:
    """Declared annual consumption (kWh/year), clamped to ≥ 0."""
    consumption = finite_or(equipment.annual_consumption_kwh, 0.0)
    return consumption if consumption > 0 else 0.0


def calculate_consumption(equipment: Equipment, usage: UsagePlan) -> float:
    """Declared consumption scaled to the usage profile (kWh/year)."""
    usage_factor = usage.annual_hours / BASE_ANNUAL_HOURS
    return estimate_annual_consumption(equipment) * usage_factor


def _finite(value: float) -> float:
    return finite_or(value, 0.0)


def _life_years(value: float) -> float:
    years = finite_or(value, 1.0)
    return years if years > 0 else 0.0


def compute_cost_breakdown(
    entry: ComparisonEntry,
    usage: UsagePlan,
    life_years: float = 1,
) -> CostBreakdown:
    """Cost breakdown for one entry over ``life_years``."""
    n = _life_years(life_years)
    r = usage.real_discount_rate

    # ── Energy ─────────────────────────────────────────────────────────
    annual_consumption = _finite(calculate_consumption(entry.equipment, usage))
    lifetime_consumption = _finite(annual_consumption * n)
    annual_energy_cost = _finite(annual_consumption * usage.tariff_per_kwh)
    lifetime_energy_cost = _finite(annual_energy_cost * n)
    pv_energy_cost = present_value_annuity(annual_energy_cost, r, n)

    # ── Maintenance & disposal ─────────────────────────────────────────
    annual_maintenance = entry.annual_maintenance
    disposal = entry.disposal_cost
    pv_maintenance = present_value_annuity(annual_maintenance, r, n)
    pv_disposal = present_value_single(disposal, r, n)

    # ── Operating cost (COA) ───────────────────────────────────────────
    annual_operating_cost = _finite(annual_energy_cost + annual_maintenance)
    lifetime_operating_cost = _finite(lifetime_energy_cost + annual_maintenance * n + disposal)
    pv_operating_cost = _finite(pv_energy_cost + pv_maintenance + pv_disposal)

    # ── Totals (capex at year 0) ───────────────────────────────────────
    capex = _finite(entry.capex)
    first_year_cost = _finite(capex + annual_energy_cost)
    lifetime_total = _finite(lifetime_energy_cost + capex)
    total_life_value_pv = _finite(pv_energy_cost + capex + pv_maintenance + pv_disposal)

    return CostBreakdown(
        label=entry.label,
        equipment=entry.equipment,
        life_years=n,
        acquisition_cost=entry.acquisition_cost,
        installation_cost=entry.installation_cost,
        capex=capex,
        annual_consumption_kwh=annual_consumption,
        lifetime_consumption_kwh=lifetime_consumption,
        annual_energy_cost=annual_energy_cost,
        lifetime_energy_cost=lifetime_energy_cost,
        pv_energy_cost=pv_energy_cost,
        annual_maintenance=annual_maintenance,
        pv_maintenance=pv_maintenance,
        disposal_cost=disposal,
        pv_disposal=pv_disposal,
        annual_operating_cost=annual_operating_cost,
        lifetime_operating_cost=lifetime_operating_cost,
        pv_operating_cost=pv_operating_cost,
        first_year_cost=first_year_cost,
        lifetime_total=lifetime_total,
        total_life_value_pv=total_life_value_pv,
    )


def compute_cost_breakdowns(
    entries: list[ComparisonEntry],
    usage: UsagePlan,
    life_years: float = 1,
) -> list[CostBreakdown]:
    """Cost breakdown for every entry, all over the same ``life_years``."""
    breakdowns = [compute_cost_breakdown(e, usage, life_years) for e in entries]
    logger.debug(f"Computed {len(breakdowns)} cost breakdowns over {life_years} years")
    return breakdowns
