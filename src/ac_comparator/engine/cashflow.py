"""Year-by-year cashflow table for one equipment.

Year 0 carries only the capex.  Years 1..N carry energy and maintenance,
and the disposal (residual) cost lands in year N only.

  operating_cost(y)    = energy + maintenance + residual(y)
  pv_operating_cost(y) = operating_cost(y) / (1 + r)^y
  pv_capex(y)          = capex(y) / (1 + r)^max(y − 1, 0)
"""

from __future__ import annotations

from ac_comparator.config.entry import CashflowParams
from ac_comparator.finance.discount import discount_factor
from ac_comparator.models.results import CashflowRow, CashflowTotals, CostBreakdown


def build_cashflow_rows(breakdown: CostBreakdown, params: CashflowParams) -> list[CashflowRow]:
    """Rows for years 0..params.years, energy taken from the breakdown."""
    capex = breakdown.capex
    energy = breakdown.annual_energy_cost
    years = params.years
    r = params.real_discount_rate

    rows = [
        CashflowRow(
            year=0,
            capex=capex,
            energy=0.0,
            maintenance=0.0,
            residual=0.0,
            operating_cost=0.0,
            pv_operating_cost=0.0,
            total=capex,
            pv_total=capex,
            cumulative_total=capex,
            cumulative_pv=capex,
        )
    ]
    cumulative_total = capex
    cumulative_pv = capex

    for year in range(1, years + 1):
        capex_year = 0.0
        residual = params.disposal_cost if year == years else 0.0
        operating = energy + params.annual_maintenance + residual
        pv_operating = operating * discount_factor(r, year)
        pv_capex = capex_year * discount_factor(r, max(year - 1, 0))
        total = capex_year + operating
        pv_total = pv_capex + pv_operating

        cumulative_total += total
        cumulative_pv += pv_total
        rows.append(CashflowRow(
            year=year,
            capex=capex_year,
            energy=energy,
            maintenance=params.annual_maintenance,
            residual=residual,
            operating_cost=operating,
            pv_operating_cost=pv_operating,
            total=total,
            pv_total=pv_total,
            cumulative_total=cumulative_total,
            cumulative_pv=cumulative_pv,
        ))
    return rows


def sum_cashflow_rows(rows: list[CashflowRow]) -> CashflowTotals:
    """Column totals of a cashflow table."""
    return CashflowTotals.from_rows(rows)
