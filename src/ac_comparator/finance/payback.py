"""Discounted payback between two equipment cashflow tables.

Difference rows are B − A, column by column.  The PV of the capex
difference is discounted by (1 + r)^max(year − 1, 0) while operating
costs keep their own (1 + r)^year discounting from the source rows:

  pv_total_diff(year) = Δcapex / (1 + r)^max(year − 1, 0) + Δpv_operating_cost
  cumulative(year)    = Σ pv_total_diff up to year
  payback year        = first year with cumulative ≥ 0
"""

from __future__ import annotations

import logging

from ac_comparator.config._numeric import finite_or
from ac_comparator.config.usage import DEFAULT_REAL_DISCOUNT_RATE
from ac_comparator.finance.discount import discount_factor
from ac_comparator.models.results import CashflowRow, CashflowTotals, PaybackResult

logger = logging.getLogger('ac_comparator.finance.payback')


def build_difference_rows(
    rows_a: list[CashflowRow],
    rows_b: list[CashflowRow],
    real_discount_rate: float = DEFAULT_REAL_DISCOUNT_RATE,
) -> list[CashflowRow]:
    """Year-by-year B − A rows.  Rows are paired by position up to the shorter table."""
    rate = finite_or(real_discount_rate, DEFAULT_REAL_DISCOUNT_RATE)
    if rate <= -1.0:
        rate = DEFAULT_REAL_DISCOUNT_RATE

    diff_rows: list[CashflowRow] = []
    cumulative_total = 0.0
    cumulative_pv = 0.0
    for a, b in zip(rows_a, rows_b):
        capex = b.capex - a.capex
        operating = b.operating_cost - a.operating_cost
        pv_operating = b.pv_operating_cost - a.pv_operating_cost
        pv_capex = capex * discount_factor(rate, max(b.year - 1, 0))
        pv_total = pv_capex + pv_operating

        cumulative_total += capex + operating
        cumulative_pv += pv_total
        diff_rows.append(CashflowRow(
            year=b.year,
            capex=capex,
            energy=b.energy - a.energy,
            maintenance=b.maintenance - a.maintenance,
            residual=b.residual - a.residual,
            operating_cost=operating,
            pv_operating_cost=pv_operating,
            total=capex + operating,
            pv_total=pv_total,
            cumulative_total=cumulative_total,
            cumulative_pv=cumulative_pv,
        ))
    return diff_rows


def compute_lifecycle_payback(
    rows_a: list[CashflowRow],
    rows_b: list[CashflowRow],
    real_discount_rate: float = DEFAULT_REAL_DISCOUNT_RATE,
) -> PaybackResult:
    """First year where the cumulative PV difference B − A becomes ≥ 0.

    A cumulative difference of exactly zero counts, so two identical tables
    pay back immediately at year 0.  Returns ``year=None`` when the
    cumulative difference stays negative over the whole horizon.
    """
    diff_rows = build_difference_rows(rows_a, rows_b, real_discount_rate)

    payback_year: int | None = None
    for row in diff_rows:
        if row.cumulative_pv >= 0:
            payback_year = row.year
            break

    cumulative_diff = diff_rows[-1].cumulative_pv if diff_rows else 0.0
    horizon = diff_rows[-1].year if diff_rows else 0
    logger.debug(f"Payback year {payback_year} over {horizon} years, final cumulative {cumulative_diff:,.2f}")

    return PaybackResult(
        year=payback_year,
        cumulative_diff=cumulative_diff,
        horizon_years=horizon,
        rows=diff_rows,
        totals=CashflowTotals.from_rows(diff_rows),
    )
