"""Comparison orchestrator — one recomputation of the whole comparison.

Wires together the pure engines for an immutable ``ComparisonScenario``:
  1. Common horizon   — shortest positive service life among the entries
  2. Energy/cost      — one CostBreakdown per entry at that horizon
  3. Cashflow tables  — first two entries, year by year
  4. Payback          — cumulative PV of (second − first)
  5. Lifecycle curves — Weibull curves for up to three entries

Entry point: ``run_comparison(scenario)``.  Fewer than two entries
suppresses the comparison (returns None) instead of raising.
"""

from __future__ import annotations

import logging

from ac_comparator.config.entry import CashflowParams, ComparisonEntry
from ac_comparator.config.lifecycle import LifecycleSettings
from ac_comparator.config.scenario import ComparisonScenario
from ac_comparator.config.usage import UsagePlan
from ac_comparator.engine.cashflow import build_cashflow_rows, sum_cashflow_rows
from ac_comparator.engine.energy import compute_cost_breakdowns
from ac_comparator.engine.lifecycle import compute_lifecycle_curves
from ac_comparator.finance.payback import compute_lifecycle_payback
from ac_comparator.models.results import ComparisonResult, CostBreakdown

logger = logging.getLogger('ac_comparator.engine.comparison')

MIN_ENTRIES = 2
MAX_LIFECYCLE_ENTRIES = 3


def life_years_min(entries: list[ComparisonEntry]) -> float:
    """Shortest positive service life; non-positive lives are ignored, 1 if none remain."""
    lives = [e.life_years for e in entries if e.life_years > 0]
    return min(lives) if lives else 1.0


def lifecycle_settings_from_usage(usage: UsagePlan) -> LifecycleSettings:
    """Default lifecycle regime that follows the usage plan."""
    return LifecycleSettings(
        hours_per_day=usage.hours_per_day,
        temperature_c=usage.ambient_temperature_c,
    )


def _rank(breakdowns: list[CostBreakdown]) -> tuple[int, int, float]:
    """Positions of the cheapest and dearest entries (first on ties) and the PV saving."""
    totals = [b.total_life_value_pv for b in breakdowns]
    best = totals.index(min(totals))
    worst = totals.index(max(totals))
    saving = 0.0 if best == worst else totals[worst] - totals[best]
    return best, worst, saving


def _cashflow_params(entry: ComparisonEntry, years: float, usage: UsagePlan) -> CashflowParams:
    return CashflowParams(
        years=years,
        annual_maintenance=entry.annual_maintenance,
        disposal_cost=entry.disposal_cost,
        real_discount_rate=usage.real_discount_rate,
    )


def run_comparison(scenario: ComparisonScenario) -> ComparisonResult | None:
    """Run every engine for the scenario; None when fewer than two entries are selected."""
    entries = scenario.entries
    if len(entries) < MIN_ENTRIES:
        logger.debug(f"Comparison suppressed: {len(entries)} entries selected")
        return None

    usage = scenario.usage
    life_years = life_years_min(entries)

    # ── Energy / cost ──────────────────────────────────────────────────
    breakdowns = compute_cost_breakdowns(entries, usage, life_years)
    best, worst, saving = _rank(breakdowns)

    # ── Cashflow tables + payback (first two entries) ──────────────────
    entry_a, entry_b = entries[0], entries[1]
    rows_a = build_cashflow_rows(breakdowns[0], _cashflow_params(entry_a, life_years, usage))
    rows_b = build_cashflow_rows(breakdowns[1], _cashflow_params(entry_b, life_years, usage))
    payback = compute_lifecycle_payback(rows_a, rows_b, usage.real_discount_rate)

    # ── Lifecycle ──────────────────────────────────────────────────────
    settings = scenario.lifecycle or lifecycle_settings_from_usage(usage)
    lifecycle = compute_lifecycle_curves(entries[:MAX_LIFECYCLE_ENTRIES], settings)

    logger.info(
        f"Compared {len(entries)} entries over {life_years} years: "
        f"best #{best + 1} {breakdowns[best].label}, saving {saving:,.2f}, payback year {payback.year}"
    )

    return ComparisonResult(
        life_years=life_years,
        breakdowns=breakdowns,
        best_index=best,
        worst_index=worst,
        best_label=breakdowns[best].label,
        worst_label=breakdowns[worst].label,
        saving_pv=saving,
        cashflow_a=rows_a,
        cashflow_b=rows_b,
        totals_a=sum_cashflow_rows(rows_a),
        totals_b=sum_cashflow_rows(rows_b),
        payback=payback,
        lifecycle_settings=settings,
        lifecycle=lifecycle,
    )
