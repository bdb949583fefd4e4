"""Narrative generator — plain-English interpretation of comparison results.

Turns a ``ComparisonResult`` into short summary sentences (payback, best
cost-benefit, lifecycle regime) and a sectioned text report.
"""

from __future__ import annotations

import math

from ac_comparator.config.lifecycle import LifecycleSettings
from ac_comparator.engine.lifecycle import BETA
from ac_comparator.models.results import ComparisonResult, LifecycleResult, PaybackResult


def format_amount(value: float) -> str:
    """Thousands-separated, two decimals; non-finite values print as 0.00."""
    return f"{value if math.isfinite(value) else 0.0:,.2f}"


def format_hours_per_day(hours: float) -> str:
    """5.7 → '5h42min/day'.  Rounded to the nearest minute."""
    h, m = divmod(round(hours * 60), 60)
    return f"{h}h{m:02d}min/day"


def _years(value: float) -> str:
    return f"{value:g}"


def describe_payback(payback: PaybackResult) -> str:
    if payback.year is not None:
        return (
            f"Discounted payback estimated in year {payback.year}. "
            f"Cumulative difference at the end of the period: {format_amount(payback.cumulative_diff)}."
        )
    return (
        f"No discounted payback within {payback.horizon_years} years. "
        f"Cumulative difference: {format_amount(payback.cumulative_diff)}."
    )


def describe_comparison(result: ComparisonResult) -> str:
    if result.saving_pv > 0:
        best = result.breakdowns[result.best_index]
        worst = result.breakdowns[result.worst_index]
        return (
            f"The {best.equipment.brand} equipment has the best cost-benefit over the service life "
            f"({_years(result.life_years)} years), saving {format_amount(result.saving_pv)} "
            f"compared with the {worst.equipment.brand} equipment."
        )
    return "Total costs are equivalent across the selected equipment for the given service life (PV)."


def describe_lifecycle(settings: LifecycleSettings) -> str:
    return (
        f"Beta = {BETA:.1f} (wear-out regime). Considering {format_hours_per_day(settings.hours_per_day)}, "
        f"{settings.environment} environment and {settings.maintenance} maintenance, each equipment's "
        f"technology yields its own reliability curve."
    )


def _lifecycle_line(r: LifecycleResult) -> str:
    return (
        f"  {r.label:40s}  MTTF {r.mttf:6.2f} years  "
        f"eta {r.eta:6.2f} years  AF {r.acceleration_factor:.3f}  ({r.params.technology})"
    )


def generate_comparison_narrative(result: ComparisonResult) -> str:
    """Sectioned text report: costs, payback, lifecycle."""
    sections: list[str] = []

    # ── 1. Costs ──
    sections.append("=" * 60)
    sections.append(f"COST OVER {_years(result.life_years)} YEARS (PV)")
    sections.append("=" * 60)
    for b in result.breakdowns:
        sections.append(
            f"  {b.label:40s}  {b.lifetime_consumption_kwh:12,.2f} kWh  "
            f"energy {format_amount(b.pv_energy_cost):>14s}  "
            f"operating {format_amount(b.pv_operating_cost):>14s}  "
            f"total {format_amount(b.total_life_value_pv):>14s}"
        )
    sections.append("")
    sections.append(describe_comparison(result))

    # ── 2. Payback ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("PAYBACK (PV)")
    sections.append("=" * 60)
    sections.append(describe_payback(result.payback))

    # ── 3. Lifecycle ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("LIFECYCLE (WEIBULL)")
    sections.append("=" * 60)
    sections.append(describe_lifecycle(result.lifecycle_settings))
    for r in result.lifecycle:
        sections.append(_lifecycle_line(r))

    return "\n".join(sections)
