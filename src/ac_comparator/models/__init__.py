"""Result models — engine output contracts."""

from ac_comparator.models.results import (
    AlignedCurves,
    CashflowRow,
    CashflowTotals,
    ComparisonResult,
    CostBreakdown,
    LifecycleResult,
    PaybackResult,
    WeibullParams,
)

__all__ = [
    "AlignedCurves",
    "CashflowRow",
    "CashflowTotals",
    "ComparisonResult",
    "CostBreakdown",
    "LifecycleResult",
    "PaybackResult",
    "WeibullParams",
]
