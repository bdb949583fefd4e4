"""Engine — pure, deterministic cost and lifecycle computations."""

from ac_comparator.engine.energy import (
    calculate_consumption,
    compute_cost_breakdown,
    compute_cost_breakdowns,
    estimate_annual_consumption,
)
from ac_comparator.engine.cashflow import build_cashflow_rows, sum_cashflow_rows
from ac_comparator.engine.lifecycle import (
    align_lifecycle_curves,
    compute_lifecycle_curves,
    weibull_aft,
)
from ac_comparator.engine.catalog import (
    CatalogFilters,
    filter_catalog,
    load_catalog_json,
    parse_catalog_records,
    parse_custom_equipment,
    unique_values,
)
from ac_comparator.engine.comparison import life_years_min, run_comparison

__all__ = [
    "estimate_annual_consumption",
    "calculate_consumption",
    "compute_cost_breakdown",
    "compute_cost_breakdowns",
    "build_cashflow_rows",
    "sum_cashflow_rows",
    "weibull_aft",
    "compute_lifecycle_curves",
    "align_lifecycle_curves",
    # Catalog
    "CatalogFilters",
    "parse_catalog_records",
    "load_catalog_json",
    "filter_catalog",
    "unique_values",
    "parse_custom_equipment",
    # Orchestration
    "life_years_min",
    "run_comparison",
]
