"""Configuration models — every input of a comparison."""

from ac_comparator.config.equipment import Equipment
from ac_comparator.config.usage import UsagePlan
from ac_comparator.config.entry import CashflowParams, ComparisonEntry
from ac_comparator.config.lifecycle import LifecycleParams, LifecycleSettings
from ac_comparator.config.scenario import ComparisonScenario, load_scenario

__all__ = [
    "Equipment",
    "UsagePlan",
    "ComparisonEntry",
    "CashflowParams",
    "LifecycleSettings",
    "LifecycleParams",
    "ComparisonScenario",
    "load_scenario",
]
