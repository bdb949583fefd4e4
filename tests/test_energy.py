"""Tests for engine/energy.py — consumption scaling and present-valued costs.

Covers:
  - Reference profile (hours × days = 2080) keeps declared consumption exactly
  - Consumption scales linearly with usage intensity
  - Default days/year derived from the reference hours
  - PV identities (total_life_value_pv, operating cost)
  - Degenerate inputs: zero consumption, zero rate, zero life, NaN
  - Idempotence
"""

from __future__ import annotations

import math

import pytest

from ac_comparator.config import ComparisonEntry, Equipment, UsagePlan
from ac_comparator.engine.energy import (
    calculate_consumption,
    compute_cost_breakdown,
    compute_cost_breakdowns,
    estimate_annual_consumption,
)
from ac_comparator.finance.discount import present_value_annuity


# ═══════════════════════════════════════════════════════════════════════════
# Consumption
# ═══════════════════════════════════════════════════════════════════════════

class TestConsumption:
    @pytest.mark.parametrize("hours, days", [(8, 260), (10, 208), (6.5, 320), (16, 130)])
    def test_reference_profile_keeps_declared_value(self, inverter, hours, days):
        usage = UsagePlan(hours_per_day=hours, days_per_year=days)
        assert hours * days == 2080
        assert calculate_consumption(inverter, usage) == inverter.annual_consumption_kwh

    def test_double_intensity_doubles_consumption(self, inverter):
        usage = UsagePlan(hours_per_day=16, days_per_year=260)
        assert calculate_consumption(inverter, usage) == pytest.approx(2 * 620.4)

    def test_days_default_from_reference_hours(self, inverter):
        """Missing days/year → 2080 / hours, so the factor is 1."""
        usage = UsagePlan(hours_per_day=8)
        assert usage.effective_days_per_year == pytest.approx(260)
        assert calculate_consumption(inverter, usage) == pytest.approx(620.4)

    def test_days_default_uses_at_least_one_hour(self, inverter):
        usage = UsagePlan(hours_per_day=0.5)
        assert usage.effective_days_per_year == pytest.approx(2080)

    def test_nan_hours_fall_back_to_reference(self, inverter):
        usage = UsagePlan(hours_per_day=float("nan"), days_per_year=float("inf"))
        assert usage.hours_per_day == 5.698
        assert usage.days_per_year is None
        assert math.isfinite(calculate_consumption(inverter, usage))

    @pytest.mark.parametrize("declared", [-50.0, 0.0, float("nan"), None])
    def test_negative_or_missing_consumption_is_zero(self, declared):
        eq = Equipment(annual_consumption_kwh=declared)
        assert estimate_annual_consumption(eq) == 0.0


# ═══════════════════════════════════════════════════════════════════════════
# Cost breakdown
# ═══════════════════════════════════════════════════════════════════════════

class TestCostBreakdown:
    def test_annual_energy_cost(self, inverter_entry, usage):
        b = compute_cost_breakdown(inverter_entry, usage, 12)
        assert b.annual_consumption_kwh == pytest.approx(620.4)
        assert b.annual_energy_cost == pytest.approx(620.4 * 1.80)
        assert b.lifetime_energy_cost == pytest.approx(620.4 * 1.80 * 12)
        assert b.lifetime_consumption_kwh == pytest.approx(620.4 * 12)

    def test_pv_energy_is_annuity(self, inverter_entry, usage):
        b = compute_cost_breakdown(inverter_entry, usage, 12)
        assert b.pv_energy_cost == pytest.approx(present_value_annuity(b.annual_energy_cost, 0.01, 12))
        assert b.pv_energy_cost < b.lifetime_energy_cost

    def test_total_life_value_identity(self, inverter_entry, usage):
        b = compute_cost_breakdown(inverter_entry, usage, 12)
        assert b.total_life_value_pv == b.pv_energy_cost + b.capex + b.pv_maintenance + b.pv_disposal

    def test_capex_not_discounted(self, inverter_entry, usage):
        b = compute_cost_breakdown(inverter_entry, usage, 12)
        assert b.capex == 3_800.0
        assert b.first_year_cost == pytest.approx(3_800 + b.annual_energy_cost)
        assert b.lifetime_total == pytest.approx(b.lifetime_energy_cost + 3_800)

    def test_disposal_discounted_at_terminal_year(self, inverter_entry, usage):
        b = compute_cost_breakdown(inverter_entry, usage, 12)
        assert b.pv_disposal == pytest.approx(150 / 1.01 ** 12)

    def test_operating_cost_aggregates(self, inverter_entry, usage):
        b = compute_cost_breakdown(inverter_entry, usage, 12)
        assert b.annual_operating_cost == pytest.approx(b.annual_energy_cost + 180)
        assert b.lifetime_operating_cost == pytest.approx(b.lifetime_energy_cost + 180 * 12 + 150)
        assert b.pv_operating_cost == pytest.approx(b.pv_energy_cost + b.pv_maintenance + b.pv_disposal)

    def test_zero_rate_pv_equals_undiscounted(self, inverter_entry):
        usage = UsagePlan(hours_per_day=8, days_per_year=260, real_discount_rate=0)
        b = compute_cost_breakdown(inverter_entry, usage, 10)
        assert b.pv_energy_cost == pytest.approx(b.lifetime_energy_cost)
        assert b.pv_maintenance == pytest.approx(1_800)
        assert b.pv_disposal == 150

    def test_zero_life_years(self, inverter_entry, usage):
        b = compute_cost_breakdown(inverter_entry, usage, 0)
        assert b.pv_energy_cost == 0.0
        assert b.pv_maintenance == 0.0
        assert b.pv_disposal == 150.0
        assert b.total_life_value_pv == pytest.approx(3_800 + 150)

    def test_zero_consumption(self, usage):
        entry = ComparisonEntry(equipment=Equipment(brand="Off", annual_consumption_kwh=0), acquisition_cost=1_000)
        b = compute_cost_breakdown(entry, usage, 10)
        assert b.annual_energy_cost == 0.0
        assert b.pv_energy_cost == 0.0
        assert b.total_life_value_pv == 1_000.0

    def test_non_finite_inputs_never_leak(self, inverter):
        entry = ComparisonEntry(
            equipment=inverter,
            acquisition_cost=float("nan"),
            installation_cost=float("inf"),
            annual_maintenance="abc",
            disposal_cost=None,
        )
        usage = UsagePlan(
            hours_per_day=float("nan"),
            tariff_per_kwh=float("inf"),
            real_discount_rate=float("nan"),
        )
        b = compute_cost_breakdown(entry, usage, float("nan"))
        for name, value in b.model_dump().items():
            if isinstance(value, float):
                assert math.isfinite(value), name
        assert usage.real_discount_rate == 0.01
        assert b.life_years == 1.0

    def test_huge_finite_inputs_stay_finite(self):
        entry = ComparisonEntry(
            equipment=Equipment(annual_consumption_kwh=1e308),
            acquisition_cost=1e308,
            installation_cost=1e308,
            annual_maintenance=1e308,
            disposal_cost=1e308,
        )
        usage = UsagePlan(hours_per_day=24, days_per_year=365, tariff_per_kwh=1e308)
        b = compute_cost_breakdown(entry, usage, 10)
        for name, value in b.model_dump().items():
            if isinstance(value, float):
                assert math.isfinite(value), name

    def test_rate_at_or_below_minus_one_uses_default(self):
        assert UsagePlan(real_discount_rate=-1).real_discount_rate == 0.01
        assert UsagePlan(real_discount_rate=-3.5).real_discount_rate == 0.01

    def test_idempotent(self, inverter_entry, conventional_entry, usage):
        first = compute_cost_breakdowns([inverter_entry, conventional_entry], usage, 10)
        second = compute_cost_breakdowns([inverter_entry, conventional_entry], usage, 10)
        assert [b.model_dump() for b in first] == [b.model_dump() for b in second]

    def test_one_breakdown_per_entry_in_order(self, inverter_entry, conventional_entry, usage):
        result = compute_cost_breakdowns([inverter_entry, conventional_entry], usage, 10)
        assert [b.label for b in result] == ["Frostline (Inverter)", "Breezeco (Convencional)"]
        assert all(b.life_years == 10 for b in result)
