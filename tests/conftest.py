"""Shared test fixtures — sample equipment and usage matching base_case.yaml."""

from __future__ import annotations

import pytest

from ac_comparator.config import (
    ComparisonEntry,
    ComparisonScenario,
    Equipment,
    LifecycleSettings,
    UsagePlan,
)


@pytest.fixture
def inverter() -> Equipment:
    return Equipment(
        id=1,
        brand="Frostline",
        type="Split Hi-Wall",
        function="Somente Frio",
        technology="Inverter",
        voltage=220,
        power_btu=12_000,
        power_w=1_010,
        model="FL-12INV",
        annual_consumption_kwh=620.4,
        reliability_index=7.12,
        efficiency_class="A",
    )


@pytest.fixture
def conventional() -> Equipment:
    return Equipment(
        id=2,
        brand="Breezeco",
        type="Split Hi-Wall",
        function="Somente Frio",
        technology="Convencional",
        voltage=220,
        power_btu=12_000,
        power_w=1_120,
        model="BZ-12CV",
        annual_consumption_kwh=905.0,
        reliability_index=5.41,
        efficiency_class="C",
    )


@pytest.fixture
def usage() -> UsagePlan:
    """Office profile: 8 h × 260 days = 2080 h, i.e. the catalog reference."""
    return UsagePlan(
        hours_per_day=8,
        days_per_year=260,
        tariff_per_kwh=1.80,
        real_discount_rate=0.01,
        ambient_temperature_c=28.0,
    )


@pytest.fixture
def inverter_entry(inverter: Equipment) -> ComparisonEntry:
    return ComparisonEntry(
        key=1,
        equipment=inverter,
        acquisition_cost=3_200,
        installation_cost=600,
        life_years=12,
        annual_maintenance=180,
        disposal_cost=150,
    )


@pytest.fixture
def conventional_entry(conventional: Equipment) -> ComparisonEntry:
    return ComparisonEntry(
        key=2,
        equipment=conventional,
        acquisition_cost=2_100,
        installation_cost=600,
        life_years=10,
        annual_maintenance=200,
        disposal_cost=150,
    )


@pytest.fixture
def neutral_settings() -> LifecycleSettings:
    """Every lifecycle penalty is zero under these settings."""
    return LifecycleSettings(
        hours_per_day=5.7,
        maintenance="regular",
        environment="ideal",
        temperature_c=26.2,
    )


@pytest.fixture
def scenario(
    inverter_entry: ComparisonEntry,
    conventional_entry: ComparisonEntry,
    usage: UsagePlan,
) -> ComparisonScenario:
    return ComparisonScenario(
        entries=[inverter_entry, conventional_entry],
        usage=usage,
        lifecycle=LifecycleSettings(hours_per_day=8, maintenance="regular", environment="hot", temperature_c=28.0),
    )
