"""Tests for engine/catalog.py — catalog ingestion, filters, manual entries."""

from __future__ import annotations

import io
import json

import pytest
from pydantic import ValidationError

from ac_comparator.engine.catalog import (
    CatalogFilters,
    filter_catalog,
    load_catalog_json,
    parse_catalog_records,
    parse_custom_equipment,
    unique_values,
)

RAW_CATALOG = """
[
  {"marca": "Frostline", "tipo": "Split Hi-Wall", "funcao": "Somente Frio", "tecnologia": "Inverter",
   "tensao": 220, "potencia_btu": 12000, "potencia_w": 1010, "modelo_concat": "FL-12INV",
   "consumo_kwh_ano": 620.4, "idrs": 7.12, "Classe": "A", "p_29_parcial": NaN},
  {"marca": "Breezeco", "tipo": "Split Hi-Wall", "funcao": "Somente Frio", "tecnologia": "Convencional",
   "tensao": 127, "potencia_btu": 9000.0, "potencia_w": 850, "modelo_concat": "BZ-09CV",
   "consumo_kwh_ano": NaN, "idrs": 5.41, "classe": "C"},
  {"marca": "Polarion", "tipo": "Janela", "funcao": "Quente e Frio", "tecnologia": "Inverter",
   "tensao": null, "potencia_btu": 12000, "potencia_w": 990, "modelo_concat": "PN-12J",
   "consumo_kwh_ano": 700, "idrs": 6.2, "classe": "B"}
]
"""


@pytest.fixture
def catalog():
    return load_catalog_json(io.StringIO(RAW_CATALOG))


class TestIngestion:
    def test_nan_tokens_become_missing(self, catalog):
        assert len(catalog) == 3
        assert catalog[0].p_29_partial is None
        assert catalog[1].annual_consumption_kwh == 0.0

    def test_ids_follow_input_order(self, catalog):
        assert [eq.id for eq in catalog] == [1, 2, 3]

    def test_column_mapping(self, catalog):
        eq = catalog[0]
        assert eq.brand == "Frostline"
        assert eq.model == "FL-12INV"
        assert eq.annual_consumption_kwh == 620.4
        assert eq.reliability_index == 7.12
        assert eq.efficiency_class == "A"
        assert catalog[1].efficiency_class == "C"

    def test_missing_voltage_defaults_to_220(self, catalog):
        assert catalog[2].voltage == 220
        assert catalog[1].voltage == 127

    def test_wrapped_object_and_raw_text(self):
        text = json.dumps({"equipments": [{"marca": "Solo", "consumo_kwh_ano": 400}]})
        (eq,) = load_catalog_json(text)
        assert eq.brand == "Solo"
        assert eq.id == 1

    def test_path_source(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(RAW_CATALOG, encoding="utf-8")
        assert len(load_catalog_json(path)) == 3
        assert len(load_catalog_json(str(path))) == 3

    def test_native_field_names_accepted(self):
        (eq,) = parse_catalog_records([{"brand": "Native", "annual_consumption_kwh": "512.5", "voltage": 220.0}])
        assert eq.annual_consumption_kwh == 512.5
        assert eq.voltage == 220

    def test_non_mapping_rows_skipped(self):
        catalog = parse_catalog_records([{"marca": "A"}, "junk", {"marca": "B"}])
        assert [eq.brand for eq in catalog] == ["A", "B"]
        assert [eq.id for eq in catalog] == [1, 3]

    def test_records_are_immutable(self, catalog):
        with pytest.raises(ValidationError):
            catalog[0].brand = "Other"


class TestFilters:
    def test_no_filters_keeps_everything(self, catalog):
        assert filter_catalog(catalog, CatalogFilters()) == catalog

    def test_by_technology(self, catalog):
        result = filter_catalog(catalog, CatalogFilters(technology="Inverter"))
        assert [eq.brand for eq in result] == ["Frostline", "Polarion"]

    def test_power_compared_as_text(self, catalog):
        result = filter_catalog(catalog, CatalogFilters(power_btu="9000"))
        assert [eq.brand for eq in result] == ["Breezeco"]

    def test_combined(self, catalog):
        filters = CatalogFilters(type="Split Hi-Wall", voltage="220", efficiency_class="A")
        assert [eq.brand for eq in filter_catalog(catalog, filters)] == ["Frostline"]

    def test_no_match(self, catalog):
        assert filter_catalog(catalog, CatalogFilters(function="Somente Quente")) == []

    def test_unique_values(self, catalog):
        assert unique_values(catalog, "power_btu") == [9000.0, 12000.0]
        assert unique_values(catalog, "type") == ["Janela", "Split Hi-Wall"]
        assert unique_values(catalog, "voltage") == [127, 220]


class TestCustomEquipment:
    def test_valid_entry(self):
        eq = parse_custom_equipment(2, "  My Split ", "480", power_btu="9000", efficiency_class="b")
        assert eq is not None
        assert eq.id == "custom-2"
        assert eq.brand == eq.model == "My Split"
        assert eq.type == "Custom"
        assert eq.technology == "Inverter"
        assert eq.annual_consumption_kwh == 480.0
        assert eq.power_btu == 9000.0
        assert eq.efficiency_class == "B"
        assert eq.voltage == ""

    @pytest.mark.parametrize("name, consumption", [
        ("", 500), ("   ", 500), ("Unit", 0), ("Unit", -10), ("Unit", "abc"), ("Unit", float("nan")),
    ])
    def test_rejected(self, name, consumption):
        assert parse_custom_equipment(1, name, consumption) is None

    def test_unknown_class_dropped(self):
        eq = parse_custom_equipment(1, "Unit", 300, efficiency_class="Z")
        assert eq.efficiency_class == ""

    def test_declared_technology_kept(self):
        eq = parse_custom_equipment(3, "Unit", 300, technology="Convencional")
        assert eq.normalized_technology == "conventional"
