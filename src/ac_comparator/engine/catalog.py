"""Equipment catalog — ingestion, filtering, and manual entries.

  1. ``parse_catalog_records`` — raw records → immutable Equipment list
  2. ``load_catalog_json``     — JSON catalog (path / text / StringIO) → Equipment list
  3. ``filter_catalog``        — apply the selection filters
  4. ``unique_values``         — distinct values of one field, for filter options
  5. ``parse_custom_equipment`` — a manually described equipment, or None

Catalog files come from spreadsheet exports, so bare ``NaN`` tokens are
replaced with ``null`` before decoding.
"""

from __future__ import annotations

import io
import json
import logging
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ac_comparator.config._numeric import finite_or
from ac_comparator.config.equipment import Equipment

logger = logging.getLogger('ac_comparator.engine.catalog')

_NAN_TOKEN = re.compile(r":\s*NaN\b", re.IGNORECASE)
EFFICIENCY_CLASSES = ("A", "B", "C", "D", "E", "F")

# Catalog column → Equipment field
_COLUMNS = {
    "marca": "brand",
    "tipo": "type",
    "funcao": "function",
    "tecnologia": "technology",
    "tensao": "voltage",
    "potencia_btu": "power_btu",
    "potencia_w": "power_w",
    "modelo_concat": "model",
    "consumo_kwh_ano": "annual_consumption_kwh",
    "idrs": "reliability_index",
    "classe": "efficiency_class",
    "Classe": "efficiency_class",
    "p_29_parcial": "p_29_partial",
    "p_35_parcial": "p_35_partial",
    "p_29_total": "p_29_total",
    "p_35_total": "p_35_total",
}


# ═══════════════════════════════════════════════════════════════════════════
# Ingestion
# ═══════════════════════════════════════════════════════════════════════════

def _record_fields(record: Mapping[str, Any]) -> dict[str, Any]:
    """Map source or native column names onto Equipment fields."""
    fields: dict[str, Any] = {}
    for key, value in record.items():
        name = _COLUMNS.get(key, key)
        if name in Equipment.model_fields and name != "id" and not fields.get(name):
            fields[name] = value
    if not fields.get("voltage"):
        fields["voltage"] = 220
    return fields


def parse_catalog_records(records: Iterable[Any]) -> list[Equipment]:
    """Build Equipment records, numbering them 1..n in input order.

    Rows that are not mappings are skipped.
    """
    catalog: list[Equipment] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            logger.warning(f"Skipping catalog row {index}: expected an object, got {type(record).__name__}")
            continue
        catalog.append(Equipment(id=index + 1, **_record_fields(record)))
    logger.debug(f"Parsed {len(catalog)} catalog records")
    return catalog


def _read_text(source: str | Path | io.StringIO) -> str:
    if isinstance(source, io.StringIO):
        return source.getvalue()
    if isinstance(source, Path):
        return source.read_text(encoding="utf-8")
    text = source.lstrip()
    if text.startswith("[") or text.startswith("{"):
        return source
    return Path(source).read_text(encoding="utf-8")


def load_catalog_json(source: str | Path | io.StringIO) -> list[Equipment]:
    """Parse a JSON catalog (a list of records, or ``{"equipments": [...]}``).

    Parameters
    ----------
    source : str | Path | io.StringIO
        File path, raw JSON text, or in-memory StringIO.
    """
    sanitized = _NAN_TOKEN.sub(": null", _read_text(source))
    data = json.loads(sanitized)
    if isinstance(data, Mapping):
        data = data.get("equipments", [])
    return parse_catalog_records(data)


# ═══════════════════════════════════════════════════════════════════════════
# Filtering
# ═══════════════════════════════════════════════════════════════════════════

class CatalogFilters(BaseModel):
    """Selection filters; ``"all"`` disables a filter."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(default="all")
    technology: str = Field(default="all")
    function: str = Field(default="all")
    power_btu: str = Field(default="all", description="Compared against the BTU/h value's string form")
    voltage: str = Field(default="all")
    efficiency_class: str = Field(default="all")


def _as_text(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def filter_catalog(catalog: list[Equipment], filters: CatalogFilters) -> list[Equipment]:
    """Equipment matching every active filter, in catalog order."""
    active = {name: value for name, value in filters.model_dump().items() if value != "all"}
    return [
        eq for eq in catalog
        if all(_as_text(getattr(eq, name)) == value for name, value in active.items())
    ]


def unique_values(catalog: list[Equipment], field: str) -> list[Any]:
    """Sorted distinct non-empty values of ``field``."""
    values = {getattr(eq, field) for eq in catalog if getattr(eq, field)}
    return sorted(values, key=lambda v: (isinstance(v, str), v))


# ═══════════════════════════════════════════════════════════════════════════
# Manual entry
# ═══════════════════════════════════════════════════════════════════════════

def parse_custom_equipment(
    key: int,
    name: str,
    annual_consumption_kwh: Any,
    technology: str = "",
    power_btu: Any = 0,
    reliability_index: Any = 0,
    efficiency_class: str = "",
) -> Equipment | None:
    """Equipment described by hand, or None if the name is blank or consumption ≤ 0."""
    brand = (name or "").strip()
    consumption = finite_or(annual_consumption_kwh, 0.0)
    if not brand or consumption <= 0:
        return None

    label_class = str(efficiency_class or "").strip().upper()
    return Equipment(
        id=f"custom-{key}",
        brand=brand,
        type="Custom",
        function="Quente e Frio",
        technology=technology or "Inverter",
        voltage="",
        power_btu=finite_or(power_btu, 0.0),
        power_w=0.0,
        model=brand,
        annual_consumption_kwh=consumption,
        reliability_index=finite_or(reliability_index, 0.0),
        efficiency_class=label_class if label_class in EFFICIENCY_CLASSES else "",
    )
