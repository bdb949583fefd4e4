"""Numeric coercion shared by the input models.

Values arrive from form fields and catalog files, so anything that is not a
finite real number is replaced by a documented default instead of rejected.
"""

from __future__ import annotations

import math
from typing import Any


def finite_or(value: Any, default: float | None) -> float | None:
    """Return ``value`` as a finite float, or ``default`` when it is not one.

    Accepts numbers and numeric strings.  ``None``, booleans, blanks,
    NaN and ±Infinity all fall back to ``default``.
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def text_or_blank(value: Any) -> str:
    """Catalog text fields: ``None`` → ``""``, anything else → ``str``."""
    if value is None:
        return ""
    return str(value)
