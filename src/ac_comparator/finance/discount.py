"""Discounting helpers — annual time-value-of-money primitives.

Key formulas (annual periods, real rate r):
  discount factor   DF(n)  = 1 / (1 + r)^n
  level annuity     PV     = pmt × n                       if r = 0
                           = pmt × (1 − (1 + r)^−n) / r    otherwise
                             (evaluated as −expm1(−n·log1p(r)) / r)
  single cash flow  PV     = value / (1 + r)^n

Every helper returns a finite float.  A result that overflows degrades to
0 instead of raising, so callers never see Infinity or NaN.
"""

from __future__ import annotations

import math


def discount_factor(rate: float, periods: float) -> float:
    """1 / (1 + rate)^periods, or 0.0 when the power is not representable."""
    try:
        factor = (1.0 + rate) ** -periods
    except (OverflowError, ZeroDivisionError):
        return 0.0
    if isinstance(factor, complex) or not math.isfinite(factor):
        return 0.0
    return factor


def _finite(value: float) -> float:
    return value if math.isfinite(value) else 0.0


def present_value_annuity(pmt: float, rate: float, periods: float) -> float:
    """Present value of ``pmt`` paid at the end of each of ``periods`` years.

    ``expm1``/``log1p`` keep tiny rates accurate, where ``1 − (1 + r)^−n``
    would cancel to 0.
    """
    if rate == 0:
        return _finite(pmt * periods)
    try:
        factor = -math.expm1(-periods * math.log1p(rate)) / rate
    except (OverflowError, ValueError):
        return 0.0
    return _finite(pmt * factor)


def present_value_single(value: float, rate: float, periods: float) -> float:
    """Present value of one cash flow ``value`` occurring at year ``periods``."""
    return _finite(value * discount_factor(rate, periods))
