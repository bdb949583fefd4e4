"""Air-conditioner cost & lifecycle comparator.

Two pure engines:
  - energy/cost — present-valued energy, maintenance and disposal costs
  - lifecycle   — Weibull AFT reliability, density and hazard curves
plus the cashflow/payback comparison that ties them together.
"""

__version__ = "1.0.0"
