"""Weibull lifecycle model — accelerated-failure-time reliability curves.

The shape β is fixed at 2.0 (wear-out: hazard grows linearly with age).
The scale η starts from a base characteristic life and is shortened by a
log-linear sum of penalty terms:

  η = base_life × exp(γ_hours + γ_maintenance + γ_environment
                      + γ_technology + γ_temperature)

  γ_hours       = −0.04  × max(0, hours/day − 5.7)
  γ_temperature = −0.025 × max(0, temp °C − 26.2)

Hours and temperature are one-sided: running below the neutral point earns
no bonus.  The Arrhenius acceleration factor is kept as a hook but returns
1.0, because temperature is already in the linear penalty.

From (β, η):
  MTTF  = η × Γ(1 + 1/β)
  R(t)  = exp(−(t/η)^β)                       × 100
  f(t)  = (β/η)(t/η)^(β−1) exp(−(t/η)^β)      × 100,  f(0) = 0
  h(t)  = (β/η)(t/η)^(β−1)                    × 100,  t ≥ 0.5

Curves are sampled every 0.5 years on [0, ceil(3 × MTTF)].
"""

from __future__ import annotations

import logging
import math

import numpy as np

from ac_comparator.config.entry import ComparisonEntry
from ac_comparator.config.lifecycle import LifecycleParams, LifecycleSettings
from ac_comparator.models.results import (
    AlignedCurves,
    DensityPoint,
    HazardPoint,
    LifecycleResult,
    ReliabilityPoint,
    WeibullParams,
)

logger = logging.getLogger('ac_comparator.engine.lifecycle')

BETA = 2.0
ETA0 = 10.0
TIME_STEP_YEARS = 0.5

NEUTRAL_HOURS_PER_DAY = 5.7  # 5h42min
NEUTRAL_TEMPERATURE_C = 26.2

HOURS_COEFFICIENT = -0.04
TEMPERATURE_COEFFICIENT = -0.025
MAINTENANCE_PENALTY = {"regular": 0.0, "irregular": -0.10, "none": -0.25}
ENVIRONMENT_PENALTY = {"ideal": 0.0, "hot": -0.10, "severe": -0.20}
TECHNOLOGY_PENALTY = {"inverter": 0.0, "conventional": -0.12}


# ═══════════════════════════════════════════════════════════════════════════
# Parametrization
# ═══════════════════════════════════════════════════════════════════════════

def hours_penalty(hours_per_day: float) -> float:
    return HOURS_COEFFICIENT * max(0.0, hours_per_day - NEUTRAL_HOURS_PER_DAY)


def temperature_penalty(temperature_c: float) -> float:
    if not math.isfinite(temperature_c):
        return 0.0
    return TEMPERATURE_COEFFICIENT * max(0.0, temperature_c - NEUTRAL_TEMPERATURE_C)


def acceleration_factor(params: LifecycleParams) -> float:
    """Arrhenius acceleration factor.

    Disabled: temperature is carried entirely by ``temperature_penalty``.
    """
    return 1.0


def weibull_aft(params: LifecycleParams) -> WeibullParams:
    """Scale, acceleration factor and MTTF for one equipment."""
    penalties = {
        "hours": hours_penalty(params.hours_per_day),
        "maintenance": MAINTENANCE_PENALTY.get(params.maintenance, 0.0),
        "environment": ENVIRONMENT_PENALTY.get(params.environment, 0.0),
        "technology": TECHNOLOGY_PENALTY.get(params.technology, 0.0),
        "temperature": temperature_penalty(params.temperature_c),
    }
    base_life = params.base_life_years if params.base_life_years is not None else ETA0

    eta_x = base_life * math.exp(sum(penalties.values()))
    af = acceleration_factor(params)
    eta = eta_x / af
    mttf = eta * math.gamma(1 + 1 / BETA)

    return WeibullParams(beta=BETA, eta=eta, acceleration_factor=af, mttf=mttf, penalties=penalties)


# ═══════════════════════════════════════════════════════════════════════════
# Curves
# ═══════════════════════════════════════════════════════════════════════════

def time_axis(max_time: float) -> np.ndarray:
    """0, 0.5, …, max_time (inclusive)."""
    steps = int(math.floor(max_time / TIME_STEP_YEARS + 1e-9))
    return np.arange(steps + 1, dtype=np.float64) * TIME_STEP_YEARS


def weibull_curves(eta: float, beta: float, t: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """(R, f, h) in percent on ``t``.  f is 0 at t = 0; h is evaluated on t > 0 only."""
    z = (t / eta) ** beta
    reliability = np.exp(-z) * 100

    positive = t > 0
    tp = t[positive]
    rate = (beta / eta) * (tp / eta) ** (beta - 1)

    density = np.zeros_like(t)
    density[positive] = rate * np.exp(-z[positive]) * 100
    hazard = rate * 100
    return reliability, density, hazard


def compute_lifecycle(label: str, params: LifecycleParams) -> LifecycleResult:
    """Weibull parameters and sampled curves for one equipment."""
    wb = weibull_aft(params)
    max_time = math.ceil(wb.mttf * 3)

    t = time_axis(max_time)
    reliability, density, hazard = weibull_curves(wb.eta, wb.beta, t)
    t_hazard = t[t > 0]

    return LifecycleResult(
        label=label,
        params=params,
        beta=wb.beta,
        eta=wb.eta,
        acceleration_factor=wb.acceleration_factor,
        mttf=wb.mttf,
        max_time=max_time,
        reliability=[ReliabilityPoint(t=float(ti), reliability=float(ri)) for ti, ri in zip(t, reliability)],
        density=[DensityPoint(t=float(ti), density=float(fi)) for ti, fi in zip(t, density)],
        hazard=[HazardPoint(t=float(ti), hazard=float(hi)) for ti, hi in zip(t_hazard, hazard)],
    )


def lifecycle_params_for(entry: ComparisonEntry, settings: LifecycleSettings) -> LifecycleParams:
    """Resolve the shared settings for one entry (technology + base life)."""
    return LifecycleParams(
        **settings.model_dump(),
        technology=entry.equipment.normalized_technology,
        base_life_years=entry.life_years,
    )


def compute_lifecycle_curves(
    entries: list[ComparisonEntry],
    settings: LifecycleSettings,
) -> list[LifecycleResult]:
    """Independent η/MTTF and curves for every entry under one shared regime."""
    results = [compute_lifecycle(e.label, lifecycle_params_for(e, settings)) for e in entries]
    for r in results:
        logger.debug(f"{r.label}: eta={r.eta:.3f} MTTF={r.mttf:.3f} max_time={r.max_time}")
    return results


# ═══════════════════════════════════════════════════════════════════════════
# Overlay alignment
# ═══════════════════════════════════════════════════════════════════════════

def _pad(values: list[float], length: int) -> list[float | None]:
    return values + [None] * (length - len(values))


def align_lifecycle_curves(results: list[LifecycleResult]) -> AlignedCurves:
    """Put several results on one time axis spanning the longest horizon.

    Each series keeps its own samples; positions past its own ``max_time``
    are ``None`` rather than extrapolated.
    """
    global_max = max((r.max_time for r in results), default=0)
    axis = time_axis(global_max)
    time_list = [float(t) for t in axis]
    hazard_axis = time_list[1:]

    return AlignedCurves(
        labels=[r.label for r in results],
        time_axis=time_list,
        reliability=[_pad([p.reliability for p in r.reliability], len(time_list)) for r in results],
        density=[_pad([p.density for p in r.density], len(time_list)) for r in results],
        hazard_time_axis=hazard_axis,
        hazard=[_pad([p.hazard for p in r.hazard], len(hazard_axis)) for r in results],
    )
