"""Deterministic rate functions for the synthetic outcome model.

Arrest volume and rearrest probability are lookups keyed by
``(zb_eligible, offense_category)``, adjusted by gender, season, the 2020
pandemic slowdown and the policy effect on zero-bail eligible offenses.
Unknown categories fall back to the defaults below and log a warning.
"""

from __future__ import annotations

import logging

import pandas as pd

logger = logging.getLogger(__name__)

DEFAULT_LAMBDA = 40.0
DEFAULT_P = 0.080

BASE_LAMBDA = {
    (1, "violent"): 35.0,
    (0, "violent"): 30.0,
    (1, "property"): 60.0,
    (0, "property"): 25.0,
    (1, "drugs"): 50.0,
    (0, "drugs"): 20.0,
    (1, "other"): 45.0,
    (0, "other"): 30.0,
}

BASE_P = {
    (1, "violent"): 0.100,
    (0, "violent"): 0.085,
    (1, "property"): 0.120,
    (0, "property"): 0.095,
    (1, "drugs"): 0.130,
    (0, "drugs"): 0.110,
    (1, "other"): 0.090,
    (0, "other"): 0.075,
}

GENDER_BUMP = {"Male": 0.010, "Female": -0.003}

SUMMER_MONTHS = (6, 7, 8)
WINTER_MONTHS = (1, 2)
SUMMER_MULTIPLIER = 1.10
WINTER_MULTIPLIER = 0.92

PANDEMIC_START = pd.Timestamp("2020-03-15")
PANDEMIC_END = pd.Timestamp("2020-06-30")
PANDEMIC_MULTIPLIER = 0.60

# Policy effect on rearrest probability, zero-bail eligible offenses only.
# Early: event weeks [0, 10]; late: (10, 52].
EARLY_WINDOW = (0, 10)
LATE_WINDOW = (10, 52)
EARLY_BUMP = {"violent": 0.015, "property": 0.030, "drugs": 0.040, "other": 0.020}
LATE_BUMP = {"violent": 0.005, "property": 0.012, "drugs": 0.015, "other": 0.008}
DEFAULT_EARLY_BUMP = 0.020
DEFAULT_LATE_BUMP = 0.008


def _lookup(table: dict, key, default: float, name: str) -> float:
    try:
        return table[key]
    except KeyError:
        logger.warning("%s: no entry for %r, using default %s", name, key, default)
        return default


def base_lambda(zb_eligible: int | bool, offense_category: str) -> float:
    """Expected weekly arrests for an eligibility/offense cell."""
    return _lookup(BASE_LAMBDA, (int(zb_eligible), offense_category), DEFAULT_LAMBDA, "base_lambda")


def base_p(zb_eligible: int | bool, offense_category: str) -> float:
    """Baseline rearrest probability for an eligibility/offense cell."""
    return _lookup(BASE_P, (int(zb_eligible), offense_category), DEFAULT_P, "base_p")


def gender_bump(gender: str) -> float:
    return GENDER_BUMP.get(gender, 0.0)


def season_multiplier(date) -> float:
    month = pd.Timestamp(date).month
    if month in SUMMER_MONTHS:
        return SUMMER_MULTIPLIER
    if month in WINTER_MONTHS:
        return WINTER_MULTIPLIER
    return 1.0


def pandemic_multiplier(date, start=PANDEMIC_START, end=PANDEMIC_END) -> float:
    """Arrest-volume scaling inside the pandemic window (inclusive)."""
    date = pd.Timestamp(date)
    if pd.Timestamp(start) <= date <= pd.Timestamp(end):
        return PANDEMIC_MULTIPLIER
    return 1.0


def event_bump(
    event_time: int,
    zb_eligible: int | bool,
    offense_category: str,
    in_place: bool = True,
) -> float:
    """Additive policy effect on rearrest probability.

    Zero for ineligible offenses, when the policy is not in place, and
    outside event weeks [0, 52].
    """
    if not zb_eligible or not in_place:
        return 0.0
    if EARLY_WINDOW[0] <= event_time <= EARLY_WINDOW[1]:
        return _lookup(EARLY_BUMP, offense_category, DEFAULT_EARLY_BUMP, "event_bump")
    if LATE_WINDOW[0] < event_time <= LATE_WINDOW[1]:
        return _lookup(LATE_BUMP, offense_category, DEFAULT_LATE_BUMP, "event_bump")
    return 0.0
