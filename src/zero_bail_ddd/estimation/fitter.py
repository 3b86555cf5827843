"""Fixed-effects event-study fit, delegated to pyfixest."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd
import pyfixest as pf

logger = logging.getLogger(__name__)

OUTCOME_COL = "rate"
WEIGHT_COL = "arrests"
CLUSTER_COL = "county"
ELIGIBILITY_COL = "zb_eligible"

# Reference levels for the eligibility interactions with demographics/offense
CONTROL_REFS = {
    "race": "White",
    "offense_category": "other",
    "gender": "Female",
}


class FittingError(RuntimeError):
    """The fixed-effects solver failed or returned an unusable fit."""


def build_formula(event_time_col: str, ref: int = -1) -> str:
    """Event-time × eligibility DDD formula with county×eligibility and week FE."""
    terms = [f"i({event_time_col}, {ELIGIBILITY_COL}, ref={ref})"]
    terms += [
        f'i({col}, {ELIGIBILITY_COL}, ref="{level}")'
        for col, level in CONTROL_REFS.items()
    ]
    rhs = " + ".join(terms)
    return f"{OUTCOME_COL} ~ {rhs} | {CLUSTER_COL}^{ELIGIBILITY_COL} + week_idx"


def prepare_model_data(panel: pd.DataFrame, event_time_col: str) -> pd.DataFrame:
    """Select model columns and drop rows with an undefined rate."""
    required = [
        OUTCOME_COL, WEIGHT_COL, CLUSTER_COL, ELIGIBILITY_COL, "week_idx", event_time_col,
        *CONTROL_REFS,
    ]
    missing = [col for col in required if col not in panel.columns]
    if missing:
        raise ValueError(
            f"Missing required columns: {missing}. "
            f"Available: {sorted(panel.columns.tolist())}"
        )

    df = panel[required].copy()
    df[ELIGIBILITY_COL] = df[ELIGIBILITY_COL].astype(int)
    df[event_time_col] = df[event_time_col].astype(int)
    n_before = len(df)
    df = df[df[OUTCOME_COL].notna()].reset_index(drop=True)
    logger.info(
        "Model data: %s -> %s rows (dropped %s with no arrests)",
        f"{n_before:,}",
        f"{len(df):,}",
        f"{n_before - len(df):,}",
    )
    return df


def fit_event_study(
    panel: pd.DataFrame,
    event_time_col: str = "event_time_weeks",
    ref: int = -1,
):
    """Fit the weighted DDD event study with county-clustered errors.

    Parameters
    ----------
    panel : pd.DataFrame
        Simulated panel (output of ``OutcomeGenerator.generate``).
    event_time_col : str
        ``event_time_weeks`` or ``event_time_months``.
    ref : int
        Omitted event-time level.

    Returns
    -------
    pyfixest Feols fit.

    Raises
    ------
    FittingError
        If pyfixest raises, drops collinear regressors, or returns
        non-finite standard errors.
    """
    data = prepare_model_data(panel, event_time_col)
    if data.empty:
        raise FittingError("No rows with a defined rate to fit")

    formula = build_formula(event_time_col, ref=ref)
    logger.info("Fitting %s", formula)
    try:
        fit = pf.feols(
            formula,
            data=data,
            vcov={"CRV1": CLUSTER_COL},
            weights=WEIGHT_COL,
        )
    except Exception as exc:
        raise FittingError(f"Fixed-effects fit failed for {event_time_col}: {exc}") from exc

    collinear = list(getattr(fit, "_collin_vars", None) or [])
    if collinear:
        raise FittingError(f"Collinear terms dropped by the solver: {collinear}")

    se = fit.se()
    bad = se.index[~np.isfinite(se.to_numpy(dtype=float))].tolist()
    if bad:
        raise FittingError(f"Non-finite standard errors for: {bad}")

    logger.info("Fit complete: %s coefficients, %s observations", len(se), f"{len(data):,}")
    return fit


def coefficient_table(fit) -> pd.DataFrame:
    """Structured ``term``, ``estimate``, ``std_error`` table from a fit."""
    coef = fit.coef()
    se = fit.se()
    return pd.DataFrame({
        "term": coef.index.astype(str),
        "estimate": coef.to_numpy(dtype=float),
        "std_error": se.reindex(coef.index).to_numpy(dtype=float),
    })
