"""Policy windows and event-time indices for the zero-bail schedule."""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from .._types import StudyConfig
from ..constants import TREATED_COUNTIES

logger = logging.getLogger(__name__)


class PolicySchedule:
    """Assign treatment status, policy indicators and event time.

    The statewide window ``[statewide_start, statewide_end)`` covers every
    county. Treated counties stay under the policy for the continuation
    window ``[statewide_end, continuation_end)``. Event time is measured
    from ``statewide_start`` and depends on the week only.

    Parameters
    ----------
    config : StudyConfig, optional
        Policy dates and clamp bounds. Uses defaults if not provided.
    treated_counties : sequence of str, optional
        Counties that keep the policy after the statewide window.
    """

    def __init__(
        self,
        config: StudyConfig | None = None,
        treated_counties: tuple[str, ...] | list[str] | None = None,
    ) -> None:
        self.config = config or StudyConfig()
        if treated_counties is None:
            treated_counties = TREATED_COUNTIES
        self.treated_counties = frozenset(treated_counties)

    def is_treated(self, county: pd.Series) -> pd.Series:
        """Boolean treatment flag per county."""
        return county.isin(self.treated_counties)

    def _days_since_start(self, week: pd.Series) -> np.ndarray:
        week = pd.to_datetime(week)
        return (week - self.config.statewide_start).dt.days.to_numpy()

    def event_time_weeks(self, week: pd.Series) -> pd.Series:
        """Whole weeks since the statewide start, clamped.

        Floors toward minus infinity, so the days just before the start
        map to -1 rather than 0.
        """
        low, high = self.config.event_weeks_bounds
        weeks = np.floor_divide(self._days_since_start(week), 7)
        return pd.Series(np.clip(weeks, low, high), index=week.index, dtype="int64")

    def event_time_months(self, week: pd.Series) -> pd.Series:
        """Rounded months (of ``days_per_month`` days) since the statewide start, clamped."""
        low, high = self.config.event_months_bounds
        months = np.round(self._days_since_start(week) / self.config.days_per_month)
        return pd.Series(np.clip(months, low, high), index=week.index).astype("int64")

    def zb_in_place(self, week: pd.Series, treat: pd.Series) -> pd.Series:
        """Whether the zero-bail schedule applies in a given county-week."""
        c = self.config
        week = pd.to_datetime(week)
        statewide = (week >= c.statewide_start) & (week < c.statewide_end)
        continuation = (
            treat.astype(bool) & (week >= c.statewide_end) & (week < c.continuation_end)
        )
        return statewide | continuation

    def annotate(self, df: pd.DataFrame) -> pd.DataFrame:
        """Add ``treat``, ``event_time_weeks``, ``event_time_months`` and ``zb_in_place``.

        Parameters
        ----------
        df : pd.DataFrame
            Must contain ``county`` and ``week``.

        Returns
        -------
        pd.DataFrame
            Copy of ``df`` with the policy columns appended.
        """
        missing = [col for col in ("county", "week") if col not in df.columns]
        if missing:
            raise ValueError(
                f"Missing required columns: {missing}. "
                f"Available: {sorted(df.columns.tolist())}"
            )

        df = df.copy()
        df["treat"] = self.is_treated(df["county"])
        df["event_time_weeks"] = self.event_time_weeks(df["week"])
        df["event_time_months"] = self.event_time_months(df["week"])
        df["zb_in_place"] = self.zb_in_place(df["week"], df["treat"])

        logger.info(
            "Policy assigned: %s treated counties, %s rows with zero bail in place",
            f"{df.loc[df['treat'], 'county'].nunique():,}",
            f"{int(df['zb_in_place'].sum()):,}",
        )
        return df
