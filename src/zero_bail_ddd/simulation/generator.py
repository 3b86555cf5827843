"""Synthetic arrest and rearrest outcomes.

For each panel row::

    expected  = max(base_lambda * season * pandemic, 1)
    arrests   ~ Poisson(expected)
    prob      = clip(base_p + gender_bump + event_bump, 0.001, 0.70)
    rearrests ~ Binomial(arrests, prob)
    rate      = rearrests / arrests   (NaN when arrests == 0)

The random stream is an explicit ``numpy.random.Generator``. Each row
consumes one Poisson draw followed by one Binomial draw, in panel row
order, so a fixed seed and a fixed row order reproduce the panel exactly.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from .._types import StudyConfig
from ..constants import KEY_COLUMNS
from . import rates

logger = logging.getLogger(__name__)

MIN_EXPECTED_ARRESTS = 1.0
PROB_BOUNDS = (0.001, 0.70)


def _map_unique(df: pd.DataFrame, cols: list[str], func) -> np.ndarray:
    """Apply a scalar function once per distinct key and broadcast back to rows."""
    keys = df[cols].drop_duplicates()
    values = [func(*row) for row in keys.itertuples(index=False, name=None)]
    lookup = keys.assign(_value=values)
    return df[cols].merge(lookup, on=cols, how="left")["_value"].to_numpy(dtype=float)


def draw_row(expected: float, prob: float, rng: np.random.Generator) -> tuple[int, int]:
    """Draw ``(arrests, rearrests)`` for one row, advancing ``rng`` by two draws."""
    arrests = int(rng.poisson(expected))
    rearrests = int(rng.binomial(arrests, prob))
    return arrests, rearrests


class OutcomeGenerator:
    """Simulate ``arrests``, ``rearrests`` and ``rate`` for a built panel.

    Parameters
    ----------
    config : StudyConfig, optional
        Supplies the default seed and the pandemic window.

    Example
    -------
    >>> panel = DDDPanel(counties=["Los Angeles", "Orange"]).build()
    >>> df = OutcomeGenerator().generate(panel)
    """

    required_cols = KEY_COLUMNS + ["event_time_weeks", "zb_in_place"]

    def __init__(self, config: StudyConfig | None = None):
        self.config = config or StudyConfig()

    def _validate(self, panel: pd.DataFrame) -> None:
        missing = [col for col in self.required_cols if col not in panel.columns]
        if missing:
            raise ValueError(
                f"Missing required columns: {missing}. "
                f"Available: {sorted(panel.columns.tolist())}"
            )

    def expected_arrests(self, panel: pd.DataFrame) -> np.ndarray:
        """Poisson mean per row, floored at 1."""
        c = self.config
        base = _map_unique(panel, ["zb_eligible", "offense_category"], rates.base_lambda)
        season = _map_unique(panel, ["week"], rates.season_multiplier)
        pandemic = _map_unique(
            panel,
            ["week"],
            lambda week: rates.pandemic_multiplier(week, c.pandemic_start, c.pandemic_end),
        )
        return np.maximum(base * season * pandemic, MIN_EXPECTED_ARRESTS)

    def rearrest_probability(self, panel: pd.DataFrame) -> np.ndarray:
        """Binomial success probability per row, clipped to ``PROB_BOUNDS``."""
        base = _map_unique(panel, ["zb_eligible", "offense_category"], rates.base_p)
        gender = _map_unique(panel, ["gender"], rates.gender_bump)
        # event_time_weeks is clamped, so continuation weeks past the upper bound keep the late bump
        bump = _map_unique(
            panel,
            ["event_time_weeks", "zb_eligible", "offense_category", "zb_in_place"],
            rates.event_bump,
        )
        return np.clip(base + gender + bump, *PROB_BOUNDS)

    def generate(
        self,
        panel: pd.DataFrame,
        rng: np.random.Generator | int | None = None,
    ) -> pd.DataFrame:
        """Add simulated outcomes to ``panel``.

        Parameters
        ----------
        panel : pd.DataFrame
            Output of ``DDDPanel.build()``. Draws follow its row order.
        rng : numpy.random.Generator or int, optional
            Random stream, or a seed for a fresh one. Defaults to
            ``config.seed``.

        Returns
        -------
        pd.DataFrame
            Copy of ``panel`` with ``arrests``, ``rearrests`` (int64) and
            ``rate`` (float, NaN where ``arrests == 0``).
        """
        self._validate(panel)
        if rng is None:
            rng = self.config.seed
        if not isinstance(rng, np.random.Generator):
            rng = np.random.default_rng(rng)

        expected = self.expected_arrests(panel)
        prob = self.rearrest_probability(panel)

        n = len(panel)
        arrests = np.empty(n, dtype=np.int64)
        rearrests = np.empty(n, dtype=np.int64)
        for i, (lam, p) in enumerate(zip(expected.tolist(), prob.tolist())):
            arrests[i], rearrests[i] = draw_row(lam, p, rng)

        df = panel.copy()
        df["arrests"] = arrests
        df["rearrests"] = rearrests
        with np.errstate(divide="ignore", invalid="ignore"):
            df["rate"] = np.where(arrests > 0, rearrests / arrests, np.nan)

        logger.info(
            "Outcomes simulated: %s rows, %s arrests, %s rearrests, %s rows with no arrests",
            f"{n:,}",
            f"{int(arrests.sum()):,}",
            f"{int(rearrests.sum()):,}",
            f"{int((arrests == 0).sum()):,}",
        )
        return df
