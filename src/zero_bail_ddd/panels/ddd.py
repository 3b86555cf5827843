"""Triple-difference panel builder.

Crosses county × week × zb_eligible × offense_category × race × gender and
attaches the policy indicators needed for a DDD event study: treatment
status, the zero-bail window flag and weekly/monthly event time.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import pandas as pd

from .._types import StudyConfig
from ..constants import (
    COUNTIES,
    GENDERS,
    KEY_COLUMNS,
    OFFENSE_CATEGORIES,
    RACES,
    TREATED_COUNTIES,
)
from ..treatment import PolicySchedule
from ._base import BasePanelBuilder

logger = logging.getLogger(__name__)


class DDDPanel(BasePanelBuilder):
    """Build the full county-week-group panel.

    Rows are sorted by ``(county, week, zb_eligible, offense_category, race,
    gender)``. The order is part of the contract: the outcome generator
    draws random numbers in row order.

    Parameters
    ----------
    counties : sequence of str, optional
        Counties in the panel (default: all 58 California counties).
    treated_counties : sequence of str, optional
        Subset of ``counties`` that keep the policy after the statewide
        window (default: the 27-county treatment set).
    offense_categories, races, genders : sequence of str, optional
        Levels of the remaining cross-product dimensions.
    config : StudyConfig, optional
        Dates and clamp bounds.

    Example
    -------
    >>> panel = DDDPanel(counties=["Los Angeles", "Orange"], treated_counties=["Los Angeles"])
    >>> df = panel.build()
    """

    def __init__(
        self,
        counties: Sequence[str] | None = None,
        treated_counties: Sequence[str] | None = None,
        offense_categories: Sequence[str] | None = None,
        races: Sequence[str] | None = None,
        genders: Sequence[str] | None = None,
        config: StudyConfig | None = None,
    ):
        super().__init__(config)
        self.counties = list(COUNTIES if counties is None else counties)
        if treated_counties is None:
            treated_counties = [c for c in TREATED_COUNTIES if c in self.counties]
        self.treated_counties = list(treated_counties)
        self.offense_categories = list(OFFENSE_CATEGORIES if offense_categories is None else offense_categories)
        self.races = list(RACES if races is None else races)
        self.genders = list(GENDERS if genders is None else genders)
        self._validate_input()
        self.schedule = PolicySchedule(self.config, self.treated_counties)

    def _validate_input(self) -> None:
        """Check dimensions are non-empty, unique, and treated ⊆ counties."""
        dims = {
            "counties": self.counties,
            "offense_categories": self.offense_categories,
            "races": self.races,
            "genders": self.genders,
        }
        for name, levels in dims.items():
            if not levels:
                raise ValueError(f"{name} must not be empty")
            if len(set(levels)) != len(levels):
                raise ValueError(f"{name} contains duplicate levels: {levels}")

        unknown = sorted(set(self.treated_counties) - set(self.counties))
        if unknown:
            raise ValueError(f"Treated counties not in county list: {unknown}")

        if len(self.config.weeks) == 0:
            raise ValueError("Weekly date range is empty")

        logger.info(
            "DDDPanel initialized: %s counties (%s treated), %s weeks",
            f"{len(self.counties):,}",
            f"{len(self.treated_counties):,}",
            f"{len(self.config.weeks):,}",
        )

    @property
    def expected_rows(self) -> int:
        """Size of the full cross product."""
        return (
            len(self.counties) * len(self.config.weeks) * 2
            * len(self.offense_categories) * len(self.races) * len(self.genders)
        )

    def build(self) -> pd.DataFrame:
        """Build the panel with policy and event-time columns.

        Returns
        -------
        pd.DataFrame
            One row per key tuple with columns:

            - ``county``, ``week``, ``zb_eligible`` (0/1), ``offense_category``,
              ``race``, ``gender``: the cross-product keys
            - ``week_idx``: 0-based week position, used as the time fixed effect
            - ``treat``: county is in the treatment set
            - ``event_time_weeks`` / ``event_time_months``: clamped event time
            - ``zb_in_place``: policy active in this county-week
        """
        weeks = self.config.weeks
        index = pd.MultiIndex.from_product(
            [
                sorted(self.counties),
                weeks,
                [0, 1],
                sorted(self.offense_categories),
                sorted(self.races),
                sorted(self.genders),
            ],
            names=KEY_COLUMNS,
        )
        df = index.to_frame(index=False)
        df["zb_eligible"] = df["zb_eligible"].astype("int64")
        df["week_idx"] = weeks.get_indexer(df["week"])

        df = self.schedule.annotate(df)

        self._panel = df
        self._log_summary(df)
        return df
