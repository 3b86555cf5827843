"""Base class for panel builders."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import pandas as pd

from .._types import StudyConfig

logger = logging.getLogger(__name__)


class BasePanelBuilder(ABC):
    """Abstract base for panel construction.

    Subclasses implement ``build()`` to produce the panel DataFrame. Caching
    and summary statistics live here.

    Parameters
    ----------
    config : StudyConfig, optional
        Dates, clamp bounds and seed. Uses defaults if not provided.
    """

    def __init__(self, config: StudyConfig | None = None):
        self.config = config or StudyConfig()
        self._panel: pd.DataFrame | None = None

    @abstractmethod
    def build(self) -> pd.DataFrame:
        """Construct the panel."""
        ...

    @property
    def panel(self) -> pd.DataFrame:
        """Lazily build and cache the panel."""
        if self._panel is None:
            self._panel = self.build()
        return self._panel

    def summary(self) -> pd.DataFrame:
        """Return panel summary statistics.

        Returns
        -------
        pd.DataFrame
            One-row DataFrame with n_obs, n_counties, n_treated, n_weeks,
            week range and the share of rows with the policy in place.
        """
        df = self.panel

        stats = {
            "n_obs": len(df),
            "n_counties": df["county"].nunique(),
            "n_treated": df.loc[df["treat"], "county"].nunique(),
            "n_weeks": df["week"].nunique(),
            "week_min": df["week"].min(),
            "week_max": df["week"].max(),
            "share_in_place": float(df["zb_in_place"].mean()) if len(df) else 0.0,
        }
        return pd.DataFrame([stats])

    def _log_summary(self, df: pd.DataFrame) -> None:
        logger.info("%s built", type(self).__name__)
        logger.info("  rows: %s", f"{len(df):,}")
        logger.info("  counties: %s (%s treated)",
                    f"{df['county'].nunique():,}",
                    f"{df.loc[df['treat'], 'county'].nunique():,}")
        logger.info("  weeks: %s", f"{df['week'].nunique():,}")
