"""Export utilities for panels, coefficient tables and figures."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


def _prepare_path(path: str | Path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def to_parquet(df: pd.DataFrame, path: str | Path, **kwargs) -> None:
    """Export a table to parquet.

    Parameters
    ----------
    df : pd.DataFrame
        Panel or coefficient table.
    path : str or Path
        Output file path. Parent directories are created.
    **kwargs
        Passed to ``DataFrame.to_parquet()``.
    """
    path = _prepare_path(path)
    df.to_parquet(path, index=False, **kwargs)
    logger.info("Exported %s rows to %s", f"{len(df):,}", path)


def to_csv(df: pd.DataFrame, path: str | Path, **kwargs) -> None:
    """Export a table to CSV, writing dates as ISO strings.

    Parameters
    ----------
    df : pd.DataFrame
        Panel or coefficient table.
    path : str or Path
        Output file path. Parent directories are created.
    **kwargs
        Passed to ``DataFrame.to_csv()``.
    """
    path = _prepare_path(path)
    df.to_csv(path, index=False, date_format="%Y-%m-%d", **kwargs)
    logger.info("Exported %s rows to %s", f"{len(df):,}", path)


def save_figure(fig, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save a matplotlib figure and close it."""
    import matplotlib.pyplot as plt

    path = _prepare_path(path)
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
    plt.close(fig)
    logger.info("Saved figure to %s", path)
