"""Export utilities for panels, tables and figures."""

from .export import save_figure, to_csv, to_parquet

__all__ = ["to_parquet", "to_csv", "save_figure"]
