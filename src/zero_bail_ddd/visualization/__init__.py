"""Event-study charts and descriptive plots."""

from ._style import COLORS, apply_style, get_z
from .event_study import plot_event_study, plot_rate_heatmap

__all__ = [
    "COLORS",
    "apply_style",
    "get_z",
    "plot_event_study",
    "plot_rate_heatmap",
]
