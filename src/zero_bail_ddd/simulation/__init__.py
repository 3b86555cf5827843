"""Synthetic outcome model for the DDD panel."""

from . import rates
from .generator import OutcomeGenerator, draw_row

__all__ = ["OutcomeGenerator", "draw_row", "rates"]
