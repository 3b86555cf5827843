"""Treatment assignment for the zero-bail policy schedule."""

from .policy import PolicySchedule

__all__ = ["PolicySchedule"]
