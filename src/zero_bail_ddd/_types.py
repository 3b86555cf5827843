"""Shared types and configuration for zero-bail-ddd."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

_DATE_FIELDS = (
    "week_start",
    "week_end",
    "statewide_start",
    "statewide_end",
    "continuation_end",
    "pandemic_start",
    "pandemic_end",
)


@dataclass(frozen=True)
class StudyConfig:
    """Named constants for panel construction and simulation.

    Every builder, generator and fitter takes this as its configuration
    argument. Date fields accept anything ``pd.Timestamp`` understands and
    are stored as timestamps.

    Parameters
    ----------
    seed : int
        Seed for the random stream consumed by the outcome generator.
    week_start, week_end : str or pd.Timestamp
        First and last week of the panel (inclusive, weekly cadence).
    statewide_start, statewide_end : str or pd.Timestamp
        Statewide emergency zero-bail window, half-open ``[start, end)``.
        ``statewide_start`` is also the event-time reference date.
    continuation_end : str or pd.Timestamp
        End of the continuation window ``[statewide_end, continuation_end)``
        applied to treated counties. A single placeholder date for all of
        them.
    pandemic_start, pandemic_end : str or pd.Timestamp
        Window (inclusive) in which arrest volume is scaled down.
    event_weeks_bounds, event_months_bounds : tuple[int, int]
        Clamp bounds for weekly and monthly event time.
    days_per_month : float
        Month length used to convert day offsets into event months.
    reference_period : int
        Omitted event-time level in the event-study regressions.

    Example
    -------
    >>> config = StudyConfig(seed=7, continuation_end="2021-03-01")
    """

    seed: int = 20200413
    week_start: str | pd.Timestamp = "2018-01-05"
    week_end: str | pd.Timestamp = "2023-09-29"
    statewide_start: str | pd.Timestamp = "2020-04-13"
    statewide_end: str | pd.Timestamp = "2020-06-20"
    continuation_end: str | pd.Timestamp = "2021-06-01"
    pandemic_start: str | pd.Timestamp = "2020-03-15"
    pandemic_end: str | pd.Timestamp = "2020-06-30"
    event_weeks_bounds: tuple[int, int] = (-40, 40)
    event_months_bounds: tuple[int, int] = (-6, 11)
    days_per_month: float = 30.44
    reference_period: int = -1

    def __post_init__(self) -> None:
        for name in _DATE_FIELDS:
            object.__setattr__(self, name, pd.Timestamp(getattr(self, name)))
        self._validate()

    def _validate(self) -> None:
        if self.week_start > self.week_end:
            raise ValueError(
                f"week_start ({self.week_start.date()}) must be <= week_end ({self.week_end.date()})"
            )
        if not self.statewide_start < self.statewide_end <= self.continuation_end:
            raise ValueError(
                "Policy windows must satisfy statewide_start < statewide_end <= continuation_end, "
                f"got {self.statewide_start.date()}, {self.statewide_end.date()}, "
                f"{self.continuation_end.date()}"
            )
        if self.pandemic_start > self.pandemic_end:
            raise ValueError("pandemic_start must be <= pandemic_end")
        for name in ("event_weeks_bounds", "event_months_bounds"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"{name} must be (low, high) with low <= high, got {(low, high)}")
        if self.days_per_month <= 0:
            raise ValueError("days_per_month must be positive")

    @property
    def weeks(self) -> pd.DatetimeIndex:
        """Weekly dates from ``week_start`` through ``week_end``."""
        return pd.date_range(self.week_start, self.week_end, freq="7D")
