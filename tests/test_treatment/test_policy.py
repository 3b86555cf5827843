"""Tests for PolicySchedule."""

import numpy as np
import pandas as pd
import pytest

from zero_bail_ddd import PolicySchedule, StudyConfig
from zero_bail_ddd.simulation import rates


def _frame(county, weeks):
    return pd.DataFrame({"county": county, "week": pd.to_datetime(weeks)})


@pytest.fixture
def schedule(config):
    return PolicySchedule(config)


class TestPolicyWindows:
    def test_window_invariant_holds_for_all_rows(self, small_panel):
        week = small_panel["week"]
        statewide = (week >= "2020-04-13") & (week < "2020-06-20")
        continuation = small_panel["treat"] & (week >= "2020-06-20") & (week < "2021-06-01")
        assert (small_panel["zb_in_place"] == (statewide | continuation)).all()

    def test_statewide_window_half_open(self, schedule):
        df = schedule.annotate(_frame("Orange", ["2020-04-12", "2020-04-13", "2020-06-19", "2020-06-20"]))
        assert df["zb_in_place"].tolist() == [False, True, True, False]

    def test_continuation_only_for_treated(self, schedule):
        weeks = ["2020-06-20", "2021-05-31", "2021-06-01"]
        treated = schedule.annotate(_frame("Los Angeles", weeks))
        untreated = schedule.annotate(_frame("Orange", weeks))
        assert treated["zb_in_place"].tolist() == [True, True, False]
        assert untreated["zb_in_place"].tolist() == [False, False, False]

    def test_los_angeles_scenario(self, schedule):
        df = schedule.annotate(_frame("Los Angeles", ["2020-04-20"]))
        row = df.iloc[0]
        assert row["treat"]
        assert row["zb_in_place"]
        assert row["event_time_weeks"] == 1
        assert rates.pandemic_multiplier(row["week"]) == 0.6

    def test_orange_after_statewide_end(self, schedule):
        df = schedule.annotate(_frame("Orange", ["2020-07-01"]))
        assert not df.iloc[0]["treat"]
        assert not df.iloc[0]["zb_in_place"]

    def test_custom_continuation_end(self):
        schedule = PolicySchedule(StudyConfig(continuation_end="2020-12-31"))
        df = schedule.annotate(_frame("Los Angeles", ["2020-12-30", "2021-01-01"]))
        assert df["zb_in_place"].tolist() == [True, False]


class TestEventTime:
    def test_weeks_floor_before_start(self, schedule):
        df = schedule.annotate(_frame("Orange", ["2020-04-10", "2020-04-13", "2020-04-17", "2020-04-20"]))
        assert df["event_time_weeks"].tolist() == [-1, 0, 0, 1]

    def test_months_rounding(self, schedule):
        df = schedule.annotate(_frame("Orange", ["2020-04-17", "2020-05-13", "2020-03-14"]))
        assert df["event_time_months"].tolist() == [0, 1, -1]

    def test_clamped_far_from_start(self, schedule):
        df = schedule.annotate(_frame("Orange", ["2010-01-01", "2030-01-01"]))
        assert df["event_time_weeks"].tolist() == [-40, 40]
        assert df["event_time_months"].tolist() == [-6, 11]

    def test_bounds_hold_on_panel(self, small_panel):
        assert small_panel["event_time_weeks"].between(-40, 40).all()
        assert small_panel["event_time_months"].between(-6, 11).all()
        assert small_panel["event_time_weeks"].min() == -40
        assert small_panel["event_time_weeks"].max() == 40

    def test_event_time_depends_on_week_only(self, small_panel):
        per_week = small_panel.groupby("week")[["event_time_weeks", "event_time_months"]].nunique()
        assert (per_week == 1).all().all()

    def test_integer_dtype(self, small_panel):
        assert small_panel["event_time_weeks"].dtype == np.int64
        assert small_panel["event_time_months"].dtype == np.int64


class TestPolicyValidation:
    def test_missing_column_raises(self, schedule):
        with pytest.raises(ValueError, match="Missing required columns"):
            schedule.annotate(pd.DataFrame({"county": ["Orange"]}))


class TestStudyConfig:
    def test_dates_coerced(self, config):
        assert isinstance(config.statewide_start, pd.Timestamp)
        assert config.statewide_start == pd.Timestamp("2020-04-13")

    def test_weeks_range(self, config):
        weeks = config.weeks
        assert weeks[0] == pd.Timestamp("2018-01-05")
        assert weeks[-1] == pd.Timestamp("2023-09-29")
        assert len(weeks) == 300

    def test_window_order_validated(self):
        with pytest.raises(ValueError, match="Policy windows"):
            StudyConfig(statewide_end="2020-04-01")

    def test_clamp_bounds_validated(self):
        with pytest.raises(ValueError, match="event_weeks_bounds"):
            StudyConfig(event_weeks_bounds=(5, -5))

    def test_week_range_validated(self):
        with pytest.raises(ValueError, match="week_start"):
            StudyConfig(week_start="2024-01-05")

    def test_frozen(self, config):
        with pytest.raises(AttributeError):
            config.seed = 1


class TestIsTreated:
    def test_flags_from_treated_set(self):
        schedule = PolicySchedule(treated_counties=["Los Angeles", "Alameda"])
        flags = schedule.is_treated(pd.Series(["Alameda", "Orange", "Los Angeles"]))
        assert flags.tolist() == [True, False, True]
