"""Shared fixtures for zero-bail-ddd tests."""

import pandas as pd
import pytest

from zero_bail_ddd import DDDPanel, OutcomeGenerator, StudyConfig

SMALL_COUNTIES = ["Alameda", "Los Angeles", "Orange"]
SMALL_TREATED = ["Alameda", "Los Angeles"]


@pytest.fixture
def config() -> StudyConfig:
    return StudyConfig(seed=123)


@pytest.fixture
def short_config() -> StudyConfig:
    """One year of weeks around the policy start."""
    return StudyConfig(seed=123, week_start="2019-10-04", week_end="2020-09-25")


@pytest.fixture
def small_builder(config) -> DDDPanel:
    """Three counties (two treated), full weekly range."""
    return DDDPanel(counties=SMALL_COUNTIES, treated_counties=SMALL_TREATED, config=config)


@pytest.fixture
def small_panel(small_builder) -> pd.DataFrame:
    return small_builder.build()


@pytest.fixture
def simulated_panel(small_panel, config) -> pd.DataFrame:
    return OutcomeGenerator(config).generate(small_panel)


@pytest.fixture
def coef_table() -> pd.DataFrame:
    """Coefficient table with event-time and control terms, pyfixest label style."""
    return pd.DataFrame({
        "term": [
            "event_time_months::1:zb_eligible",
            "event_time_months::-3:zb_eligible",
            "event_time_months::0:zb_eligible",
            "race::Black:zb_eligible",
            "gender::Male:zb_eligible",
            "offense_category::drugs:zb_eligible",
        ],
        "estimate": [0.02, -0.001, 0.03, 0.004, 0.01, 0.05],
        "std_error": [0.01, 0.002, 0.005, 0.001, 0.002, 0.01],
    })
