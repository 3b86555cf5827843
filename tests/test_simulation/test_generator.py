"""Tests for OutcomeGenerator."""

import numpy as np
import pandas as pd
import pytest

from zero_bail_ddd import DDDPanel, OutcomeGenerator, StudyConfig
from zero_bail_ddd.simulation import draw_row, rates


class TestGenerate:
    def test_output_columns(self, simulated_panel):
        for col in ["arrests", "rearrests", "rate"]:
            assert col in simulated_panel.columns
        assert simulated_panel["arrests"].dtype == np.int64
        assert simulated_panel["rearrests"].dtype == np.int64

    def test_row_order_and_count_preserved(self, small_panel, simulated_panel):
        pd.testing.assert_frame_equal(
            simulated_panel[small_panel.columns], small_panel,
        )

    def test_rearrests_bounded_by_arrests(self, simulated_panel):
        assert (simulated_panel["rearrests"] >= 0).all()
        assert (simulated_panel["rearrests"] <= simulated_panel["arrests"]).all()

    def test_rate_defined_iff_arrests(self, simulated_panel):
        df = simulated_panel
        assert (df["rate"].notna() == (df["arrests"] > 0)).all()
        defined = df[df["arrests"] > 0]
        assert (defined["rate"] == defined["rearrests"] / defined["arrests"]).all()

    def test_zero_arrests_gives_nan_rate(self, config):
        panel = DDDPanel(counties=["Orange"], config=config).build().head(50)
        gen = OutcomeGenerator(config)
        gen.expected_arrests = lambda df: np.full(len(df), 1e-12)
        df = gen.generate(panel)
        assert (df["arrests"] == 0).all()
        assert df["rate"].isna().all()

    def test_input_not_mutated(self, small_panel, config):
        cols = list(small_panel.columns)
        OutcomeGenerator(config).generate(small_panel)
        assert list(small_panel.columns) == cols

    def test_missing_column_raises(self, config):
        with pytest.raises(ValueError, match="Missing required columns"):
            OutcomeGenerator(config).generate(pd.DataFrame({"county": ["Orange"]}))


class TestReproducibility:
    def test_same_seed_same_draws(self, small_panel, config):
        a = OutcomeGenerator(config).generate(small_panel)
        b = OutcomeGenerator(config).generate(small_panel)
        np.testing.assert_array_equal(a["arrests"], b["arrests"])
        np.testing.assert_array_equal(a["rearrests"], b["rearrests"])

    def test_explicit_rng_matches_seed(self, small_panel, config):
        a = OutcomeGenerator(config).generate(small_panel, rng=np.random.default_rng(config.seed))
        b = OutcomeGenerator(config).generate(small_panel)
        np.testing.assert_array_equal(a["arrests"], b["arrests"])

    def test_different_seed_differs(self, small_panel):
        a = OutcomeGenerator(StudyConfig(seed=1)).generate(small_panel)
        b = OutcomeGenerator(StudyConfig(seed=2)).generate(small_panel)
        assert not np.array_equal(a["arrests"], b["arrests"])

    def test_two_draws_per_row_in_order(self, small_panel, config):
        panel = small_panel.head(25)
        gen = OutcomeGenerator(config)
        df = gen.generate(panel, rng=7)

        rng = np.random.default_rng(7)
        expected = gen.expected_arrests(panel)
        prob = gen.rearrest_probability(panel)
        for i in range(len(panel)):
            arrests = rng.poisson(expected[i])
            rearrests = rng.binomial(arrests, prob[i])
            assert df["arrests"].iloc[i] == arrests
            assert df["rearrests"].iloc[i] == rearrests

    def test_draw_row_advances_stream(self):
        rng = np.random.default_rng(0)
        first = draw_row(30.0, 0.1, rng)
        second = draw_row(30.0, 0.1, rng)
        replay = np.random.default_rng(0)
        assert draw_row(30.0, 0.1, replay) == first
        assert draw_row(30.0, 0.1, replay) == second


class TestDeterministicParts:
    def test_expected_arrests_composition(self, small_panel, config):
        gen = OutcomeGenerator(config)
        expected = gen.expected_arrests(small_panel)
        i = small_panel.index[
            (small_panel["county"] == "Los Angeles")
            & (small_panel["week"] == pd.Timestamp("2020-04-17"))
            & (small_panel["zb_eligible"] == 1)
            & (small_panel["offense_category"] == "violent")
        ][0]
        assert expected[i] == pytest.approx(35 * 1.0 * 0.6)

    def test_expected_arrests_floor(self, config):
        panel = DDDPanel(counties=["Orange"], offense_categories=["violent"], config=config).build()
        gen = OutcomeGenerator(config)
        assert (gen.expected_arrests(panel) >= 1.0).all()

    def test_probability_includes_bump_only_when_in_place(self, small_panel, config):
        gen = OutcomeGenerator(config)
        prob = gen.rearrest_probability(small_panel)
        week = pd.Timestamp("2020-07-03")  # continuation window, event week 11
        mask = (
            (small_panel["week"] == week)
            & (small_panel["zb_eligible"] == 1)
            & (small_panel["offense_category"] == "drugs")
            & (small_panel["gender"] == "Male")
        )
        treated = prob[(mask & small_panel["treat"]).to_numpy()]
        untreated = prob[(mask & ~small_panel["treat"]).to_numpy()]
        base = rates.base_p(1, "drugs") + rates.gender_bump("Male")
        assert treated == pytest.approx(np.full(len(treated), base + rates.LATE_BUMP["drugs"]))
        assert untreated == pytest.approx(np.full(len(untreated), base))

    def test_probability_clipped(self, small_panel, config):
        prob = OutcomeGenerator(config).rearrest_probability(small_panel)
        assert prob.min() >= 0.001
        assert prob.max() <= 0.70
