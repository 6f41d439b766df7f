"""Tests for the yearly storage estimator."""

from __future__ import annotations

import pytest

from storage_planner.storage_engine.estimator import (
    estimate,
    STANDARD_GB_PER_MINUTE,
    HIGH_RES_GB_PER_MINUTE,
)


class TestEstimate:
    def test_even_split(self):
        est = estimate(10, 60, 50)
        assert est.standard_gb == pytest.approx(35.0)
        assert est.high_res_gb == pytest.approx(80.0)
        assert est.total_gb == pytest.approx(115.0)

    def test_quarter_high_res(self):
        est = estimate(12, 90, 25)
        assert est.standard_gb == pytest.approx(94.5)
        assert est.high_res_gb == pytest.approx(72.0)
        assert est.total_gb == pytest.approx(166.5)

    def test_all_standard(self):
        est = estimate(5, 100, 0)
        assert est.high_res_gb == 0
        assert est.total_gb == pytest.approx(500 * STANDARD_GB_PER_MINUTE)

    def test_all_high_res(self):
        est = estimate(5, 100, 100)
        assert est.standard_gb == 0
        assert est.total_gb == pytest.approx(500 * HIGH_RES_GB_PER_MINUTE)

    @pytest.mark.parametrize("films,minutes,pct", [
        (0, 90, 50), (40, 0, 50), (0, 0, 100),
    ])
    def test_zero_inputs_give_zero_estimate(self, films, minutes, pct):
        est = estimate(films, minutes, pct)
        assert (est.total_gb, est.standard_gb, est.high_res_gb) == (0, 0, 0)

    @pytest.mark.parametrize("films,minutes,pct", [
        (1, 1, 0), (7, 43.5, 33.3), (250, 120, 99.9), (3, 1440, 100),
    ])
    def test_components_sum_to_total(self, films, minutes, pct):
        est = estimate(films, minutes, pct)
        assert est.standard_gb + est.high_res_gb == pytest.approx(est.total_gb)
        assert est.standard_gb >= 0
        assert est.high_res_gb >= 0


class TestMonotonicity:
    """Raising any input never lowers the total."""

    def test_more_films(self):
        totals = [estimate(f, 90, 30).total_gb for f in range(0, 50, 5)]
        assert totals == sorted(totals)

    def test_longer_films(self):
        totals = [estimate(12, m, 30).total_gb for m in range(0, 240, 15)]
        assert totals == sorted(totals)

    def test_more_high_res(self):
        totals = [estimate(12, 90, p).total_gb for p in range(0, 101, 10)]
        assert totals == sorted(totals)


class TestRateOverrides:
    def test_custom_rates(self):
        est = estimate(10, 10, 50, standard_rate=1.0, high_res_rate=3.0)
        assert est.standard_gb == pytest.approx(50.0)
        assert est.high_res_gb == pytest.approx(150.0)
        assert est.total_gb == pytest.approx(200.0)

    def test_zero_rates(self):
        est = estimate(10, 10, 50, standard_rate=0, high_res_rate=0)
        assert est.total_gb == 0


class TestPreconditions:
    """Out-of-range input is rejected, never clamped."""

    @pytest.mark.parametrize("pct", [-0.1, 100.5, 250])
    def test_percentage_out_of_range(self, pct):
        with pytest.raises(ValueError, match="high_res_percent"):
            estimate(10, 60, pct)

    def test_negative_films(self):
        with pytest.raises(ValueError, match="films_per_year"):
            estimate(-1, 60, 50)

    def test_negative_minutes(self):
        with pytest.raises(ValueError, match="minutes_per_film"):
            estimate(10, -60, 50)

    def test_negative_rate(self):
        with pytest.raises(ValueError):
            estimate(10, 60, 50, standard_rate=-0.1)


class TestNaNInputs:
    """NaN never slips past the range checks."""

    @pytest.mark.parametrize("films,minutes,pct", [
        (float("nan"), 10, 50),
        (10, float("nan"), 50),
        (10, 10, float("nan")),
    ])
    def test_nan_rejected(self, films, minutes, pct):
        with pytest.raises(ValueError):
            estimate(films, minutes, pct)

    def test_nan_rate_rejected(self):
        with pytest.raises(ValueError, match="storage rates"):
            estimate(10, 10, 50, high_res_rate=float("nan"))
