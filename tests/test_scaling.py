"""Unit tests for the revenue scaling curves."""

import math

import pytest

from sustain_roi.engine.errors import InvalidInputError
from sustain_roi.engine.scaling import (
    BASE_INVESTMENT,
    INVESTMENT_CEILING_MULTIPLE,
    INVESTMENT_TIERS,
    RISK_SCALE_CEILING,
    brand_value_rate,
    build_investment_schedule,
    investment_multiple,
    procurement_scaling_factor,
    risk_percent_factor,
    risk_revenue_scale,
    scaled_investment,
)

REVENUE_GRID = [
    1_000,
    10_000_000,
    50_000_000,
    75_000_000,
    250_000_000,
    600_000_000,
    1_000_000_000,
    3_000_000_000,
    5_000_000_000,
    12_000_000_000,
    20_000_000_000,
    80_000_000_000,
    200_000_000_000,
    1_000_000_000_000,
]

THRESHOLDS = [rev for rev, _ in INVESTMENT_TIERS] + [200_000_000_000]


class TestScaledInvestment:
    def test_small_company_gets_base_investment(self):
        assert scaled_investment(10_000_000) == pytest.approx(250_000)

    def test_tier_anchor_values(self):
        # $250M -> 2.0x, $1B -> 3.5x, $5B -> 6.0x, $20B -> 9.0x
        assert scaled_investment(250_000_000) == pytest.approx(500_000)
        assert scaled_investment(1_000_000_000) == pytest.approx(875_000)
        assert scaled_investment(5_000_000_000) == pytest.approx(1_500_000)
        assert scaled_investment(20_000_000_000) == pytest.approx(2_250_000)

    def test_log_interpolation_within_tier(self):
        # $500M is halfway (in log4 terms) between $250M and $1B
        assert investment_multiple(500_000_000) == pytest.approx(2.75)

    def test_monotonic_non_decreasing(self):
        values = [scaled_investment(r) for r in REVENUE_GRID]
        for lower, higher in zip(values, values[1:]):
            assert lower <= higher

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_continuous_at_tier_boundaries(self, threshold):
        left = scaled_investment(threshold * (1 - 1e-9))
        at = scaled_investment(threshold)
        right = scaled_investment(threshold * (1 + 1e-9))
        assert math.isclose(left, at, rel_tol=1e-6)
        assert math.isclose(right, at, rel_tol=1e-6)

    def test_capped_at_ceiling(self):
        ceiling = BASE_INVESTMENT * INVESTMENT_CEILING_MULTIPLE
        assert scaled_investment(200_000_000_000) == pytest.approx(ceiling)
        assert scaled_investment(10_000_000_000_000) == pytest.approx(ceiling)

    @pytest.mark.parametrize("revenue", [0, -5, float("nan")])
    def test_non_positive_revenue_raises(self, revenue):
        with pytest.raises(InvalidInputError):
            scaled_investment(revenue)


class TestInvestmentSchedule:
    @pytest.mark.parametrize("revenue", REVENUE_GRID)
    def test_growth_law_for_scaled_schedule(self, revenue):
        schedule = build_investment_schedule(revenue)
        assert math.isclose(schedule.year2, schedule.year1 * 1.10, rel_tol=1e-9)
        assert math.isclose(schedule.year3, schedule.year1 * 1.16, rel_tol=1e-9)

    def test_override_supersedes_curve(self):
        schedule = build_investment_schedule(5_000_000_000, override_year1=400_000)
        assert schedule.year1 == 400_000
        assert math.isclose(schedule.year2, 440_000, rel_tol=1e-9)
        assert math.isclose(schedule.year3, 464_000, rel_tol=1e-9)

    def test_total(self):
        schedule = build_investment_schedule(10_000_000)
        assert schedule.total == pytest.approx(250_000 + 275_000 + 290_000)

    def test_non_positive_override_raises(self):
        with pytest.raises(InvalidInputError) as exc_info:
            build_investment_schedule(10_000_000, override_year1=0)
        assert exc_info.value.field == "custom_investment_year1"

    def test_invalid_revenue_raises_even_with_override(self):
        with pytest.raises(InvalidInputError):
            build_investment_schedule(-1, override_year1=300_000)


class TestRiskRevenueScale:
    def test_floor_for_small_companies(self):
        assert risk_revenue_scale(10_000_000) == 0.5

    def test_linear_up_to_100m(self):
        assert risk_revenue_scale(80_000_000) == pytest.approx(0.8)

    @pytest.mark.parametrize(
        "revenue,expected",
        [(100_000_000, 1.0), (1_000_000_000, 1.75), (10_000_000_000, 2.5)],
    )
    def test_anchor_values(self, revenue, expected):
        assert risk_revenue_scale(revenue) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "threshold", [100_000_000, 1_000_000_000, 10_000_000_000, 100_000_000_000]
    )
    def test_continuous_at_boundaries(self, threshold):
        left = risk_revenue_scale(threshold * (1 - 1e-9))
        right = risk_revenue_scale(threshold * (1 + 1e-9))
        assert math.isclose(left, right, rel_tol=1e-6)

    def test_bounded_above(self):
        assert risk_revenue_scale(10**15) == RISK_SCALE_CEILING

    def test_monotonic(self):
        values = [risk_revenue_scale(r) for r in REVENUE_GRID]
        for lower, higher in zip(values, values[1:]):
            assert lower <= higher


class TestDiminishingReturns:
    def test_no_decay_below_one_billion(self):
        assert procurement_scaling_factor(900_000_000) == 1.0
        assert risk_percent_factor(900_000_000) == 0.0002
        assert brand_value_rate(900_000_000, 0.001) == 0.001

    def test_one_decade_above_threshold(self):
        assert procurement_scaling_factor(10_000_000_000) == pytest.approx(0.9)
        assert risk_percent_factor(10_000_000_000) == pytest.approx(0.00018)
        assert brand_value_rate(10_000_000_000, 0.001) == pytest.approx(0.00095)

    def test_floors_hold_for_extreme_revenue(self):
        revenue = 10**30
        assert procurement_scaling_factor(revenue) == 0.5
        assert risk_percent_factor(revenue) == 0.00005
        assert brand_value_rate(revenue, 0.002) == pytest.approx(0.0006)

    def test_procurement_factor_non_increasing(self):
        values = [procurement_scaling_factor(r) for r in REVENUE_GRID]
        for lower_rev_value, higher_rev_value in zip(values, values[1:]):
            assert higher_rev_value <= lower_rev_value
