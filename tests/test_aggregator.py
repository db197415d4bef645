"""Unit tests for NPV, ROI ratio and the payback search."""

import pytest

from sustain_roi.engine.aggregator import (
    aggregate,
    net_present_value,
    payback_period,
    roi_ratio,
)
from sustain_roi.engine.errors import DivisionByZeroError
from sustain_roi.engine.result import InvestmentSchedule, YearlyBenefit


def _benefit(year, total):
    return YearlyBenefit(
        year=year,
        procurement_savings=total,
        carbon_value_impact=0.0,
        risk_mitigation_value=0.0,
        brand_value_impact=0.0,
        total=total,
    )


def _benefits(*totals):
    return [_benefit(i + 1, t) for i, t in enumerate(totals)]


def _schedule(year1):
    return InvestmentSchedule(year1=year1, year2=year1 * 1.10, year3=year1 * 1.16)


class TestRoiRatio:
    def test_basic(self):
        assert roi_ratio(3_000_000, 1_000_000) == pytest.approx(3.0)

    def test_zero_investment_raises(self):
        with pytest.raises(DivisionByZeroError):
            roi_ratio(3_000_000, 0)


class TestNetPresentValue:
    def test_discounts_each_year(self):
        schedule = InvestmentSchedule(year1=100, year2=100, year3=100)
        npv = net_present_value(_benefits(210, 221, 233.1), schedule)
        expected = 110 / 1.1 + 121 / 1.21 + 133.1 / 1.331
        assert npv == pytest.approx(expected)
        assert npv == pytest.approx(300)

    def test_custom_rate(self):
        schedule = InvestmentSchedule(year1=0, year2=0, year3=0)
        npv = net_present_value(_benefits(100, 0, 0), schedule, discount_rate=0.0)
        assert npv == pytest.approx(100)


class TestPaybackPeriod:
    def test_first_month_when_benefit_covers_investment(self):
        result = payback_period(_benefits(1_200_000, 0, 0), _schedule(100_000))
        assert result.months == 1
        assert result.recovered is True

    def test_exact_break_even_counts(self):
        # 120,000/12 = 10,000 per month; 50,000 recovered exactly at month 5
        result = payback_period(_benefits(120_000, 0, 0), _schedule(50_000))
        assert result.months == 5
        assert result.recovered is True

    def test_uses_year_two_benefits_after_month_twelve(self):
        # Year 1 recovers 12,000, year 2 adds 24,000/12 = 2,000 per month
        result = payback_period(_benefits(12_000, 24_000, 0), _schedule(20_000))
        assert result.months == 16
        assert result.recovered is True

    def test_recovery_at_month_thirty_six(self):
        result = payback_period(_benefits(12_000, 12_000, 12_000), _schedule(36_000))
        assert result.months == 36
        assert result.recovered is True

    def test_never_recovered_saturates(self):
        result = payback_period(_benefits(1_000, 1_000, 1_000), _schedule(1_000_000))
        assert result.months == 36
        assert result.recovered is False


class TestAggregate:
    def test_totals_and_net(self):
        summary = aggregate(_benefits(500, 600, 700), _schedule(100))
        assert summary.total_benefits == pytest.approx(1_800)
        assert summary.total_investment == pytest.approx(326)
        assert summary.net_benefits == pytest.approx(1_474)
        assert summary.roi_ratio == pytest.approx(1_800 / 326)

    def test_zero_investment_raises(self):
        with pytest.raises(DivisionByZeroError):
            aggregate(_benefits(500, 600, 700), _schedule(0))
