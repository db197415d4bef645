"""Financial aggregation: totals, ROI ratio, NPV and payback."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from sustain_roi.engine.errors import DivisionByZeroError
from sustain_roi.engine.result import InvestmentSchedule, PaybackResult, YearlyBenefit

DISCOUNT_RATE = 0.10
MONTHS_PER_YEAR = 12
PAYBACK_HORIZON_MONTHS = 36


@dataclass(frozen=True)
class FinancialSummary:
    total_investment: float
    total_benefits: float
    net_benefits: float
    roi_ratio: float
    npv: float
    payback: PaybackResult


def safe_ratio(numerator: float, denominator: float, label: str = "ratio") -> float:
    """Divide, raising DivisionByZeroError instead of producing inf/NaN."""
    if denominator == 0:
        raise DivisionByZeroError(f"Cannot compute {label}: denominator is zero")
    return numerator / denominator


def roi_ratio(total_benefits: float, total_investment: float) -> float:
    """ROI = total_benefits / total_investment"""
    return safe_ratio(total_benefits, total_investment, label="ROI ratio")


def net_present_value(
    benefits: Sequence[YearlyBenefit],
    investment: InvestmentSchedule,
    discount_rate: float = DISCOUNT_RATE,
) -> float:
    """NPV = sum((benefit_y - investment_y) / (1 + rate)^y) for y = 1..3"""
    npv = 0.0
    for year, benefit in enumerate(benefits, start=1):
        net_cash_flow = benefit.total - investment.for_year(year)
        npv += net_cash_flow / (1 + discount_rate) ** year
    return npv


def payback_period(
    benefits: Sequence[YearlyBenefit],
    investment: InvestmentSchedule,
) -> PaybackResult:
    """Simulate monthly cash flow and return the first month it turns non-negative.

    Cumulative flow starts at minus the year-1 investment; each month adds
    one twelfth of that year's total benefit.
    """
    cumulative = -investment.year1
    for month in range(1, PAYBACK_HORIZON_MONTHS + 1):
        year_index = (month - 1) // MONTHS_PER_YEAR
        cumulative += benefits[year_index].total / MONTHS_PER_YEAR
        if cumulative >= 0:
            return PaybackResult(months=month, recovered=True)
    return PaybackResult(months=PAYBACK_HORIZON_MONTHS, recovered=False)


def aggregate(
    benefits: Sequence[YearlyBenefit],
    investment: InvestmentSchedule,
) -> FinancialSummary:
    """Fold yearly benefits and the investment schedule into headline figures."""
    total_investment = investment.total
    total_benefits = sum(b.total for b in benefits)
    return FinancialSummary(
        total_investment=total_investment,
        total_benefits=total_benefits,
        net_benefits=total_benefits - total_investment,
        roi_ratio=roi_ratio(total_benefits, total_investment),
        npv=net_present_value(benefits, investment),
        payback=payback_period(benefits, investment),
    )
