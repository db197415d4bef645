"""Procurement-team view of an ROI result.

Re-aggregates the procurement savings stream into budget enhancement and
productivity gains for the procurement department. No new core formulas.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Optional

from sustain_roi.engine.aggregator import safe_ratio
from sustain_roi.engine.errors import InvalidInputError
from sustain_roi.engine.result import ROIResult

DEFAULT_BUDGET_PERCENT = 0.015
DEFAULT_ALLOCATION_PERCENT = 0.15
DEFAULT_HOURLY_RATE = 75.0
HOURS_SAVED_PER_STAFF_PER_MONTH = 5
PRODUCTIVITY_RAMP = (1.0, 1.2, 1.3)
YEARLY_FIELDS = (
    "direct_savings",
    "budget_enhancement",
    "productivity_savings",
    "total_benefits",
    "investment",
)


@dataclass(frozen=True)
class ProcurementParameters:
    """Optional overrides; None means use the default estimate."""

    team_size: Optional[int] = None
    budget_percent: Optional[float] = None
    allocation_percent: Optional[float] = None
    hourly_rate: Optional[float] = None

    def validate(self) -> None:
        if self.team_size is not None and (
            isinstance(self.team_size, bool)
            or not isinstance(self.team_size, int)
            or self.team_size <= 0
        ):
            raise InvalidInputError(
                f"team_size must be a positive integer, got {self.team_size}",
                field="team_size",
            )
        if self.budget_percent is not None and not (0 < self.budget_percent <= 1.0):
            raise InvalidInputError(
                f"budget_percent must be 0-1.0 (exclusive of 0), got {self.budget_percent}",
                field="budget_percent",
            )
        if self.allocation_percent is not None and not (
            0 <= self.allocation_percent <= 1.0
        ):
            raise InvalidInputError(
                f"allocation_percent must be 0-1.0, got {self.allocation_percent}",
                field="allocation_percent",
            )
        if self.hourly_rate is not None and (
            not math.isfinite(self.hourly_rate) or self.hourly_rate <= 0
        ):
            raise InvalidInputError(
                f"hourly_rate must be positive, got {self.hourly_rate}",
                field="hourly_rate",
            )


@dataclass(frozen=True)
class YearlyAmounts:
    year1: float
    year2: float
    year3: float

    @property
    def total(self) -> float:
        return self.year1 + self.year2 + self.year3

    def scaled(self, factor: float) -> YearlyAmounts:
        return YearlyAmounts(self.year1 * factor, self.year2 * factor, self.year3 * factor)

    def plus(self, other: YearlyAmounts) -> YearlyAmounts:
        return YearlyAmounts(
            self.year1 + other.year1,
            self.year2 + other.year2,
            self.year3 + other.year3,
        )


@dataclass(frozen=True)
class ProcurementROI:
    team_size: int
    procurement_budget: float
    budget_percent: float
    allocation_percent: float
    hourly_rate: float
    direct_savings: YearlyAmounts
    budget_enhancement: YearlyAmounts
    productivity_savings: YearlyAmounts
    total_benefits: YearlyAmounts
    investment: YearlyAmounts
    procurement_roi_ratio: float
    budget_impact_percent: float

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        for name in YEARLY_FIELDS:
            payload[name]["total"] = getattr(self, name).total
        return payload


def estimate_procurement_team_size(revenue: float) -> int:
    """Estimate procurement headcount from revenue.

    Roughly one professional per $50M for small companies, thinning out to
    one per $500M above $5B.
    """
    if not math.isfinite(revenue) or revenue <= 0:
        raise InvalidInputError(
            f"revenue must be a positive number, got {revenue}", field="revenue"
        )
    millions = revenue / 1_000_000
    if millions <= 100:
        return max(1, math.ceil(millions / 50))
    if millions <= 500:
        return math.ceil(2 + (millions - 100) / 100)
    if millions <= 5000:
        return math.ceil(6 + (millions - 500) / 250)
    return math.ceil(24 + (millions - 5000) / 500)


def calculate_procurement_roi(
    result: ROIResult,
    params: ProcurementParameters = ProcurementParameters(),
) -> ProcurementROI:
    """Derive the procurement-department view from a completed evaluation."""
    params.validate()

    team_size = (
        params.team_size
        if params.team_size is not None
        else estimate_procurement_team_size(result.revenue)
    )
    budget_percent = (
        params.budget_percent
        if params.budget_percent is not None
        else DEFAULT_BUDGET_PERCENT
    )
    allocation_percent = (
        params.allocation_percent
        if params.allocation_percent is not None
        else DEFAULT_ALLOCATION_PERCENT
    )
    hourly_rate = (
        params.hourly_rate if params.hourly_rate is not None else DEFAULT_HOURLY_RATE
    )

    procurement_budget = result.procurement_spend * budget_percent

    direct_savings = YearlyAmounts(*(b.procurement_savings for b in result.benefits))
    budget_enhancement = direct_savings.scaled(allocation_percent)

    annual_productivity = (
        team_size * HOURS_SAVED_PER_STAFF_PER_MONTH * 12 * hourly_rate
    )
    productivity_savings = YearlyAmounts(
        *(annual_productivity * ramp for ramp in PRODUCTIVITY_RAMP)
    )

    total_benefits = budget_enhancement.plus(productivity_savings)
    schedule = result.service_investment
    investment = YearlyAmounts(schedule.year1, schedule.year2, schedule.year3)

    return ProcurementROI(
        team_size=team_size,
        procurement_budget=procurement_budget,
        budget_percent=budget_percent,
        allocation_percent=allocation_percent,
        hourly_rate=hourly_rate,
        direct_savings=direct_savings,
        budget_enhancement=budget_enhancement,
        productivity_savings=productivity_savings,
        total_benefits=total_benefits,
        investment=investment,
        procurement_roi_ratio=safe_ratio(
            total_benefits.total, investment.total, label="procurement ROI ratio"
        ),
        budget_impact_percent=safe_ratio(
            budget_enhancement.total,
            procurement_budget * 3,
            label="budget impact percent",
        )
        * 100,
    )
