"""Revenue scaling curves for the investment schedule and benefit formulas.

Every curve is a continuous, piecewise function of revenue. Between tier
anchors the value is interpolated on a logarithmic scale, so each tier
boundary evaluates to the same value from both sides.
"""

from __future__ import annotations

import math

from sustain_roi.engine.errors import InvalidInputError
from sustain_roi.engine.result import InvestmentSchedule

BASE_INVESTMENT = 250_000.0
INVESTMENT_CEILING_MULTIPLE = 12.0

YEAR2_INVESTMENT_GROWTH = 1.10
YEAR3_INVESTMENT_GROWTH = 1.16

# (revenue, multiple of BASE_INVESTMENT) anchors, log-interpolated in between
INVESTMENT_TIERS: list[tuple[float, float]] = [
    (50_000_000, 1.0),
    (250_000_000, 2.0),
    (1_000_000_000, 3.5),
    (5_000_000_000, 6.0),
    (20_000_000_000, 9.0),
]
# Beyond the last anchor: +3.0x per decade until the ceiling
INVESTMENT_TAIL_SLOPE = 3.0

DIMINISHING_RETURNS_THRESHOLD = 1_000_000_000

RISK_SCALE_CEILING = 3.0
RISK_PERCENT_BASE = 0.0002
RISK_PERCENT_FLOOR = 0.00005

PROCUREMENT_DECAY_PER_DECADE = 0.1
PROCUREMENT_FLOOR = 0.5
RISK_PERCENT_DECAY_PER_DECADE = 0.1
BRAND_DECAY_PER_DECADE = 0.05
BRAND_FLOOR_FRACTION = 0.3


def _require_positive_revenue(revenue: float) -> None:
    if revenue is None or not math.isfinite(revenue) or revenue <= 0:
        raise InvalidInputError(
            f"revenue must be a positive number, got {revenue}", field="revenue"
        )


def investment_multiple(revenue: float) -> float:
    """Multiple of BASE_INVESTMENT for a given annual revenue.

    Flat 1.0x up to $50M, log-interpolated through the tier anchors up to
    9.0x at $20B, then +3.0x per decade, capped at 12.0x (reached at $200B).
    """
    _require_positive_revenue(revenue)

    first_revenue, first_multiple = INVESTMENT_TIERS[0]
    if revenue <= first_revenue:
        return first_multiple

    for (lo_rev, lo_mult), (hi_rev, hi_mult) in zip(
        INVESTMENT_TIERS, INVESTMENT_TIERS[1:]
    ):
        if revenue <= hi_rev:
            position = math.log(revenue / lo_rev) / math.log(hi_rev / lo_rev)
            return lo_mult + (hi_mult - lo_mult) * position

    last_revenue, last_multiple = INVESTMENT_TIERS[-1]
    tail = last_multiple + math.log10(revenue / last_revenue) * INVESTMENT_TAIL_SLOPE
    return min(INVESTMENT_CEILING_MULTIPLE, tail)


def scaled_investment(revenue: float) -> float:
    """Year-1 service investment derived from revenue."""
    return BASE_INVESTMENT * investment_multiple(revenue)


def build_investment_schedule(
    revenue: float,
    override_year1: float | None = None,
) -> InvestmentSchedule:
    """Build the 3-year investment schedule.

    An explicit year-1 override supersedes the scaling curve; years 2 and 3
    always grow from year 1 by 10% and 16%.
    """
    _require_positive_revenue(revenue)
    if override_year1 is not None:
        if not math.isfinite(override_year1) or override_year1 <= 0:
            raise InvalidInputError(
                f"custom_investment_year1 must be positive, got {override_year1}",
                field="custom_investment_year1",
            )
        year1 = float(override_year1)
    else:
        year1 = scaled_investment(revenue)

    return InvestmentSchedule(
        year1=year1,
        year2=year1 * YEAR2_INVESTMENT_GROWTH,
        year3=year1 * YEAR3_INVESTMENT_GROWTH,
    )


def _decades_above_threshold(revenue: float) -> float:
    if revenue <= DIMINISHING_RETURNS_THRESHOLD:
        return 0.0
    return math.log10(revenue / DIMINISHING_RETURNS_THRESHOLD)


def risk_revenue_scale(revenue: float) -> float:
    """Scale applied to the risk baseline; bounded above by RISK_SCALE_CEILING."""
    _require_positive_revenue(revenue)
    if revenue <= 100_000_000:
        return max(0.5, revenue / 100_000_000)
    if revenue <= 1_000_000_000:
        return 1.0 + math.log10(revenue / 100_000_000) * 0.75
    if revenue <= 10_000_000_000:
        return 1.75 + math.log10(revenue / 1_000_000_000) * 0.75
    return min(
        RISK_SCALE_CEILING, 2.5 + math.log10(revenue / 10_000_000_000) * 0.5
    )


def risk_percent_factor(revenue: float) -> float:
    """Fraction of revenue counted towards the revenue-based risk component."""
    _require_positive_revenue(revenue)
    decayed = RISK_PERCENT_BASE * (
        1.0 - _decades_above_threshold(revenue) * RISK_PERCENT_DECAY_PER_DECADE
    )
    return max(RISK_PERCENT_FLOOR, decayed)


def procurement_scaling_factor(revenue: float) -> float:
    """Diminishing-returns factor for procurement savings, floored at 0.5."""
    _require_positive_revenue(revenue)
    decayed = 1.0 - _decades_above_threshold(revenue) * PROCUREMENT_DECAY_PER_DECADE
    return max(PROCUREMENT_FLOOR, decayed)


def brand_value_rate(revenue: float, nominal_rate: float) -> float:
    """Effective brand uplift rate, floored at 30% of the nominal rate."""
    _require_positive_revenue(revenue)
    decayed = nominal_rate * (
        1.0 - _decades_above_threshold(revenue) * BRAND_DECAY_PER_DECADE
    )
    return max(nominal_rate * BRAND_FLOOR_FRACTION, decayed)
