"""Business-case assessment derived from an ROI result."""

from __future__ import annotations

from dataclasses import dataclass

from sustain_roi.engine.result import ROIResult
from sustain_roi.models.enums import BenefitCategory, BusinessCaseTier

_CATEGORY_LABELS: dict[BenefitCategory, str] = {
    BenefitCategory.PROCUREMENT_SAVINGS: "procurement cost savings",
    BenefitCategory.CARBON_VALUE: "carbon value impact",
    BenefitCategory.RISK_MITIGATION: "risk mitigation",
    BenefitCategory.BRAND_VALUE: "brand value",
}

# (minimum ROI ratio, tier), checked top-down
_TIER_THRESHOLDS: list[tuple[float, BusinessCaseTier]] = [
    (3.0, BusinessCaseTier.STRONG),
    (2.0, BusinessCaseTier.POSITIVE),
    (1.0, BusinessCaseTier.MODERATE),
]

_SUMMARIES: dict[BusinessCaseTier, str] = {
    BusinessCaseTier.STRONG: (
        "With an ROI of {roi:.2f}x the financial benefits significantly outweigh "
        "the investment. Consider a comprehensive implementation with emphasis "
        "on {area}."
    ),
    BusinessCaseTier.POSITIVE: (
        "With an ROI of {roi:.2f}x the service delivers solid value. Focus initial "
        "efforts on {area} and phase the rollout to maximize early returns."
    ),
    BusinessCaseTier.MODERATE: (
        "With an ROI of {roi:.2f}x returns are positive but need careful planning. "
        "Start with targeted initiatives in {area} to build momentum."
    ),
    BusinessCaseTier.LIMITED: (
        "With an ROI of {roi:.2f}x the current parameters do not recover the "
        "investment. Focus on {area} or reassess as program maturity grows."
    ),
}


@dataclass(frozen=True)
class BusinessCaseAssessment:
    tier: BusinessCaseTier
    roi_ratio: float
    top_area: BenefitCategory
    summary: str


def top_benefit_area(result: ROIResult) -> BenefitCategory:
    """Largest benefit category in year 1 (first category wins ties)."""
    year1 = result.benefit_for_year(1).by_category()
    return max(year1, key=lambda category: year1[category])


def classify_roi(roi_ratio: float) -> BusinessCaseTier:
    for threshold, tier in _TIER_THRESHOLDS:
        if roi_ratio >= threshold:
            return tier
    return BusinessCaseTier.LIMITED


def assess_business_case(result: ROIResult) -> BusinessCaseAssessment:
    tier = classify_roi(result.roi_ratio)
    area = top_benefit_area(result)
    return BusinessCaseAssessment(
        tier=tier,
        roi_ratio=result.roi_ratio,
        top_area=area,
        summary=_SUMMARIES[tier].format(
            roi=result.roi_ratio, area=_CATEGORY_LABELS[area]
        ),
    )
