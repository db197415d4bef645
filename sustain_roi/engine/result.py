"""Immutable result data structures for an ROI evaluation."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from sustain_roi.models.enums import BenefitCategory
from sustain_roi.reference.schema import IndustryProfile, MaturityProfile


@dataclass(frozen=True)
class InvestmentSchedule:
    """Service investment for years 1-3."""

    year1: float
    year2: float
    year3: float

    @property
    def total(self) -> float:
        return self.year1 + self.year2 + self.year3

    def for_year(self, year: int) -> float:
        return (self.year1, self.year2, self.year3)[year - 1]


@dataclass(frozen=True)
class YearlyBenefit:
    """Projected benefit for one year, broken down by category."""

    year: int
    procurement_savings: float
    carbon_value_impact: float
    risk_mitigation_value: float
    brand_value_impact: float
    total: float

    def by_category(self) -> dict[BenefitCategory, float]:
        return {
            BenefitCategory.PROCUREMENT_SAVINGS: self.procurement_savings,
            BenefitCategory.CARBON_VALUE: self.carbon_value_impact,
            BenefitCategory.RISK_MITIGATION: self.risk_mitigation_value,
            BenefitCategory.BRAND_VALUE: self.brand_value_impact,
        }


@dataclass(frozen=True)
class PaybackResult:
    """Payback month within the 36-month horizon.

    ``months`` saturates at 36; ``recovered`` tells a true month-36 payback
    apart from an investment that is never recovered.
    """

    months: int
    recovered: bool


@dataclass(frozen=True)
class ROIResult:
    """Top-level result object for a complete ROI evaluation."""

    industry: IndustryProfile
    maturity: MaturityProfile
    revenue: float
    procurement_spend: float
    supply_chain_emissions: float  # kg CO2e
    benefits: tuple[YearlyBenefit, ...]
    service_investment: InvestmentSchedule
    total_investment: float
    total_benefits: float
    net_benefits: float
    roi_ratio: float
    payback_months: int
    recovered_within_horizon: bool
    npv: float

    @property
    def supply_chain_emissions_tonnes(self) -> float:
        return self.supply_chain_emissions / 1000

    def benefit_for_year(self, year: int) -> YearlyBenefit:
        return self.benefits[year - 1]

    def benefits_by_category(self) -> dict[BenefitCategory, float]:
        """3-year totals per benefit category."""
        totals: dict[BenefitCategory, float] = {c: 0.0 for c in BenefitCategory}
        for benefit in self.benefits:
            for category, value in benefit.by_category().items():
                totals[category] += value
        return totals

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation for presentation collaborators."""
        return {
            "industry": self.industry.model_dump(mode="json"),
            "maturity": self.maturity.model_dump(mode="json"),
            "revenue": self.revenue,
            "procurement_spend": self.procurement_spend,
            "supply_chain_emissions": self.supply_chain_emissions,
            "benefits": [asdict(b) for b in self.benefits],
            "benefits_by_category": {
                c.value: v for c, v in self.benefits_by_category().items()
            },
            "service_investment": asdict(self.service_investment),
            "total_investment": self.total_investment,
            "total_benefits": self.total_benefits,
            "net_benefits": self.net_benefits,
            "roi_ratio": self.roi_ratio,
            "payback_months": self.payback_months,
            "recovered_within_horizon": self.recovered_within_horizon,
            "npv": self.npv,
        }
