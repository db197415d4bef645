"""Core ROI calculation engine.

Takes a company profile + reference tables -> produces an ROIResult.
"""

from __future__ import annotations

import logging
from typing import Optional

from sustain_roi.engine.aggregator import aggregate
from sustain_roi.engine.benefits import calculate_yearly_benefit
from sustain_roi.engine.result import ROIResult, YearlyBenefit
from sustain_roi.engine.scaling import build_investment_schedule
from sustain_roi.models.profile import CompanyProfile
from sustain_roi.reference.loader import get_reference_data
from sustain_roi.reference.schema import PROJECTION_YEARS, ReferenceData

logger = logging.getLogger(__name__)


class ROICalculator:
    """Stateless engine that runs ROI evaluations against one set of reference tables."""

    def __init__(self, reference: Optional[ReferenceData] = None) -> None:
        self.reference = reference if reference is not None else get_reference_data()

    def calculate(self, profile: CompanyProfile) -> ROIResult:
        """Run the full 3-year evaluation for a single profile.

        Raises InvalidInputError or UnknownReferenceKeyError before any
        computation if the profile is not usable.
        """
        profile.validate()
        industry = self.reference.lookup_industry(profile.industry_code)
        maturity = self.reference.lookup_maturity(profile.maturity_code)

        logger.info(
            "Evaluating ROI: industry=%s maturity=%s revenue=%.0f",
            profile.industry_code,
            profile.maturity_code,
            profile.revenue,
        )

        investment = build_investment_schedule(
            profile.revenue, profile.custom_investment_year1
        )
        logger.debug("Investment schedule: %s", investment)

        if profile.procurement_spend_override is not None:
            procurement_spend = float(profile.procurement_spend_override)
        else:
            procurement_spend = profile.revenue * industry.procurement_percent
        supply_chain_emissions = procurement_spend * industry.emission_factor

        benefits: list[YearlyBenefit] = [
            calculate_yearly_benefit(
                year=year,
                industry=industry,
                maturity=maturity,
                revenue=profile.revenue,
                procurement_spend=procurement_spend,
                supply_chain_emissions=supply_chain_emissions,
                carbon_price=profile.carbon_price,
                reference=self.reference,
            )
            for year in range(1, PROJECTION_YEARS + 1)
        ]

        summary = aggregate(benefits, investment)

        return ROIResult(
            industry=industry,
            maturity=maturity,
            revenue=profile.revenue,
            procurement_spend=procurement_spend,
            supply_chain_emissions=supply_chain_emissions,
            benefits=tuple(benefits),
            service_investment=investment,
            total_investment=summary.total_investment,
            total_benefits=summary.total_benefits,
            net_benefits=summary.net_benefits,
            roi_ratio=summary.roi_ratio,
            payback_months=summary.payback.months,
            recovered_within_horizon=summary.payback.recovered,
            npv=summary.npv,
        )
