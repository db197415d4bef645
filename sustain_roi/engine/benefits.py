"""Per-year benefit composition.

Four benefit categories are computed independently and summed:

- procurement savings from supplier engagement
- carbon value from reduced supply chain emissions
- risk mitigation (a baseline component plus a revenue-based component)
- brand value uplift
"""

from __future__ import annotations

from sustain_roi.engine.errors import InvalidInputError
from sustain_roi.engine.result import YearlyBenefit
from sustain_roi.engine.scaling import (
    brand_value_rate,
    procurement_scaling_factor,
    risk_percent_factor,
    risk_revenue_scale,
)
from sustain_roi.models.enums import RiskLevel
from sustain_roi.reference.schema import (
    PROJECTION_YEARS,
    IndustryProfile,
    MaturityProfile,
    ReferenceData,
)

ANNUAL_BENEFIT_GROWTH = 1.03
KG_PER_TONNE = 1000.0

RISK_LEVEL_WEIGHTS: dict[RiskLevel, float] = {
    RiskLevel.HIGH: 1.0,
    RiskLevel.MEDIUM: 0.6,
    RiskLevel.LOW: 0.3,
}


def growth_multiplier(year: int) -> float:
    """Benefit growth of 3% per year after year 1."""
    return ANNUAL_BENEFIT_GROWTH ** (year - 1)


def calc_procurement_savings(
    procurement_spend: float,
    industry: IndustryProfile,
    maturity: MaturityProfile,
    revenue: float,
    growth: float,
) -> float:
    """Savings = spend x avg_savings_% x scaling x maturity x growth"""
    return (
        procurement_spend
        * industry.average_savings_percent
        * procurement_scaling_factor(revenue)
        * maturity.savings_multiplier
        * growth
    )


def calc_carbon_value_impact(
    supply_chain_emissions: float,
    carbon_price: float,
    reduction_percent: float,
) -> float:
    """Carbon value = (emissions_kg / 1000) x carbon_price x reduction_%"""
    emissions_tonnes = supply_chain_emissions / KG_PER_TONNE
    return emissions_tonnes * carbon_price * reduction_percent


def calc_risk_mitigation_value(
    industry: IndustryProfile,
    maturity: MaturityProfile,
    revenue: float,
    baseline: float,
    growth: float,
) -> float:
    """Baseline component plus a revenue-based component, both damped by maturity."""
    multiplier = maturity.risk_reduction_multiplier * growth
    baseline_component = baseline * risk_revenue_scale(revenue) * multiplier
    revenue_component = (
        revenue
        * risk_percent_factor(revenue)
        * RISK_LEVEL_WEIGHTS[industry.risk_level]
        * multiplier
    )
    return baseline_component + revenue_component


def calc_brand_value_impact(revenue: float, nominal_rate: float) -> float:
    return revenue * brand_value_rate(revenue, nominal_rate)


def calculate_yearly_benefit(
    year: int,
    industry: IndustryProfile,
    maturity: MaturityProfile,
    revenue: float,
    procurement_spend: float,
    supply_chain_emissions: float,
    carbon_price: float,
    reference: ReferenceData,
) -> YearlyBenefit:
    """Compute all four benefit categories for a projection year (1-3)."""
    if year not in range(1, PROJECTION_YEARS + 1):
        raise InvalidInputError(
            f"year must be between 1 and {PROJECTION_YEARS}, got {year}", field="year"
        )

    growth = growth_multiplier(year)

    procurement_savings = calc_procurement_savings(
        procurement_spend, industry, maturity, revenue, growth
    )
    carbon_value_impact = calc_carbon_value_impact(
        supply_chain_emissions,
        carbon_price,
        reference.carbon_reduction_for_year(year),
    )
    risk_mitigation_value = calc_risk_mitigation_value(
        industry,
        maturity,
        revenue,
        reference.risk_baseline_for(industry.risk_level),
        growth,
    )
    brand_value_impact = calc_brand_value_impact(
        revenue, reference.brand_value_increase_for_year(year)
    )

    return YearlyBenefit(
        year=year,
        procurement_savings=procurement_savings,
        carbon_value_impact=carbon_value_impact,
        risk_mitigation_value=risk_mitigation_value,
        brand_value_impact=brand_value_impact,
        total=(
            procurement_savings
            + carbon_value_impact
            + risk_mitigation_value
            + brand_value_impact
        ),
    )
