"""Pydantic models for the static reference tables."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sustain_roi.engine.errors import UnknownReferenceKeyError
from sustain_roi.models.enums import RiskLevel

PROJECTION_YEARS = 3


class IndustryProfile(BaseModel):
    """Procurement and emissions parameters for one industry sector."""

    model_config = ConfigDict(frozen=True)

    name: str
    procurement_percent: float = Field(
        gt=0, le=1.0, description="Fraction of revenue spent on procurement"
    )
    emission_factor: float = Field(
        gt=0, description="kg CO2e per currency unit of procurement spend"
    )
    average_savings_percent: float = Field(gt=0, le=1.0)
    risk_level: RiskLevel


class MaturityProfile(BaseModel):
    """Multipliers for a sustainability program maturity stage."""

    model_config = ConfigDict(frozen=True)

    description: str = ""
    savings_multiplier: float = Field(gt=0, le=1.0)
    risk_reduction_multiplier: float = Field(gt=0, le=1.0)


class ReferenceData(BaseModel):
    """Top-level reference data: industry and maturity tables plus constants."""

    model_config = ConfigDict(frozen=True)

    version: str
    source: str = ""
    industries: dict[str, IndustryProfile] = Field(min_length=1)
    maturity_levels: dict[str, MaturityProfile] = Field(min_length=1)
    risk_baseline: dict[RiskLevel, float]
    carbon_reduction_by_year: list[float] = Field(
        description="Fraction of supply chain emissions reduced in years 1-3",
    )
    brand_value_increase_by_year: list[float] = Field(
        description="Brand value uplift as a fraction of revenue in years 1-3",
    )
    default_service_investment: list[float] = Field(
        default_factory=lambda: [250_000.0, 275_000.0, 290_000.0],
    )

    @field_validator(
        "carbon_reduction_by_year",
        "brand_value_increase_by_year",
        "default_service_investment",
    )
    @classmethod
    def three_year_schedule(cls, v: list[float]) -> list[float]:
        if len(v) != PROJECTION_YEARS:
            raise ValueError(
                f"schedule must cover exactly {PROJECTION_YEARS} years, got {len(v)}"
            )
        for i, value in enumerate(v):
            if value < 0:
                raise ValueError(f"year {i + 1} value must be non-negative, got {value}")
        return v

    @field_validator("risk_baseline")
    @classmethod
    def baseline_values_positive(cls, v: dict[RiskLevel, float]) -> dict[RiskLevel, float]:
        for level, value in v.items():
            if value <= 0:
                raise ValueError(f"risk_baseline[{level.value}] must be positive")
        return v

    @model_validator(mode="after")
    def every_risk_level_has_baseline(self) -> ReferenceData:
        missing = {level for level in RiskLevel} - set(self.risk_baseline)
        if missing:
            raise ValueError(
                f"risk_baseline is missing levels: {sorted(m.value for m in missing)}"
            )
        return self

    def lookup_industry(self, industry_code: str) -> IndustryProfile:
        try:
            return self.industries[industry_code]
        except KeyError:
            raise UnknownReferenceKeyError("industry", industry_code) from None

    def lookup_maturity(self, maturity_code: str) -> MaturityProfile:
        try:
            return self.maturity_levels[maturity_code]
        except KeyError:
            raise UnknownReferenceKeyError("maturity", maturity_code) from None

    def risk_baseline_for(self, risk_level: RiskLevel) -> float:
        return self.risk_baseline[risk_level]

    def carbon_reduction_for_year(self, year: int) -> float:
        return self.carbon_reduction_by_year[year - 1]

    def brand_value_increase_for_year(self, year: int) -> float:
        return self.brand_value_increase_by_year[year - 1]
