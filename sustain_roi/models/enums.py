from enum import Enum


class RiskLevel(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class BenefitCategory(str, Enum):
    PROCUREMENT_SAVINGS = "procurement_savings"
    CARBON_VALUE = "carbon_value_impact"
    RISK_MITIGATION = "risk_mitigation_value"
    BRAND_VALUE = "brand_value_impact"


class BusinessCaseTier(str, Enum):
    STRONG = "strong"
    POSITIVE = "positive"
    MODERATE = "moderate"
    LIMITED = "limited"
