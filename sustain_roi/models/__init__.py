from .enums import BenefitCategory, BusinessCaseTier, RiskLevel
from .profile import CompanyProfile

__all__ = ["BenefitCategory", "BusinessCaseTier", "RiskLevel", "CompanyProfile"]
