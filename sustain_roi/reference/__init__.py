from .loader import get_reference_data, load_reference_data
from .schema import IndustryProfile, MaturityProfile, ReferenceData

__all__ = [
    "get_reference_data",
    "load_reference_data",
    "IndustryProfile",
    "MaturityProfile",
    "ReferenceData",
]
