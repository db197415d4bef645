"""Shared test fixtures for the sustainability ROI test suite."""

import pytest

from sustain_roi.engine.calculator import ROICalculator
from sustain_roi.models.profile import CompanyProfile
from sustain_roi.reference.loader import load_reference_data


def make_profile(**overrides) -> CompanyProfile:
    """Helper to create a CompanyProfile with minimal boilerplate."""
    values = dict(
        revenue=50_000_000,
        industry_code="sector11",
        maturity_code="beginning",
        carbon_price=50,
    )
    values.update(overrides)
    return CompanyProfile(**values)


@pytest.fixture
def reference():
    return load_reference_data()


@pytest.fixture
def calculator(reference):
    return ROICalculator(reference)


@pytest.fixture
def agriculture_50m() -> CompanyProfile:
    """$50M agriculture company at the beginning maturity stage.

    procurement 60%, emission factor 1.12, savings 1.5%, high risk.
    """
    return make_profile()


@pytest.fixture
def information_5b() -> CompanyProfile:
    """$5B information-sector company, medium risk, established program."""
    return make_profile(
        revenue=5_000_000_000,
        industry_code="sector51",
        maturity_code="established",
        carbon_price=80,
        supplier_count=1200,
    )
