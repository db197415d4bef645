from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from sustain_roi.engine.errors import InvalidInputError


def _require_positive(field_name: str, value: Any) -> None:
    if value is None:
        raise InvalidInputError(f"{field_name} is required", field=field_name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(
            f"{field_name} must be a number, got {type(value).__name__}",
            field=field_name,
        )
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(
            f"{field_name} must be a positive number, got {value}", field=field_name
        )


@dataclass(frozen=True)
class CompanyProfile:
    """Inputs for a single ROI evaluation.

    Monetary values are plain currency units (not thousands or millions).
    ``supplier_count`` is informational and not used by any formula.
    """

    revenue: float
    industry_code: str
    maturity_code: str
    carbon_price: float
    supplier_count: Optional[int] = None
    procurement_spend_override: Optional[float] = None
    custom_investment_year1: Optional[float] = None

    def validate(self) -> None:
        """Raise InvalidInputError for the first missing or non-positive field."""
        if not self.industry_code:
            raise InvalidInputError("industry_code is required", field="industry_code")
        if not self.maturity_code:
            raise InvalidInputError("maturity_code is required", field="maturity_code")
        _require_positive("revenue", self.revenue)
        _require_positive("carbon_price", self.carbon_price)

        if self.supplier_count is not None:
            if isinstance(self.supplier_count, bool) or not isinstance(
                self.supplier_count, int
            ):
                raise InvalidInputError(
                    "supplier_count must be an integer", field="supplier_count"
                )
            if self.supplier_count <= 0:
                raise InvalidInputError(
                    f"supplier_count must be positive, got {self.supplier_count}",
                    field="supplier_count",
                )
        if self.procurement_spend_override is not None:
            _require_positive(
                "procurement_spend_override", self.procurement_spend_override
            )
        if self.custom_investment_year1 is not None:
            _require_positive("custom_investment_year1", self.custom_investment_year1)
