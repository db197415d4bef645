"""Error types raised by the ROI model.

Every error is reported synchronously to the caller; the model never returns
a partial result.
"""

from __future__ import annotations

from typing import Optional


class ROIModelError(Exception):
    """Base class for all ROI model errors."""

    kind = "roi_model_error"


class InvalidInputError(ROIModelError, ValueError):
    """A required field is missing or a numeric input is out of range."""

    kind = "invalid_input"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class UnknownReferenceKeyError(ROIModelError, KeyError):
    """An industry or maturity code has no entry in the reference tables."""

    kind = "unknown_reference_key"

    def __init__(self, table: str, key: str) -> None:
        super().__init__(f"Unknown {table} code: '{key}'")
        self.table = table
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class DivisionByZeroError(ROIModelError, ZeroDivisionError):
    """A ratio was requested against a zero denominator."""

    kind = "division_by_zero"
