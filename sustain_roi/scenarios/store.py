"""ScenarioStore: named company profiles held by the caller for one session."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from sustain_roi.engine.calculator import ROICalculator
from sustain_roi.engine.errors import InvalidInputError
from sustain_roi.engine.result import ROIResult
from sustain_roi.models.profile import CompanyProfile
from sustain_roi.reference.schema import ReferenceData


class ScenarioNotFoundError(KeyError):
    def __init__(self, scenario_id: str) -> None:
        super().__init__(f"Scenario not found: {scenario_id}")
        self.scenario_id = scenario_id

    def __str__(self) -> str:
        return self.args[0]


@dataclass(frozen=True)
class SavedScenario:
    id: str
    name: str
    profile: CompanyProfile
    created_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))


def format_compact_currency(amount: float) -> str:
    """$50M, $1.2B style labels."""
    for divisor, suffix in ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K")):
        if abs(amount) >= divisor:
            return f"${amount / divisor:.1f}".rstrip("0").rstrip(".") + suffix
    return f"${amount:.0f}"


class ScenarioStore:
    """In-memory map of scenario id -> SavedScenario.

    Each instance is independent; nothing is shared at module level.
    """

    def __init__(self, reference: ReferenceData) -> None:
        self._reference = reference
        self._scenarios: dict[str, SavedScenario] = {}

    def __len__(self) -> int:
        return len(self._scenarios)

    def default_name(self, profile: CompanyProfile) -> str:
        industry = self._reference.lookup_industry(profile.industry_code)
        return f"{industry.name} - {format_compact_currency(profile.revenue)} Revenue"

    def create(self, profile: CompanyProfile, name: Optional[str] = None) -> SavedScenario:
        """Validate and store a profile under a fresh id."""
        profile.validate()
        self._reference.lookup_industry(profile.industry_code)
        self._reference.lookup_maturity(profile.maturity_code)

        if name is None:
            name = self.default_name(profile)
        elif not name.strip():
            raise InvalidInputError("scenario name cannot be blank", field="name")

        scenario = SavedScenario(id=str(uuid4()), name=name.strip(), profile=profile)
        self._scenarios[scenario.id] = scenario
        return scenario

    def list(self) -> list[SavedScenario]:
        return list(self._scenarios.values())

    def get(self, scenario_id: str) -> SavedScenario:
        scenario = self._scenarios.get(scenario_id)
        if scenario is None:
            raise ScenarioNotFoundError(scenario_id)
        return scenario

    def delete(self, scenario_id: str) -> SavedScenario:
        if scenario_id not in self._scenarios:
            raise ScenarioNotFoundError(scenario_id)
        return self._scenarios.pop(scenario_id)

    def evaluate(self, scenario_id: str, calculator: ROICalculator) -> ROIResult:
        return calculator.calculate(self.get(scenario_id).profile)
