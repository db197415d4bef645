"""FastAPI application for the sustainability ROI model: REST endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from sustain_roi.config.settings import get_settings
from sustain_roi.engine.calculator import ROICalculator
from sustain_roi.engine.errors import (
    DivisionByZeroError,
    InvalidInputError,
    ROIModelError,
    UnknownReferenceKeyError,
)
from sustain_roi.engine.insights import assess_business_case
from sustain_roi.engine.procurement import (
    ProcurementParameters,
    calculate_procurement_roi,
)
from sustain_roi.hooks.audit_hooks import log_evaluation
from sustain_roi.models.profile import CompanyProfile
from sustain_roi.reference.loader import get_reference_data
from sustain_roi.scenarios.store import (
    SavedScenario,
    ScenarioNotFoundError,
    ScenarioStore,
)

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Sustainability ROI API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

calculator = ROICalculator(get_reference_data())

# Session-scoped scenario store (not persisted)
scenario_store = ScenarioStore(calculator.reference)

_ERROR_STATUS: dict[type[ROIModelError], int] = {
    InvalidInputError: 422,
    UnknownReferenceKeyError: 404,
    DivisionByZeroError: 422,
}


class ProfileRequest(BaseModel):
    industry_code: str
    maturity_code: str
    revenue: float = Field(gt=0, description="Annual revenue in currency units")
    carbon_price: Optional[float] = Field(
        default=None, gt=0, description="Currency per metric ton CO2e"
    )
    supplier_count: Optional[int] = Field(default=None, gt=0)
    procurement_spend: Optional[float] = Field(default=None, gt=0)
    custom_investment_year1: Optional[float] = Field(default=None, gt=0)

    def to_profile(self) -> CompanyProfile:
        return CompanyProfile(
            revenue=self.revenue,
            industry_code=self.industry_code,
            maturity_code=self.maturity_code,
            carbon_price=(
                self.carbon_price
                if self.carbon_price is not None
                else settings.default_carbon_price
            ),
            supplier_count=self.supplier_count,
            procurement_spend_override=self.procurement_spend,
            custom_investment_year1=self.custom_investment_year1,
        )


class ProcurementRequest(ProfileRequest):
    team_size: Optional[int] = Field(default=None, gt=0)
    budget_percent: Optional[float] = Field(default=None, gt=0, le=1.0)
    allocation_percent: Optional[float] = Field(default=None, ge=0, le=1.0)
    hourly_rate: Optional[float] = Field(default=None, gt=0)

    def to_parameters(self) -> ProcurementParameters:
        return ProcurementParameters(
            team_size=self.team_size,
            budget_percent=self.budget_percent,
            allocation_percent=self.allocation_percent,
            hourly_rate=self.hourly_rate,
        )


class CreateScenarioRequest(BaseModel):
    name: Optional[str] = None
    profile: ProfileRequest


def _scenario_payload(scenario: SavedScenario) -> dict[str, Any]:
    return {
        "id": scenario.id,
        "name": scenario.name,
        "profile": asdict(scenario.profile),
        "created_at": scenario.created_at.isoformat(),
    }


def _evaluation_payload(
    profile: CompanyProfile, scenario_id: Optional[str] = None
) -> dict[str, Any]:
    result = calculator.calculate(profile)
    log_evaluation(profile, result, scenario_id=scenario_id)
    assessment = assess_business_case(result)
    return {
        "result": result.to_dict(),
        "assessment": {
            "tier": assessment.tier.value,
            "top_area": assessment.top_area.value,
            "summary": assessment.summary,
        },
    }


@app.exception_handler(ROIModelError)
async def roi_model_error_handler(request: Request, exc: ROIModelError):
    status = _ERROR_STATUS.get(type(exc), 400)
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status, content={"error": exc.kind, "detail": str(exc)})


@app.exception_handler(ScenarioNotFoundError)
async def scenario_not_found_handler(request: Request, exc: ScenarioNotFoundError):
    return JSONResponse(
        status_code=404, content={"error": "scenario_not_found", "detail": str(exc)}
    )


@app.post("/api/roi")
async def evaluate_roi(body: ProfileRequest):
    """Evaluate a single company profile."""
    return _evaluation_payload(body.to_profile())


@app.post("/api/roi/procurement")
async def evaluate_procurement_roi(body: ProcurementRequest):
    """Procurement-department view of an evaluation."""
    result = calculator.calculate(body.to_profile())
    return calculate_procurement_roi(result, body.to_parameters()).to_dict()


@app.get("/api/reference/industries")
async def list_industries():
    return {
        code: profile.model_dump(mode="json")
        for code, profile in calculator.reference.industries.items()
    }


@app.get("/api/reference/maturity-levels")
async def list_maturity_levels():
    return {
        code: profile.model_dump(mode="json")
        for code, profile in calculator.reference.maturity_levels.items()
    }


@app.post("/api/scenarios", status_code=201)
async def create_scenario(body: CreateScenarioRequest):
    scenario = scenario_store.create(body.profile.to_profile(), name=body.name)
    return _scenario_payload(scenario)


@app.get("/api/scenarios")
async def list_scenarios():
    return [_scenario_payload(s) for s in scenario_store.list()]


@app.get("/api/scenarios/{scenario_id}")
async def get_scenario(scenario_id: str):
    return _scenario_payload(scenario_store.get(scenario_id))


@app.delete("/api/scenarios/{scenario_id}")
async def delete_scenario(scenario_id: str):
    scenario = scenario_store.delete(scenario_id)
    return {"deleted": scenario.id}


@app.post("/api/scenarios/{scenario_id}/evaluate")
async def evaluate_scenario(scenario_id: str):
    scenario = scenario_store.get(scenario_id)
    return _evaluation_payload(scenario.profile, scenario_id=scenario.id)


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


def run() -> None:
    uvicorn.run("sustain_roi.main:app", host="127.0.0.1", port=8000)
