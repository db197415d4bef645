"""Audit hooks: logs completed evaluations for the audit trail."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Optional

from sustain_roi.engine.result import ROIResult
from sustain_roi.models.profile import CompanyProfile

logger = logging.getLogger(__name__)


def log_evaluation(
    profile: CompanyProfile,
    result: ROIResult,
    scenario_id: Optional[str] = None,
) -> dict[str, Any]:
    """Record an evaluation in the audit log.

    Returns the audit entry dict for downstream persistence.
    """
    entry = {
        "scenario_id": scenario_id,
        "profile": asdict(profile),
        "roi_ratio": result.roi_ratio,
        "net_benefits": result.net_benefits,
        "npv": result.npv,
        "payback_months": result.payback_months,
        "recovered_within_horizon": result.recovered_within_horizon,
        "timestamp": datetime.now(tz=timezone.utc).isoformat(),
    }
    logger.info(
        "Evaluation audit: %s roi=%.2fx payback=%dm",
        profile.industry_code,
        result.roi_ratio,
        result.payback_months,
    )
    return entry
