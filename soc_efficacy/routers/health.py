"""
Health Check Router - SOC Efficacy Calculator
soc_efficacy/routers/health.py

The calculator has no external dependencies; health reports the scoring
catalogue and weight tables are consistent.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from soc_efficacy.config import get_settings
from soc_efficacy.scoring.final_score_calculator import DOMAIN_WEIGHTS
from soc_efficacy.scoring.manpower_calculator import LEVEL_CONFIG
from soc_efficacy.scoring.tech_catalog import total_catalogue_weight

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    checks: Dict[str, str]


def _weight_checks() -> Dict[str, str]:
    checks = {
        "technology_catalogue": total_catalogue_weight() == 100,
        "domain_weights": sum(DOMAIN_WEIGHTS.values()) == 100,
        "manpower_levels": sum(cfg.category_weight for cfg in LEVEL_CONFIG) == 100,
    }
    return {name: "healthy" if ok else "unhealthy: weights do not sum to 100"
            for name, ok in checks.items()}


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "Scoring tables consistent"},
        503: {"description": "One or more scoring tables inconsistent"},
    },
    summary="Health check",
)
async def health_check():
    """Check the scoring reference tables."""
    checks = _weight_checks()
    all_healthy = all(v == "healthy" for v in checks.values())

    response = HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=get_settings().APP_VERSION,
        checks=checks,
    )

    if not all_healthy:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=response.model_dump(mode="json"),
        )
    return response
