"""
routers/soc_scoring.py — SOC Efficacy Scoring Endpoints

Endpoints:
  GET  /api/v1/soc/technologies   — SOC technology catalogue
  GET  /api/v1/soc/weights        — Domain weights
  POST /api/v1/soc/coverage       — Coverage (C)
  POST /api/v1/soc/operations     — Operations (Y)
  POST /api/v1/soc/manpower       — Manpower (P)
  POST /api/v1/soc/governance     — Governance (H)
  POST /api/v1/soc/enrichment     — Enrichment (E)
  POST /api/v1/soc/final-score    — Weighted final score from five domain scores
  POST /api/v1/soc/assessment     — Validate + score every domain + summary

Every call is stateless: nothing is stored between requests.
"""

import logging
from dataclasses import asdict
from typing import Dict, List

from fastapi import APIRouter

from soc_efficacy.config import get_settings
from soc_efficacy.models.inputs import (
    CoverageInputs,
    EnrichmentInputs,
    GovernanceInputs,
    ManpowerInputs,
    OperationsInputs,
)
from soc_efficacy.models.responses import (
    AssessmentRequest,
    AssessmentResponse,
    ComponentScoreResponse,
    CoverageResponse,
    FinalScoreResponse,
    LevelScoreResponse,
    ManpowerResponse,
    OperationsResponse,
    SummaryResponse,
    SummaryRowResponse,
    TechnologyCoverageResponse,
    TechnologyResponse,
)
from soc_efficacy.scoring.coverage_calculator import CoverageCalculator, CoverageResult
from soc_efficacy.scoring.enrichment_calculator import EnrichmentCalculator, EnrichmentResult
from soc_efficacy.scoring.final_score_calculator import DOMAIN_WEIGHTS, FinalScoreCalculator
from soc_efficacy.scoring.governance_calculator import GovernanceCalculator, GovernanceResult
from soc_efficacy.scoring.manpower_calculator import ManpowerCalculator, ManpowerResult
from soc_efficacy.scoring.operations_calculator import OperationsCalculator, OperationsResult
from soc_efficacy.scoring.session import AssessmentSession
from soc_efficacy.scoring.summary import SummaryReport, build_summary
from soc_efficacy.scoring.tech_catalog import SOC_TECH_CONFIG
from soc_efficacy.scoring.validation import (
    ensure_valid,
    validate_coverage_inputs,
    validate_manpower_inputs,
    validate_operations_inputs,
    validate_org_info,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix=f"{get_settings().API_V1_PREFIX}/soc", tags=["SOC Efficacy Scoring"])


# =====================================================================
# Result -> response converters
# =====================================================================

def _coverage_response(result: CoverageResult) -> CoverageResponse:
    return CoverageResponse(
        score=float(result.score),
        max_achievable=result.max_achievable,
        technologies=[
            TechnologyCoverageResponse(
                tech_id=t.tech_id,
                name=t.name,
                weight=t.weight,
                applicable_systems=t.applicable_systems,
                integrated_systems=float(t.integrated_systems),
                ratio=float(t.ratio),
                contribution=float(t.contribution),
                skipped=t.skipped,
            )
            for t in result.technologies
        ],
    )


def _operations_response(result: OperationsResult) -> OperationsResponse:
    return OperationsResponse(
        raw=float(result.raw),
        normalised=float(result.normalised),
        terms={name: float(value) for name, value in result.terms.items()},
        hygiene_checks_passed=result.hygiene_checks_passed,
    )


def _manpower_response(result: ManpowerResult) -> ManpowerResponse:
    return ManpowerResponse(
        total=float(result.total),
        levels=[
            LevelScoreResponse(
                level=lvl.level.value,
                band_labels=list(lvl.band_labels),
                average_weight=float(lvl.average_weight),
                weighted_score=float(lvl.weighted_score),
                headcount=float(lvl.headcount),
            )
            for lvl in result.levels
        ],
    )


def _component_response(result) -> ComponentScoreResponse:
    """Governance and Enrichment share the {raw, normalised, components} shape."""
    return ComponentScoreResponse(
        raw=float(result.raw),
        normalised=float(result.normalised),
        components={name: float(value) for name, value in asdict(result.components).items()},
    )


def _summary_response(report: SummaryReport) -> SummaryResponse:
    return SummaryResponse(
        org_info=report.org_info,
        rows=[
            SummaryRowResponse(
                serial_number=row.serial_number,
                domain=row.domain.value,
                label=row.label,
                short_code=row.short_code,
                weight=row.weight,
                score=float(row.score),
                contribution=float(row.contribution),
                band=row.band.value,
                band_label=row.band_label,
                insight=row.insight,
            )
            for row in report.rows
        ],
        final_score=float(report.final_score),
        final_band=report.final_band.value,
        final_band_label=report.final_band_label,
        legend=report.legend,
    )


# =====================================================================
# Reference data
# =====================================================================

@router.get("/technologies", response_model=List[TechnologyResponse])
async def list_technologies():
    return [
        TechnologyResponse(
            id=tech.id,
            name=tech.name,
            weight=tech.weight,
            applicable_systems=[c.value for c in tech.applicable_systems],
        )
        for tech in SOC_TECH_CONFIG
    ]


@router.get("/weights", response_model=Dict[str, int])
async def get_domain_weights():
    return {key.value: weight for key, weight in DOMAIN_WEIGHTS.items()}


# =====================================================================
# Domain scoring
# =====================================================================

@router.post("/coverage", response_model=CoverageResponse)
async def score_coverage(inputs: CoverageInputs):
    result = CoverageCalculator().calculate(inputs.assets, inputs.integrations)
    return _coverage_response(result)


@router.post("/operations", response_model=OperationsResponse)
async def score_operations(inputs: OperationsInputs):
    return _operations_response(OperationsCalculator().calculate(inputs))


@router.post("/manpower", response_model=ManpowerResponse)
async def score_manpower(inputs: ManpowerInputs):
    return _manpower_response(ManpowerCalculator().calculate(inputs))


@router.post("/governance", response_model=ComponentScoreResponse)
async def score_governance(inputs: GovernanceInputs):
    result: GovernanceResult = GovernanceCalculator().calculate(inputs)
    return _component_response(result)


@router.post("/enrichment", response_model=ComponentScoreResponse)
async def score_enrichment(inputs: EnrichmentInputs):
    result: EnrichmentResult = EnrichmentCalculator().calculate(inputs)
    return _component_response(result)


@router.post("/final-score", response_model=FinalScoreResponse)
async def score_final(scores: Dict[str, float]):
    """Domains left out of the body count as 0; an unknown domain key is rejected."""
    result = FinalScoreCalculator().calculate(scores)
    return FinalScoreResponse(
        final_score=float(result.final_score),
        contributions={k.value: float(v) for k, v in result.contributions.items()},
        weights={k.value: w for k, w in result.weights.items()},
    )


@router.post("/assessment", response_model=AssessmentResponse)
async def run_assessment(request: AssessmentRequest):
    """
    Validate the questionnaire the way the wizard does, then score every
    domain in a fresh session and return the summary.
    """
    errors = (
        validate_org_info(request.org_info)
        + validate_coverage_inputs(request.coverage.assets, request.coverage.integrations)
        + validate_operations_inputs(request.operations)
        + validate_manpower_inputs(request.manpower)
    )
    ensure_valid(errors)

    session = AssessmentSession(request.org_info)
    coverage = session.score_coverage(request.coverage.assets, request.coverage.integrations)
    operations = session.score_operations(request.operations)
    manpower = session.score_manpower(request.manpower)
    governance = session.score_governance(request.governance)
    enrichment = session.score_enrichment(request.enrichment)

    logger.info(
        "assessment_scored",
        extra={"organisation": request.org_info.name, "final_score": float(session.final_score)},
    )

    return AssessmentResponse(
        coverage=_coverage_response(coverage),
        operations=_operations_response(operations),
        manpower=_manpower_response(manpower),
        governance=_component_response(governance),
        enrichment=_component_response(enrichment),
        summary=_summary_response(build_summary(session)),
    )
