"""
SOC Scoring API Response Models
soc_efficacy/models/responses.py

Pydantic models for responses from the SOC scoring endpoints. Scores are
computed as Decimal and exposed as float.
"""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from soc_efficacy.models.inputs import (
    CoverageInputs,
    EnrichmentInputs,
    GovernanceInputs,
    ManpowerInputs,
    OperationsInputs,
    OrgInfo,
)


# Requests


class AssessmentRequest(BaseModel):
    """Every questionnaire step in one payload."""
    org_info: OrgInfo = Field(default_factory=OrgInfo)
    coverage: CoverageInputs = Field(default_factory=CoverageInputs)
    operations: OperationsInputs = Field(default_factory=OperationsInputs)
    manpower: ManpowerInputs = Field(default_factory=ManpowerInputs)
    governance: GovernanceInputs = Field(default_factory=GovernanceInputs)
    enrichment: EnrichmentInputs = Field(default_factory=EnrichmentInputs)


# Domain results


class TechnologyCoverageResponse(BaseModel):
    tech_id: str
    name: str
    weight: int
    applicable_systems: int
    integrated_systems: float
    ratio: float
    contribution: float
    skipped: bool


class CoverageResponse(BaseModel):
    score: float
    max_achievable: int
    technologies: List[TechnologyCoverageResponse]


class OperationsResponse(BaseModel):
    raw: float
    normalised: float
    terms: Dict[str, float]
    hygiene_checks_passed: int


class LevelScoreResponse(BaseModel):
    level: str
    band_labels: List[str]
    average_weight: float
    weighted_score: float
    headcount: float


class ManpowerResponse(BaseModel):
    total: float
    levels: List[LevelScoreResponse]


class ComponentScoreResponse(BaseModel):
    raw: float
    normalised: float
    components: Dict[str, float]


class FinalScoreResponse(BaseModel):
    final_score: float
    contributions: Dict[str, float]
    weights: Dict[str, int]


# Summary


class SummaryRowResponse(BaseModel):
    serial_number: int
    domain: str
    label: str
    short_code: str
    weight: int
    score: float
    contribution: float
    band: str
    band_label: str
    insight: str


class SummaryResponse(BaseModel):
    org_info: OrgInfo
    rows: List[SummaryRowResponse]
    final_score: float
    final_band: str
    final_band_label: str
    legend: str


class AssessmentResponse(BaseModel):
    coverage: CoverageResponse
    operations: OperationsResponse
    manpower: ManpowerResponse
    governance: ComponentScoreResponse
    enrichment: ComponentScoreResponse
    summary: SummaryResponse


# Reference data


class TechnologyResponse(BaseModel):
    id: str
    name: str
    weight: int
    applicable_systems: List[str]


class ErrorResponse(BaseModel):
    """
    Standard error response model.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(..., description="Error occurrence timestamp")
