"""
Questionnaire Validation
soc_efficacy/scoring/validation.py

Caller-side checks run before moving past a questionnaire step. Each
function returns a list of messages (empty when valid); the scorers never
call these and never reject input on their own.
"""

import logging
from typing import List, Mapping, Optional

from soc_efficacy.core.exceptions import InputValidationException
from soc_efficacy.models.inputs import (
    AssetDistribution,
    ManpowerInputs,
    OperationsInputs,
    OrgInfo,
)
from soc_efficacy.scoring.coverage_calculator import applicable_counts
from soc_efficacy.scoring.tech_catalog import get_technology
from soc_efficacy.scoring.utils import Number

logger = logging.getLogger(__name__)


def validate_org_info(org_info: OrgInfo) -> List[str]:
    errors: List[str] = []
    if not org_info.name.strip():
        errors.append("Please enter organisation name.")
    if not org_info.entity_type.strip():
        errors.append("Please specify the entity type.")
    if not org_info.entity_category.strip():
        errors.append("Please specify the entity category.")
    if not org_info.period.strip():
        errors.append("Please mention the period of assessment.")
    return errors


def validate_coverage_inputs(
    assets: AssetDistribution,
    integrations: Optional[Mapping[str, Number]] = None,
) -> List[str]:
    """Reject an empty asset landscape and integrated counts above applicable counts."""
    integrations = integrations or {}
    errors: List[str] = []

    if assets.total == 0:
        errors.append(
            "Please provide at least one asset count (S1–S6). "
            "Coverage cannot be computed with 0 assets."
        )

    for tech_id, x in applicable_counts(assets).items():
        y = integrations.get(tech_id, 0) or 0
        if x > 0 and y > x:
            name = get_technology(tech_id).name
            errors.append(
                f"For {name}, integrated systems (y={y}) should not exceed "
                f"applicable systems (x={x})."
            )

    return errors


def validate_operations_inputs(inputs: OperationsInputs) -> List[str]:
    """Log source, technology and use-case totals must be provided."""
    errors: List[str] = []
    if inputs.total_log_sources == 0:
        errors.append("Please specify the total number of log sources configured for SOC.")
    if inputs.total_technologies == 0:
        errors.append(
            "Please specify total number of security technologies in scope for operations."
        )
    if inputs.total_use_cases == 0:
        errors.append("Please specify total number of SIEM / detection use-cases.")
    return errors


def validate_manpower_inputs(inputs: ManpowerInputs) -> List[str]:
    if inputs.total_headcount == 0:
        return ["Please enter at least one SOC personnel count across L1, L2 or L3."]
    return []


def ensure_valid(errors: List[str]) -> None:
    """Raise InputValidationException when any validation message is present."""
    if errors:
        logger.warning("assessment_input_rejected", extra={"errors": errors})
        raise InputValidationException(errors)
