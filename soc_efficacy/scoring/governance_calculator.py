"""
scoring/governance_calculator.py — SOC Governance (H)

Components (max raw 65):
    budget          = 2 × soc_budget × 45 / total_cyber_budget, clamped [0, 45]
                      (half of the cyber budget going to the SOC earns the full 45)
    training        = min(pct, 100) / 100 × 10
    review          = 5 if the SOC is reviewed by an IT committee
    recommendation  = 5 if technology recommendations go to the Board

    normalised = raw / 65 × 100
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from soc_efficacy.models.inputs import GovernanceInputs
from soc_efficacy.scoring.utils import ZERO, as_decimal, clamp

logger = logging.getLogger(__name__)

MAX_RAW = Decimal("65")
BUDGET_MAX = Decimal("45")
TRAINING_MAX = Decimal("10")
REVIEW_POINTS = Decimal("5")
RECOMMENDATION_POINTS = Decimal("5")


@dataclass
class GovernanceComponents:
    budget_score: Decimal
    training_score: Decimal
    review_score: Decimal
    recommendation_score: Decimal


@dataclass
class GovernanceResult:
    """Output of GovernanceCalculator.calculate()."""
    raw: Decimal
    normalised: Decimal
    components: GovernanceComponents


class GovernanceCalculator:
    """Calculate Governance score."""

    def calculate(self, inputs: GovernanceInputs) -> GovernanceResult:
        """
        Examples:
            >>> result = GovernanceCalculator().calculate(GovernanceInputs(
            ...     total_cyber_budget=1000000, soc_budget=500000,
            ...     training_budget_used_percent=50, soc_reviewed_by_it_committee=True,
            ... ))
            >>> result.raw == 55
            True
        """
        total_budget = as_decimal(inputs.total_cyber_budget)
        soc_budget = as_decimal(inputs.soc_budget)
        training_pct = as_decimal(inputs.training_budget_used_percent)

        budget_score = ZERO
        if total_budget > 0 and soc_budget > 0:
            budget_score = clamp(
                (2 * soc_budget * BUDGET_MAX) / total_budget, ZERO, BUDGET_MAX
            )

        training_score = ZERO
        if training_pct > 0:
            training_score = (min(training_pct, Decimal("100")) / 100) * TRAINING_MAX

        review_score = REVIEW_POINTS if inputs.soc_reviewed_by_it_committee else ZERO
        recommendation_score = (
            RECOMMENDATION_POINTS if inputs.tech_recommendations_to_board else ZERO
        )

        raw = budget_score + training_score + review_score + recommendation_score
        normalised = (raw / MAX_RAW) * 100

        logger.info(
            "governance_calculated",
            extra={
                "budget_score": float(budget_score),
                "training_score": float(training_score),
                "review_score": float(review_score),
                "recommendation_score": float(recommendation_score),
                "raw": float(raw),
                "normalised": float(normalised),
            },
        )

        return GovernanceResult(
            raw=raw,
            normalised=normalised,
            components=GovernanceComponents(
                budget_score=budget_score,
                training_score=training_score,
                review_score=review_score,
                recommendation_score=recommendation_score,
            ),
        )


def compute_governance_score(inputs: GovernanceInputs) -> GovernanceResult:
    """Governance {raw, normalised, components}."""
    return GovernanceCalculator().calculate(inputs)
