# soc_efficacy/scoring/coverage_calculator.py
"""
Coverage Calculator (C)
-----------------------
Scores how much of the in-scope asset landscape is integrated with each SOC
technology in the fixed catalogue.

Formula, per technology t:
    x_t = Σ assets[c] for c in t.applicable_systems
    if x_t == 0: skipped (contributes 0, cannot be judged)
    Z_t = min(y_t / x_t, 1)          y_t = integrated systems, default 0
    contribution_t = Z_t × weight_t

    Coverage = Σ contribution_t       (weights sum to 100, so no division)

Technologies with an empty applicable-systems list (DLP, Email Gateway,
Web Gateway, DDoS) are always skipped, so the achievable maximum is below
100 for every asset distribution.
"""
import structlog
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence

from soc_efficacy.models.inputs import AssetDistribution
from soc_efficacy.scoring.tech_catalog import SOC_TECH_CONFIG, SocTechnology
from soc_efficacy.scoring.utils import Number, ZERO, as_decimal

logger = structlog.get_logger(__name__)

ONE = Decimal("1")


@dataclass
class TechnologyCoverage:
    """Per-technology working values."""
    tech_id: str
    name: str
    weight: int
    applicable_systems: int    # x
    integrated_systems: Decimal  # y
    ratio: Decimal             # Z, capped at 1
    contribution: Decimal      # Z × weight
    skipped: bool              # x == 0


@dataclass
class CoverageResult:
    """Output of CoverageCalculator.calculate()."""
    score: Decimal                   # [0, 100]
    max_achievable: int              # Σ weight of non-skipped technologies
    technologies: List[TechnologyCoverage] = field(default_factory=list)


class CoverageCalculator:
    """Calculate Coverage score from asset counts and integration counts."""

    def __init__(self, catalogue: Optional[Sequence[SocTechnology]] = None):
        self.catalogue = tuple(catalogue) if catalogue is not None else SOC_TECH_CONFIG

    def calculate(
        self,
        assets: AssetDistribution,
        integrations: Optional[Mapping[str, Number]] = None,
    ) -> CoverageResult:
        """
        Args:
            assets: In-scope asset counts per category.
            integrations: Technology id -> integrated systems count. Sparse;
                          missing ids are treated as 0. y > x is not rejected
                          here, the ratio is simply capped at 1.

        Returns:
            CoverageResult with the score and a per-technology breakdown.

        Examples:
            >>> assets = AssetDistribution(S1=10)
            >>> CoverageCalculator().calculate(assets, {"pam": 10, "siem": 10}).score
            Decimal('20')
        """
        integrations = integrations or {}
        total = ZERO
        max_achievable = 0
        rows: List[TechnologyCoverage] = []

        for tech in self.catalogue:
            x = sum(assets.count(category.value) for category in tech.applicable_systems)
            y = as_decimal(integrations.get(tech.id, 0) or 0)

            if x == 0:
                rows.append(TechnologyCoverage(
                    tech_id=tech.id,
                    name=tech.name,
                    weight=tech.weight,
                    applicable_systems=0,
                    integrated_systems=y,
                    ratio=ZERO,
                    contribution=ZERO,
                    skipped=True,
                ))
                continue

            ratio = min(y / Decimal(x), ONE)
            contribution = ratio * tech.weight
            total += contribution
            max_achievable += tech.weight

            rows.append(TechnologyCoverage(
                tech_id=tech.id,
                name=tech.name,
                weight=tech.weight,
                applicable_systems=x,
                integrated_systems=y,
                ratio=ratio,
                contribution=contribution,
                skipped=False,
            ))

        logger.info(
            "coverage_calculated",
            total_assets=assets.total,
            technologies_scored=sum(1 for r in rows if not r.skipped),
            max_achievable=max_achievable,
            coverage_score=float(total),
        )

        return CoverageResult(
            score=total,
            max_achievable=max_achievable,
            technologies=rows,
        )


def compute_coverage_score(
    assets: AssetDistribution,
    integrations: Optional[Mapping[str, Number]] = None,
) -> Decimal:
    """Coverage score in [0, 100] with no breakdown."""
    return CoverageCalculator().calculate(assets, integrations).score


def applicable_counts(assets: AssetDistribution) -> Dict[str, int]:
    """Technology id -> applicable systems (x) for the given asset distribution."""
    return {
        tech.id: sum(assets.count(c.value) for c in tech.applicable_systems)
        for tech in SOC_TECH_CONFIG
    }
