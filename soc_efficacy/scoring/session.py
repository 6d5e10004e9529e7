"""
scoring/session.py — Assessment Session

Explicit per-session context replacing the questionnaire's reactive
recompute: each score_* call runs one domain scorer, keeps its detailed
result and pushes the domain's normalised score into DomainScoreState.
The final score is recomputed on every access.

Domain score pushed into the state:
    coverage   -> CoverageResult.score
    operations -> OperationsResult.normalised
    manpower   -> ManpowerResult.total
    governance -> GovernanceResult.normalised
    enrichment -> EnrichmentResult.normalised
"""

import logging
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from soc_efficacy.models.enumerations import DomainKey
from soc_efficacy.models.inputs import (
    AssetDistribution,
    EnrichmentInputs,
    GovernanceInputs,
    ManpowerInputs,
    OperationsInputs,
    OrgInfo,
)
from soc_efficacy.scoring.coverage_calculator import CoverageCalculator, CoverageResult
from soc_efficacy.scoring.enrichment_calculator import EnrichmentCalculator, EnrichmentResult
from soc_efficacy.scoring.final_score_calculator import (
    DomainScoreState,
    FinalScoreCalculator,
    FinalScoreResult,
    ScoreListener,
)
from soc_efficacy.scoring.governance_calculator import GovernanceCalculator, GovernanceResult
from soc_efficacy.scoring.manpower_calculator import ManpowerCalculator, ManpowerResult
from soc_efficacy.scoring.operations_calculator import OperationsCalculator, OperationsResult
from soc_efficacy.scoring.utils import Number

logger = logging.getLogger(__name__)


class AssessmentSession:
    """In-memory state for one assessment; discarded when the session ends."""

    def __init__(self, org_info: Optional[OrgInfo] = None):
        self.org_info = org_info or OrgInfo()
        self.state = DomainScoreState()
        self.results: Dict[DomainKey, Any] = {}
        self._final = FinalScoreCalculator()

    def on_score_change(self, listener: ScoreListener) -> None:
        """Register a callback fired after every domain score update."""
        self.state.subscribe(listener)

    def score_coverage(
        self,
        assets: AssetDistribution,
        integrations: Optional[Mapping[str, Number]] = None,
    ) -> CoverageResult:
        result = CoverageCalculator().calculate(assets, integrations)
        self._record(DomainKey.COVERAGE, result, result.score)
        return result

    def score_operations(self, inputs: OperationsInputs) -> OperationsResult:
        result = OperationsCalculator().calculate(inputs)
        self._record(DomainKey.OPERATIONS, result, result.normalised)
        return result

    def score_manpower(self, inputs: ManpowerInputs) -> ManpowerResult:
        result = ManpowerCalculator().calculate(inputs)
        self._record(DomainKey.MANPOWER, result, result.total)
        return result

    def score_governance(self, inputs: GovernanceInputs) -> GovernanceResult:
        result = GovernanceCalculator().calculate(inputs)
        self._record(DomainKey.GOVERNANCE, result, result.normalised)
        return result

    def score_enrichment(self, inputs: EnrichmentInputs) -> EnrichmentResult:
        result = EnrichmentCalculator().calculate(inputs)
        self._record(DomainKey.ENRICHMENT, result, result.normalised)
        return result

    def _record(self, domain: DomainKey, result: Any, score: Decimal) -> None:
        self.results[domain] = result
        self.state.update(domain, score)

    @property
    def final(self) -> FinalScoreResult:
        return self._final.calculate(self.state)

    @property
    def final_score(self) -> Decimal:
        return self.final.final_score
