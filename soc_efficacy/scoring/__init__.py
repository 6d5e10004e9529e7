"""
scoring/ — SOC Efficacy Scoring Engine

Modules:
    utils.py                    - Decimal utilities and the zero-guarded ratio
    tech_catalog.py             - Fixed SOC technology catalogue
    coverage_calculator.py      - Coverage (C), 25%
    operations_calculator.py    - Operations (Y), 25%
    manpower_calculator.py      - Manpower (P), 20%
    governance_calculator.py    - Governance (H), 15%
    enrichment_calculator.py    - Enrichment (E), 15%
    final_score_calculator.py   - Weighted aggregation + DomainScoreState
    maturity.py                 - Maturity bands and domain insights
    validation.py               - Questionnaire input checks
    session.py                  - Per-assessment session context
    summary.py                  - Summary / report table data
"""

from soc_efficacy.scoring.coverage_calculator import compute_coverage_score
from soc_efficacy.scoring.enrichment_calculator import compute_enrichment_score
from soc_efficacy.scoring.final_score_calculator import (
    DOMAIN_WEIGHTS,
    DomainScoreState,
    compute_final_score,
)
from soc_efficacy.scoring.governance_calculator import compute_governance_score
from soc_efficacy.scoring.manpower_calculator import compute_manpower_score
from soc_efficacy.scoring.operations_calculator import compute_operations_score

__all__ = [
    "DOMAIN_WEIGHTS",
    "DomainScoreState",
    "compute_coverage_score",
    "compute_enrichment_score",
    "compute_final_score",
    "compute_governance_score",
    "compute_manpower_score",
    "compute_operations_score",
]
