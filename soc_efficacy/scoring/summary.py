"""
scoring/summary.py — Summary & Report Data

Builds the domain-wise summary shown at the end of the questionnaire:

    S.No · Domain · Weight % [A] · Domain score [B] · Normalised [S = (B × A) / 100]

plus the maturity band and insight per domain and the final score (ΣS).
Only the data is produced here; rendering is left to the caller. Values are
rounded to DISPLAY_DECIMAL_PLACES one by one. The final score is computed from
the unrounded contributions, so the rounded rows can differ from the rounded
final by up to half a display unit per row.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Union

from soc_efficacy.config import get_settings
from soc_efficacy.models.enumerations import DomainKey, MaturityBand
from soc_efficacy.models.inputs import OrgInfo
from soc_efficacy.scoring.final_score_calculator import DomainScoreState, FinalScoreCalculator
from soc_efficacy.scoring.maturity import (
    BAND_LABELS,
    DOMAIN_LABELS,
    FINAL_SCORE_LEGEND,
    classify_band,
    domain_insight,
)
from soc_efficacy.scoring.session import AssessmentSession
from soc_efficacy.scoring.utils import to_decimal


@dataclass
class SummaryRow:
    serial_number: int
    domain: DomainKey
    label: str
    short_code: str
    weight: int              # A
    score: Decimal           # B
    contribution: Decimal    # S = (B × A) / 100
    band: MaturityBand
    band_label: str
    insight: str


@dataclass
class SummaryReport:
    org_info: OrgInfo
    rows: List[SummaryRow] = field(default_factory=list)
    final_score: Decimal = Decimal("0")
    final_band: MaturityBand = MaturityBand.LOW
    final_band_label: str = "Low"
    legend: str = FINAL_SCORE_LEGEND


def build_summary(
    source: Union[AssessmentSession, DomainScoreState],
    org_info: Optional[OrgInfo] = None,
) -> SummaryReport:
    """Build summary rows for a session (or a bare score state)."""
    if isinstance(source, AssessmentSession):
        state = source.state
        org_info = org_info or source.org_info
    else:
        state = source
    org_info = org_info or OrgInfo()

    places = get_settings().DISPLAY_DECIMAL_PLACES
    final = FinalScoreCalculator().calculate(state)

    rows: List[SummaryRow] = []
    for idx, domain in enumerate(final.weights, start=1):
        score = state.get(domain)
        label, short = DOMAIN_LABELS[domain]
        band = classify_band(score)
        rows.append(SummaryRow(
            serial_number=idx,
            domain=domain,
            label=label,
            short_code=short,
            weight=final.weights[domain],
            score=to_decimal(score, places),
            contribution=to_decimal(final.contributions[domain], places),
            band=band,
            band_label=BAND_LABELS[band],
            insight=domain_insight(domain, score),
        ))

    final_band = classify_band(final.final_score)
    return SummaryReport(
        org_info=org_info,
        rows=rows,
        final_score=to_decimal(final.final_score, places),
        final_band=final_band,
        final_band_label=BAND_LABELS[final_band],
    )
