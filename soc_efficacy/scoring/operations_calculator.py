# soc_efficacy/scoring/operations_calculator.py
"""
Operations Calculator (Y)
-------------------------
Raw score is the sum of eleven independently weighted terms (max 75):

    log sources reporting / total           × 5
    latency bonus  ((5 − L) / 5) × 5        only when 0 < L < 5 minutes
    technologies on N or N-1 / total        × 5
    closed advisories / total               × 5
    technologies with use-cases / total     × 5
    triggered use-cases / total             × 5
    playbooks / use-cases                   × 10
    (alerts − false positives) / alerts     × 10
    (alerts − false negatives) / alerts     × 10
    threat-intel bonus ((60 − M) / 60) × 5  only when 0 < M < 60 minutes
    hygiene checks answered yes             × 2   (five checks)

    normalised = raw / 75 × 100

Ratios go through safe_ratio and are NOT capped at 1, so a mis-entered
numerator larger than its denominator can push normalised above 100.
"""
import structlog
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict

from soc_efficacy.models.inputs import OperationsInputs
from soc_efficacy.scoring.utils import ZERO, as_decimal, count_true, safe_ratio

logger = structlog.get_logger(__name__)

MAX_RAW = Decimal("75")

LATENCY_CEILING_MINUTES = Decimal("5")
THREAT_INTEL_CEILING_MINUTES = Decimal("60")
HYGIENE_CHECK_POINTS = 2


@dataclass
class OperationsResult:
    """Output of OperationsCalculator.calculate()."""
    raw: Decimal
    normalised: Decimal
    terms: Dict[str, Decimal] = field(default_factory=dict)
    hygiene_checks_passed: int = 0


def _speed_bonus(minutes: Decimal, ceiling: Decimal, points: int) -> Decimal:
    # 0 means "not reported", not "instant"
    if 0 < minutes < ceiling:
        return ((ceiling - minutes) / ceiling) * points
    return ZERO


class OperationsCalculator:
    """Calculate Operations score from operational counters and checks."""

    def calculate(self, inputs: OperationsInputs) -> OperationsResult:
        d = as_decimal
        i = inputs

        terms: Dict[str, Decimal] = {
            "log_source_coverage": safe_ratio(
                i.log_sources_reporting, i.total_log_sources) * 5,
            "log_latency": _speed_bonus(
                d(i.max_log_latency_minutes), LATENCY_CEILING_MINUTES, 5),
            "technology_currency": safe_ratio(
                i.technologies_on_n_or_n1, i.total_technologies) * 5,
            "advisories_closed": safe_ratio(
                d(i.total_advisories) - d(i.open_advisories), i.total_advisories) * 5,
            "use_case_coverage": safe_ratio(
                i.techs_with_use_cases, i.total_techs_for_use_cases) * 5,
            "use_cases_triggered": safe_ratio(
                d(i.total_use_cases) - d(i.use_cases_not_triggered), i.total_use_cases) * 5,
            "playbook_coverage": safe_ratio(
                i.playbooks_defined, i.total_use_cases_for_playbooks) * 10,
            "false_positive_free": safe_ratio(
                d(i.total_alerts_for_fp) - d(i.false_positives), i.total_alerts_for_fp) * 10,
            "false_negative_free": safe_ratio(
                d(i.total_alerts_for_fn) - d(i.false_negatives), i.total_alerts_for_fn) * 10,
            "threat_intel_speed": _speed_bonus(
                d(i.mean_threat_intel_processing_mins), THREAT_INTEL_CEILING_MINUTES, 5),
        }

        yes_count = count_true((
            i.critical_logs_verified_daily,
            i.critical_edr_dam_verified_daily,
            i.critical_use_cases_configured,
            i.privileged_access_verified_weekly,
            i.backups_taken_periodically,
        ))
        terms["hygiene_checks"] = Decimal(yes_count * HYGIENE_CHECK_POINTS)

        raw = sum(terms.values(), ZERO)
        normalised = (raw / MAX_RAW) * 100

        logger.info(
            "operations_calculated",
            raw=float(raw),
            normalised=float(normalised),
            hygiene_checks_passed=yes_count,
        )

        return OperationsResult(
            raw=raw,
            normalised=normalised,
            terms=terms,
            hygiene_checks_passed=yes_count,
        )


def compute_operations_score(inputs: OperationsInputs) -> OperationsResult:
    """Operations {raw, normalised}; normalised is not clamped."""
    return OperationsCalculator().calculate(inputs)
