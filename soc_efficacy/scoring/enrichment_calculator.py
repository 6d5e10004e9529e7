"""
scoring/enrichment_calculator.py — SOC Enrichments & Enhancements (E)

Components (max raw 75):
    dashboard       +5 native, +5 custom                                  (10)
    threat hunting  +5 specialised provider, +3 internal team,
                    +5 quarterly, +3 half-yearly (all additive)           (16)
                    + (vuln/T + IoC/T + IoA/T) × 5 when T > 0            (15)
    automation      +5 threat intel in SIEM, + SOAR triggered/defined × 5 (10)
    technologies    +3 per advanced technology present, 8 flags           (24)

    normalised = raw / 75 × 100

The SOAR ratio is uncapped, like the Operations ratios.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal

from soc_efficacy.models.inputs import EnrichmentInputs
from soc_efficacy.scoring.utils import ZERO, as_decimal, count_true, safe_ratio

logger = logging.getLogger(__name__)

MAX_RAW = Decimal("75")
TECHNOLOGY_POINTS = 3


@dataclass
class EnrichmentComponents:
    dashboard_score: Decimal
    threat_hunting_score: Decimal
    automation_score: Decimal
    technologies_score: Decimal


@dataclass
class EnrichmentResult:
    """Output of EnrichmentCalculator.calculate()."""
    raw: Decimal
    normalised: Decimal
    components: EnrichmentComponents


class EnrichmentCalculator:
    """Calculate Enrichment score."""

    def calculate(self, inputs: EnrichmentInputs) -> EnrichmentResult:
        i = inputs

        dashboard = ZERO
        if i.using_native_dashboard:
            dashboard += 5
        if i.using_custom_dashboard:
            dashboard += 5

        hunting = ZERO
        if i.threat_hunting_by_specialized_provider:
            hunting += 5
        if i.threat_hunting_by_internal_team:
            hunting += 3
        if i.threat_hunting_quarterly:
            hunting += 5
        if i.threat_hunting_half_yearly:
            hunting += 3

        total_hypotheses = as_decimal(i.total_hypotheses)
        if total_hypotheses > 0:
            hunting += safe_ratio(i.hypotheses_from_vulns, total_hypotheses) * 5
            hunting += safe_ratio(i.hypotheses_from_iocs, total_hypotheses) * 5
            hunting += safe_ratio(i.hypotheses_from_ioas, total_hypotheses) * 5

        automation = ZERO
        if i.threat_intel_integrated_with_siem:
            automation += 5
        automation += safe_ratio(i.soar_actions_triggered, i.total_soar_actions_defined) * 5

        technologies = Decimal(count_true(i.technology_flags) * TECHNOLOGY_POINTS)

        raw = dashboard + hunting + automation + technologies
        normalised = (raw / MAX_RAW) * 100

        logger.info(
            "enrichment_calculated",
            extra={
                "dashboard_score": float(dashboard),
                "threat_hunting_score": float(hunting),
                "automation_score": float(automation),
                "technologies_score": float(technologies),
                "raw": float(raw),
                "normalised": float(normalised),
            },
        )

        return EnrichmentResult(
            raw=raw,
            normalised=normalised,
            components=EnrichmentComponents(
                dashboard_score=dashboard,
                threat_hunting_score=hunting,
                automation_score=automation,
                technologies_score=technologies,
            ),
        )


def compute_enrichment_score(inputs: EnrichmentInputs) -> EnrichmentResult:
    """Enrichment {raw, normalised, components}."""
    return EnrichmentCalculator().calculate(inputs)
