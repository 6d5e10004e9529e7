"""
Maturity Bands & Insights
soc_efficacy/scoring/maturity.py

Maps a 0–100 score onto a maturity band and returns the executive insight
text shown next to each domain on the summary.
"""

from typing import Dict, Optional, Tuple

from soc_efficacy.config import get_settings
from soc_efficacy.models.enumerations import DomainKey, MaturityBand
from soc_efficacy.scoring.utils import Number, as_decimal

BAND_LABELS: Dict[MaturityBand, str] = {
    MaturityBand.LOW: "Low",
    MaturityBand.MID: "Moderate",
    MaturityBand.HIGH: "Strong",
}

FINAL_SCORE_LEGEND = (
    "Below 40: basic / fragile · 40–70: developing · Above 70: mature / robust."
)

DOMAIN_LABELS: Dict[DomainKey, Tuple[str, str]] = {
    DomainKey.COVERAGE: ("Coverage of assets vs SOC technologies", "C"),
    DomainKey.OPERATIONS: ("SOC Operations", "Y"),
    DomainKey.MANPOWER: ("Competency of SOC Personnel", "P"),
    DomainKey.GOVERNANCE: ("SOC Governance", "H"),
    DomainKey.ENRICHMENT: ("SOC Enrichments & Enhancements", "E"),
}

_INSIGHTS: Dict[DomainKey, Dict[MaturityBand, str]] = {
    DomainKey.COVERAGE: {
        MaturityBand.LOW: (
            "Coverage is low: SOC has significant blind spots across asset categories. "
            "Consider prioritising SIEM onboarding and security control integration for "
            "critical servers, databases and perimeter devices."
        ),
        MaturityBand.MID: (
            "Coverage is moderate: key assets are connected, but important classes "
            "(like endpoints or applications) may still be under-monitored."
        ),
        MaturityBand.HIGH: (
            "Coverage is strong: most critical assets are onboarded. Focus now on depth "
            "of detections and quality of alerts, rather than raw telemetry."
        ),
    },
    DomainKey.OPERATIONS: {
        MaturityBand.LOW: (
            "Operational maturity is low: ingestion, latency, use-case execution or "
            "incident handling is likely inconsistent. There is a high risk of missing "
            "or late detections."
        ),
        MaturityBand.MID: (
            "Operations are in a working but improvable state: the SOC can detect and "
            "respond, but delays, false positives/negatives or gaps in use-cases still exist."
        ),
        MaturityBand.HIGH: (
            "Operational maturity is strong: SOC appears to have well-tuned log flows, "
            "playbooks and alert handling. Next focus can be proactive hunting and automation."
        ),
    },
    DomainKey.MANPOWER: {
        MaturityBand.LOW: (
            "Manpower competency is low: there may be too few certified or experienced "
            "engineers at L1/L2/L3, impacting 24x7 coverage and complex investigations."
        ),
        MaturityBand.MID: (
            "Manpower capability is moderate: basic operations can be handled, but deeper "
            "investigations and specialised skills may bottleneck during major incidents."
        ),
        MaturityBand.HIGH: (
            "Manpower competency is strong: experience and certifications across levels "
            "look healthy. You can invest in specialisation (forensics, threat hunting) "
            "and retention."
        ),
    },
    DomainKey.GOVERNANCE: {
        MaturityBand.LOW: (
            "Governance is weak: budget allocation, training utilisation or Board-level "
            "visibility of SOC may be insufficient. This can slow any improvement program."
        ),
        MaturityBand.MID: (
            "Governance is partially effective: key committees are involved but may not "
            "consistently track SOC outcomes and investments."
        ),
        MaturityBand.HIGH: (
            "Governance is strong: SOC seems well-funded, reviewed by IT/Board forums, and "
            "supported with training. This helps sustain SOC maturity over time."
        ),
    },
    DomainKey.ENRICHMENT: {
        MaturityBand.LOW: (
            "Enrichment & enhancements are minimal: dashboards, threat hunting, automation "
            "or advanced technologies are likely at a basic level, limiting depth of detection."
        ),
        MaturityBand.MID: (
            "Enrichment is emerging: some hunting, automation or advanced analytics exist, "
            "but they are not yet systematic or comprehensive."
        ),
        MaturityBand.HIGH: (
            "Enrichment is strong: you use threat hunting, automation and advanced "
            "technologies to go beyond compliance and catch sophisticated attacks."
        ),
    },
}


def classify_band(
    score: Number,
    low_threshold: Optional[Number] = None,
    high_threshold: Optional[Number] = None,
) -> MaturityBand:
    """
    Classify a score: below low -> LOW, below high -> MID, otherwise HIGH.

    Thresholds default to BAND_LOW_THRESHOLD / BAND_HIGH_THRESHOLD (40 / 70).
    """
    settings = get_settings()
    low = as_decimal(low_threshold if low_threshold is not None else settings.BAND_LOW_THRESHOLD)
    high = as_decimal(high_threshold if high_threshold is not None else settings.BAND_HIGH_THRESHOLD)
    value = as_decimal(score)

    if value < low:
        return MaturityBand.LOW
    if value < high:
        return MaturityBand.MID
    return MaturityBand.HIGH


def band_label(score: Number) -> str:
    return BAND_LABELS[classify_band(score)]


def domain_insight(domain: DomainKey, score: Number) -> str:
    """Executive insight text for a domain at the given score."""
    return _INSIGHTS[DomainKey(domain)][classify_band(score)]


def domain_label(domain: DomainKey) -> str:
    label, short = DOMAIN_LABELS[DomainKey(domain)]
    return f"{label} ({short})"
