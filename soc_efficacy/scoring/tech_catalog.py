"""
SOC Technology Catalogue
soc_efficacy/scoring/tech_catalog.py

Fixed reference table used by the Coverage scorer. Each technology carries
a weight (all 10, summing to 100) and the asset categories it is expected
to protect. A technology with no applicable categories can never contribute
to Coverage.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from soc_efficacy.models.enumerations import AssetCategory


@dataclass(frozen=True)
class SocTechnology:
    """One row of the SOC technology catalogue."""
    id: str
    name: str
    weight: int
    applicable_systems: Tuple[AssetCategory, ...]


_S = AssetCategory

SOC_TECH_CONFIG: Tuple[SocTechnology, ...] = (
    SocTechnology("pam", "PAM", 10, (_S.S1, _S.S2, _S.S4, _S.S5, _S.S6)),
    SocTechnology("av_epp", "Anti-virus / EPP", 10, (_S.S3, _S.S6)),
    SocTechnology("edr", "EDR", 10, (_S.S3, _S.S6)),
    SocTechnology("dlp", "DLP", 10, ()),
    SocTechnology("dam", "DAM", 10, (_S.S5,)),
    SocTechnology("waf", "WAF", 10, (_S.S4,)),
    SocTechnology("email_gw", "Email Gateway", 10, ()),
    SocTechnology("web_gw", "Web Gateway / Proxy", 10, ()),
    SocTechnology("ddos", "DDoS Protection", 10, ()),
    SocTechnology("siem", "SIEM", 10, (_S.S1, _S.S2, _S.S4, _S.S5, _S.S6)),
)

_BY_ID: Dict[str, SocTechnology] = {tech.id: tech for tech in SOC_TECH_CONFIG}


def get_technology(tech_id: str) -> Optional[SocTechnology]:
    """Look up a catalogue entry by id."""
    return _BY_ID.get(tech_id)


def total_catalogue_weight() -> int:
    return sum(tech.weight for tech in SOC_TECH_CONFIG)
