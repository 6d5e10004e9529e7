"""
Domain Input Records - SOC Efficacy Calculator
soc_efficacy/models/inputs.py

One flat record per questionnaire domain. The models are the caller
boundary: a negative or non-numeric numeric entry is sanitised to 0 here,
exactly like the questionnaire form does, so the scorers never see it.
"""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _sanitise_number(value: Any) -> Any:
    """Map missing, non-numeric or negative entries to 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value if value >= 0 else 0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if number != number or number < 0:  # NaN or negative
        return 0
    return value


class _DomainInputs(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# =============================================================================
# ORGANISATION
# =============================================================================

class OrgInfo(BaseModel):
    """Organisation details printed on the efficacy report."""

    name: str = Field(default="", max_length=255, description="Name of the organisation")
    entity_type: str = Field(default="", max_length=255, description="Entity type")
    entity_category: str = Field(default="", max_length=255, description="Entity category")
    period: str = Field(default="", max_length=100, description="Period of assessment")


# =============================================================================
# COVERAGE (C)
# =============================================================================

class AssetDistribution(_DomainInputs):
    """In-scope asset counts per category (S1..S6). Zero means none in scope."""

    S1: int = Field(default=0, description="Network devices (firewalls, routers, switches)")
    S2: int = Field(default=0, description="Security solutions")
    S3: int = Field(default=0, description="Endpoints")
    S4: int = Field(default=0, description="Applications")
    S5: int = Field(default=0, description="Databases")
    S6: int = Field(default=0, description="Servers")

    @field_validator("S1", "S2", "S3", "S4", "S5", "S6", mode="before")
    @classmethod
    def sanitise_count(cls, v: Any) -> Any:
        return _sanitise_number(v)

    def count(self, category: str) -> int:
        return getattr(self, category, 0) or 0

    @property
    def total(self) -> int:
        return self.S1 + self.S2 + self.S3 + self.S4 + self.S5 + self.S6


class CoverageInputs(_DomainInputs):
    """Asset distribution plus sparse integrated-systems counts per technology."""

    assets: AssetDistribution = Field(default_factory=AssetDistribution)
    integrations: Dict[str, float] = Field(
        default_factory=dict,
        description="Technology id -> integrated systems (y); missing ids count as 0",
    )

    @field_validator("integrations", mode="before")
    @classmethod
    def sanitise_integrations(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return {}
        return {str(k): _sanitise_number(val) for k, val in v.items()}


# =============================================================================
# OPERATIONS (Y)
# =============================================================================

_OPERATIONS_COUNTERS = (
    "log_sources_reporting",
    "total_log_sources",
    "max_log_latency_minutes",
    "technologies_on_n_or_n1",
    "total_technologies",
    "open_advisories",
    "total_advisories",
    "techs_with_use_cases",
    "total_techs_for_use_cases",
    "use_cases_not_triggered",
    "total_use_cases",
    "playbooks_defined",
    "total_use_cases_for_playbooks",
    "false_positives",
    "total_alerts_for_fp",
    "false_negatives",
    "total_alerts_for_fn",
    "mean_threat_intel_processing_mins",
)


class OperationsInputs(_DomainInputs):
    """Operational counters and daily/weekly hygiene checks."""

    log_sources_reporting: float = 0
    total_log_sources: float = 0

    max_log_latency_minutes: float = 0

    technologies_on_n_or_n1: float = 0
    total_technologies: float = 0

    open_advisories: float = 0
    total_advisories: float = 0

    techs_with_use_cases: float = 0
    total_techs_for_use_cases: float = 0

    use_cases_not_triggered: float = 0
    total_use_cases: float = 0

    playbooks_defined: float = 0
    total_use_cases_for_playbooks: float = 0

    false_positives: float = 0
    total_alerts_for_fp: float = 0

    false_negatives: float = 0
    total_alerts_for_fn: float = 0

    mean_threat_intel_processing_mins: float = 0

    critical_logs_verified_daily: bool = False
    critical_edr_dam_verified_daily: bool = False
    critical_use_cases_configured: bool = False
    privileged_access_verified_weekly: bool = False
    backups_taken_periodically: bool = False

    @field_validator(*_OPERATIONS_COUNTERS, mode="before")
    @classmethod
    def sanitise_counter(cls, v: Any) -> Any:
        return _sanitise_number(v)


# =============================================================================
# MANPOWER (P)
# =============================================================================

class ManpowerInputs(_DomainInputs):
    """Headcount per experience band for each SOC level."""

    l1_bands: Tuple[int, int, int, int] = Field(
        default=(0, 0, 0, 0),
        description="L1 analysts: 2-3, 3-4, 4-5, 5+ years",
    )
    l2_bands: Tuple[int, int, int] = Field(
        default=(0, 0, 0),
        description="L2 engineers: 6-7, 7-8, 8+ years",
    )
    l3_bands: Tuple[int, int, int, int] = Field(
        default=(0, 0, 0, 0),
        description="L3 / SOC leads: 9-10, 10-11, 11-12, 12+ years",
    )

    @field_validator("l1_bands", "l2_bands", "l3_bands", mode="before")
    @classmethod
    def sanitise_bands(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(_sanitise_number(x) for x in v)
        return v

    @property
    def total_headcount(self) -> int:
        return sum(self.l1_bands) + sum(self.l2_bands) + sum(self.l3_bands)


# =============================================================================
# GOVERNANCE (H)
# =============================================================================

class GovernanceInputs(_DomainInputs):
    """Budget allocation, training utilisation and oversight flags."""

    total_cyber_budget: float = Field(default=0, description="Total cyber security budget")
    soc_budget: float = Field(default=0, description="Dedicated SOC budget")
    training_budget_used_percent: float = Field(
        default=0, description="Share of SOC training budget actually used (%)"
    )
    soc_reviewed_by_it_committee: bool = False
    tech_recommendations_to_board: bool = False

    @field_validator(
        "total_cyber_budget", "soc_budget", "training_budget_used_percent", mode="before"
    )
    @classmethod
    def sanitise_amount(cls, v: Any) -> Any:
        return _sanitise_number(v)


# =============================================================================
# ENRICHMENT (E)
# =============================================================================

class EnrichmentInputs(_DomainInputs):
    """Dashboards, threat hunting, automation and advanced technologies."""

    using_native_dashboard: bool = False
    using_custom_dashboard: bool = False

    threat_hunting_by_specialized_provider: bool = False
    threat_hunting_by_internal_team: bool = False
    threat_hunting_quarterly: bool = False
    threat_hunting_half_yearly: bool = False
    total_hypotheses: float = 0
    hypotheses_from_vulns: float = 0
    hypotheses_from_iocs: float = 0
    hypotheses_from_ioas: float = 0

    threat_intel_integrated_with_siem: bool = False
    soar_actions_triggered: float = 0
    total_soar_actions_defined: float = 0

    has_decoy: bool = False
    has_sandbox: bool = False
    has_ueba: bool = False
    has_vuln_mgmt: bool = False
    has_encrypted_traffic_mgmt: bool = False
    has_dns_security: bool = False
    has_ips: bool = False
    has_data_classification: bool = False

    @field_validator(
        "total_hypotheses",
        "hypotheses_from_vulns",
        "hypotheses_from_iocs",
        "hypotheses_from_ioas",
        "soar_actions_triggered",
        "total_soar_actions_defined",
        mode="before",
    )
    @classmethod
    def sanitise_counter(cls, v: Any) -> Any:
        return _sanitise_number(v)

    @property
    def technology_flags(self) -> Tuple[bool, ...]:
        return (
            self.has_decoy,
            self.has_sandbox,
            self.has_ueba,
            self.has_vuln_mgmt,
            self.has_encrypted_traffic_mgmt,
            self.has_dns_security,
            self.has_ips,
            self.has_data_classification,
        )
