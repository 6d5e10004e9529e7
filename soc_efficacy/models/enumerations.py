from enum import Enum


class DomainKey(str, Enum):
    COVERAGE = "coverage"        # C: assets vs SOC technologies
    OPERATIONS = "operations"    # Y: day-to-day SOC operations
    MANPOWER = "manpower"        # P: competency of SOC personnel
    GOVERNANCE = "governance"    # H: budget, training, oversight
    ENRICHMENT = "enrichment"    # E: hunting, automation, advanced tech


class AssetCategory(str, Enum):
    S1 = "S1"  # Network devices
    S2 = "S2"  # Security solutions
    S3 = "S3"  # Endpoints
    S4 = "S4"  # Applications
    S5 = "S5"  # Databases
    S6 = "S6"  # Servers


class ManpowerLevel(str, Enum):
    L1 = "L1"
    L2 = "L2"
    L3 = "L3"


class MaturityBand(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"
