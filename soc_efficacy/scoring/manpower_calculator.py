"""
scoring/manpower_calculator.py — Competency of SOC Personnel (P)

Each level (L1, L2, L3) gets a headcount-weighted mean seniority credit:

    avg_level   = Σ(count_i × band_weight_i) / Σ count_i     (0 if no headcount)
    level_score = avg_level × category_weight

    Manpower = Σ level_score      category weights 35 / 25 / 40 sum to 100

The model rewards a senior mix, not absolute staffing: one person in the
top band of an otherwise empty level earns the full category weight.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Sequence, Tuple

from soc_efficacy.models.enumerations import ManpowerLevel
from soc_efficacy.models.inputs import ManpowerInputs
from soc_efficacy.scoring.utils import ZERO, as_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelConfig:
    level: ManpowerLevel
    category_weight: int
    band_weights: Tuple[Decimal, ...]
    band_labels: Tuple[str, ...]


LEVEL_CONFIG: Tuple[LevelConfig, ...] = (
    LevelConfig(
        ManpowerLevel.L1, 35,
        (Decimal("0.25"), Decimal("0.50"), Decimal("0.75"), Decimal("1.00")),
        ("2–3 years", "3–4 years", "4–5 years", "5+ years"),
    ),
    LevelConfig(
        ManpowerLevel.L2, 25,
        (Decimal("0.33"), Decimal("0.66"), Decimal("1.00")),
        ("6–7 years", "7–8 years", "8+ years"),
    ),
    LevelConfig(
        ManpowerLevel.L3, 40,
        (Decimal("0.25"), Decimal("0.50"), Decimal("0.75"), Decimal("1.00")),
        ("9–10 years", "10–11 years", "11–12 years", "12+ years"),
    ),
)


@dataclass
class LevelScore:
    """Per-level breakdown."""
    level: ManpowerLevel
    average_weight: Decimal  # [0, 1]
    weighted_score: Decimal  # average_weight × category weight
    headcount: Decimal
    band_labels: Tuple[str, ...] = ()


@dataclass
class ManpowerResult:
    """Output of ManpowerCalculator.calculate()."""
    total: Decimal
    levels: List[LevelScore] = field(default_factory=list)


def _level_score(
    counts: Sequence, band_weights: Sequence[Decimal], category_weight: int
) -> Tuple[Decimal, Decimal, Decimal]:
    sum_x = ZERO
    sum_zw = ZERO
    for idx, raw_count in enumerate(counts):
        count = as_decimal(raw_count)
        if count <= 0:
            count = ZERO
        weight = band_weights[idx] if idx < len(band_weights) else ZERO
        sum_x += count
        sum_zw += count * weight

    avg = sum_zw / sum_x if sum_x > 0 else ZERO
    return avg, avg * category_weight, sum_x


class ManpowerCalculator:
    """Calculate Manpower score from per-band headcounts."""

    def calculate(self, inputs: ManpowerInputs) -> ManpowerResult:
        bands: Dict[ManpowerLevel, Sequence] = {
            ManpowerLevel.L1: inputs.l1_bands,
            ManpowerLevel.L2: inputs.l2_bands,
            ManpowerLevel.L3: inputs.l3_bands,
        }

        levels: List[LevelScore] = []
        for cfg in LEVEL_CONFIG:
            avg, weighted, headcount = _level_score(
                bands[cfg.level], cfg.band_weights, cfg.category_weight
            )
            levels.append(LevelScore(
                level=cfg.level,
                average_weight=avg,
                weighted_score=weighted,
                headcount=headcount,
                band_labels=cfg.band_labels,
            ))

        total = sum((lvl.weighted_score for lvl in levels), ZERO)

        logger.info(
            "manpower_calculated",
            extra={
                "l1_score": float(levels[0].weighted_score),
                "l2_score": float(levels[1].weighted_score),
                "l3_score": float(levels[2].weighted_score),
                "manpower_score": float(total),
            },
        )

        return ManpowerResult(total=total, levels=levels)


def compute_manpower_score(inputs: ManpowerInputs) -> ManpowerResult:
    """Manpower {total, levels[3]}."""
    return ManpowerCalculator().calculate(inputs)
