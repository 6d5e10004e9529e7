"""
Decimal Utilities
soc_efficacy/scoring/utils.py

Provides precision-safe decimal math shared by the domain scorers.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

Number = Union[int, float, Decimal]

ZERO = Decimal("0")


def as_decimal(value: Number) -> Decimal:
    """Convert a caller-supplied number to Decimal without float artefacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def to_decimal(value: Number, places: int = 4) -> Decimal:
    """Convert number to Decimal with explicit precision."""
    return as_decimal(value).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("100"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def safe_ratio(numerator: Number, denominator: Number) -> Decimal:
    """
    Zero-guarded ratio used by the Operations and Enrichment scorers.

    Returns Decimal("0") when denominator <= 0 or numerator <= 0,
    otherwise numerator / denominator. The result is NOT capped at 1.

    Examples:
        >>> safe_ratio(10, 0)
        Decimal('0')
        >>> safe_ratio(-5, 10)
        Decimal('0')
        >>> safe_ratio(5, 10)
        Decimal('0.5')
    """
    n = as_decimal(numerator)
    d = as_decimal(denominator)
    if d <= 0 or n <= 0:
        return ZERO
    return n / d


def count_true(flags: Iterable[bool]) -> int:
    """Number of truthy flags."""
    return sum(1 for flag in flags if flag)
