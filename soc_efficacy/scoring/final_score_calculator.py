"""
scoring/final_score_calculator.py — Final SOC Efficacy Score

Combines the five normalised domain scores with fixed percentage weights:

    Final = Σ(score_d × weight_d) / 100

    coverage 25 · operations 25 · manpower 20 · governance 15 · enrichment 15

The final score is never stored; it is recomputed from DomainScoreState on
every call.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Dict, List, Mapping, Union

from soc_efficacy.core.exceptions import UnknownDomainException
from soc_efficacy.models.enumerations import DomainKey
from soc_efficacy.scoring.utils import Number, ZERO, as_decimal

logger = logging.getLogger(__name__)

DOMAIN_WEIGHTS: Dict[DomainKey, int] = {
    DomainKey.COVERAGE: 25,
    DomainKey.OPERATIONS: 25,
    DomainKey.MANPOWER: 20,
    DomainKey.GOVERNANCE: 15,
    DomainKey.ENRICHMENT: 15,
}

ScoreListener = Callable[[DomainKey, Decimal], None]


def _domain_key(domain: Union[str, DomainKey]) -> DomainKey:
    try:
        return DomainKey(domain)
    except ValueError:
        raise UnknownDomainException(str(domain)) from None


@dataclass
class DomainScoreState:
    """
    Current normalised score per domain for one assessment session.

    Mutated one domain at a time via update(); registered listeners are
    called synchronously after each change.
    """
    scores: Dict[DomainKey, Decimal] = field(
        default_factory=lambda: {key: ZERO for key in DomainKey}
    )
    _listeners: List[ScoreListener] = field(default_factory=list, repr=False, compare=False)

    def update(self, domain: Union[str, DomainKey], score: Number) -> None:
        key = _domain_key(domain)
        value = as_decimal(score)
        self.scores[key] = value
        logger.debug("domain_score_updated", extra={"domain": key.value, "score": float(value)})
        for listener in list(self._listeners):
            listener(key, value)

    def get(self, domain: Union[str, DomainKey]) -> Decimal:
        return self.scores.get(_domain_key(domain), ZERO)

    def subscribe(self, listener: ScoreListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ScoreListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)


@dataclass
class FinalScoreResult:
    """Output of FinalScoreCalculator.calculate()."""
    final_score: Decimal
    contributions: Dict[DomainKey, Decimal]  # (score × weight) / 100
    weights: Dict[DomainKey, int]


class FinalScoreCalculator:
    """Weighted aggregation of the five domain scores."""

    def __init__(self, weights: Mapping[DomainKey, int] = DOMAIN_WEIGHTS):
        self.weights = dict(weights)

    def calculate(
        self, scores: Union[DomainScoreState, Mapping[Union[str, DomainKey], Number]]
    ) -> FinalScoreResult:
        """
        Args:
            scores: DomainScoreState or a plain mapping of domain -> score.
                    Domains missing from a plain mapping count as 0.

        Examples:
            >>> FinalScoreCalculator().calculate({d: 50 for d in DomainKey}).final_score == 50
            True
        """
        if isinstance(scores, DomainScoreState):
            lookup = scores.scores
        else:
            lookup = {_domain_key(k): as_decimal(v) for k, v in scores.items()}

        contributions: Dict[DomainKey, Decimal] = {}
        for key, weight in self.weights.items():
            contributions[key] = (lookup.get(key, ZERO) * weight) / 100

        final = sum(contributions.values(), ZERO)

        logger.info(
            "final_score_calculated",
            extra={
                "contributions": {k.value: float(v) for k, v in contributions.items()},
                "final_score": float(final),
            },
        )

        return FinalScoreResult(
            final_score=final,
            contributions=contributions,
            weights=dict(self.weights),
        )


def compute_final_score(
    scores: Union[DomainScoreState, Mapping[Union[str, DomainKey], Number]],
) -> Decimal:
    """Weighted sum of the domain scores divided by 100."""
    return FinalScoreCalculator().calculate(scores).final_score
