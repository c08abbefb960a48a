"""Score to tier mapping and the public routing entry points."""

import logging

from .contracts import Tier, TierDecision, TierInputs
from .errors import InvalidInput
from .scoring import ScoreCalculator

logger = logging.getLogger(__name__)

TIER_2_THRESHOLD = 3
TIER_3_THRESHOLD = 7


class TierSelector:
    """Maps a non-negative score onto a Tier. Boundaries go to the higher tier."""

    def select(self, score: int) -> Tier:
        if isinstance(score, bool) or not isinstance(score, int) or score < 0:
            raise InvalidInput("score", f"expected a non-negative integer, got {score!r}")
        if score >= TIER_3_THRESHOLD:
            return Tier.TIER_3
        if score >= TIER_2_THRESHOLD:
            return Tier.TIER_2
        return Tier.TIER_1


_calculator = ScoreCalculator()
_selector = TierSelector()


def compute_tier(inputs: TierInputs) -> Tier:
    """Score the inputs and return their tier."""
    return _selector.select(_calculator.calculate(inputs))


def decide(inputs: TierInputs) -> TierDecision:
    """Build the full routing decision: score, breakdown, tier and modules."""
    from ..context.modules import context_modules_for

    contributions = _calculator.explain(inputs)
    score = sum(c.points for c in contributions)
    tier = _selector.select(score)
    logger.info(f"Routed {inputs.entity_count} entities at scale {inputs.scale.value} to {tier.name} (score {score})")
    return TierDecision(
        inputs=inputs,
        score=score,
        tier=tier,
        contributions=contributions,
        modules=context_modules_for(tier),
    )
