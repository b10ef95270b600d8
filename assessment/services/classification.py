"""
Recommendation tiers and chart colors from a normalized score.

Both share one set of thresholds: scores up to and including 3.0 are high need,
up to and including 7.0 moderate need, anything above low need.
"""

from assessment.domain.errors import ScoreRangeError
from assessment.domain.models import CarePathway, ColorBucket, Tier

HIGH_NEED_CEILING = 3.0
MODERATE_NEED_CEILING = 7.0


def _check_range(normalized_score: float) -> None:
    if not 0.0 <= normalized_score <= 10.0:
        raise ScoreRangeError(f"normalized score {normalized_score} outside [0, 10]")


class RecommendationClassifier:
    """Classifies normalized scores into care tiers."""

    def classify(self, normalized_score: float) -> Tier:
        _check_range(normalized_score)
        if normalized_score <= HIGH_NEED_CEILING:
            return Tier.HIGH_NEED
        if normalized_score <= MODERATE_NEED_CEILING:
            return Tier.MODERATE_NEED
        return Tier.LOW_NEED

    def color_for(self, normalized_score: float) -> ColorBucket:
        """Chart color for a score, so the UI never re-derives tiers."""
        match self.classify(normalized_score):
            case Tier.HIGH_NEED:
                return ColorBucket.LOW
            case Tier.MODERATE_NEED:
                return ColorBucket.MID
            case Tier.LOW_NEED:
                return ColorBucket.HIGH
            case _:
                raise ValueError(f"Unknown tier for score: {normalized_score}")

    @staticmethod
    def care_pathway(tier: Tier) -> CarePathway:
        """Next step to offer for a tier."""
        match tier:
            case Tier.HIGH_NEED:
                return CarePathway.ONE_TO_ONE_CHAT
            case Tier.MODERATE_NEED:
                return CarePathway.GROUP_SESSIONS
            case Tier.LOW_NEED:
                return CarePathway.SELF_CARE
            case _:
                raise ValueError(f"Unknown tier: {tier}")
