"""
Raw scoring and normalization onto the common 0-10 scale.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from assessment.domain.errors import ScoreRangeError

_ONE_DECIMAL = Decimal("0.1")


class ScoringEngine:
    """Reduces a validated answer set to a raw integer score."""

    def score(self, answers: Sequence[int]) -> int:
        """Sum the answer scores. Answers must already pass QuestionCatalog.validate."""
        return sum(answers)


class Normalizer:
    """Maps a raw score in [min_raw, max_raw] linearly onto [0.0, 10.0]."""

    def __init__(self, min_raw: int, max_raw: int) -> None:
        if max_raw <= min_raw:
            raise ValueError(f"max_raw ({max_raw}) must be greater than min_raw ({min_raw})")
        self.min_raw = min_raw
        self.max_raw = max_raw

    def normalize(self, raw_score: int) -> float:
        """
        Rescale and round to one decimal, half away from zero.

        Raises:
            ScoreRangeError: raw_score lies outside [min_raw, max_raw]; this points at a
                catalog/engine mismatch and is never clamped.
        """
        if not self.min_raw <= raw_score <= self.max_raw:
            raise ScoreRangeError(
                f"raw score {raw_score} outside [{self.min_raw}, {self.max_raw}]"
            )

        # Exact arithmetic so x.x5 boundaries round the same way every time
        scaled = Decimal(raw_score - self.min_raw) * 10 / Decimal(self.max_raw - self.min_raw)
        return float(scaled.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
