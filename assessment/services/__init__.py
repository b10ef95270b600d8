"""
Core services for the self-assessment engine.

This package contains the question catalog, scoring, classification, the
history ledger, and the daily check-in pipeline that ties them together.
"""

from .catalog import DEFAULT_QUESTIONS, QuestionCatalog
from .classification import RecommendationClassifier
from .daily_checkin import Clock, DailyCheckInService, SystemClock
from .ledger import HistoryLedger, HistoryStore
from .progress import ProgressAggregator
from .scoring import Normalizer, ScoringEngine

__all__ = [
    "DEFAULT_QUESTIONS",
    "QuestionCatalog",
    "RecommendationClassifier",
    "Clock",
    "DailyCheckInService",
    "SystemClock",
    "HistoryLedger",
    "HistoryStore",
    "ProgressAggregator",
    "Normalizer",
    "ScoringEngine",
]
