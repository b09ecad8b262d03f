"""VibeFinder - rank venues against a short mood questionnaire."""

from vibefinder.models import AnswerSet, Recommendation, ScoredResult, Venue
from vibefinder.recommender import RecommendationEngine, build_region_options, explain

__all__ = [
    "AnswerSet",
    "Recommendation",
    "RecommendationEngine",
    "ScoredResult",
    "Venue",
    "build_region_options",
    "explain",
]
