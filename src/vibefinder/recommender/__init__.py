"""Recommendation engine module."""

from .bands import CategoryBand, MoodBand, RatingBand, RegionBand
from .base import BaseBand, ScoringConfig, build_haystack
from .engine import RecommendationEngine
from .explain import explain
from .regions import build_region_options

__all__ = [
    "BaseBand",
    "CategoryBand",
    "MoodBand",
    "RatingBand",
    "RecommendationEngine",
    "RegionBand",
    "ScoringConfig",
    "build_haystack",
    "build_region_options",
    "explain",
]
