"""Data models for vibefinder."""

from .venue import (
    AnswerSet,
    Recommendation,
    ScoredResult,
    Venue,
)

__all__ = [
    "AnswerSet",
    "Recommendation",
    "ScoredResult",
    "Venue",
]
