"""Band interface, scoring configuration and shared utilities."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from vibefinder.models import AnswerSet, Venue


class ScoringConfig(BaseModel):
    """Point values for each scoring band."""

    category_points: int = 50
    mood_points: int = 30
    region_exact_points: int = 20
    region_fuzzy_points: int = 15
    region_any_points: int = 10
    rating_multiplier: float = 2.0
    top_k: int = 3

    @property
    def ceiling(self) -> int:
        """Highest reachable score (rating capped at 5)."""
        return (
            self.category_points
            + self.mood_points
            + self.region_exact_points
            + round_half_up(5.0 * self.rating_multiplier)
        )


def round_half_up(value: float) -> int:
    """Round to the nearest int, halves away from zero for non-negatives."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def build_haystack(venue: Venue) -> str:
    """Lowercase text blob used for keyword mood and fuzzy region matching.

    Field order matters only for readability; missing fields are empty strings.
    """
    parts = [
        venue.city,
        venue.address,
        venue.name_ar,
        venue.name,
        venue.cuisine_type,
        venue.description,
    ]
    return " ".join(parts).lower()


class BaseBand(ABC):
    """Abstract base class for an additive scoring band.

    All bands must implement:
    - score(): points this venue earns for the given answers
    - name: Human-readable identifier
    """

    def __init__(self, config: ScoringConfig | None = None):
        self.config = config or ScoringConfig()

    @abstractmethod
    def score(self, venue: Venue, answers: AnswerSet, haystack: str) -> int:
        """Points earned by venue; never raises on unrecognized answers."""
        pass

    def exact_score(self, venue: Venue, answers: AnswerSet, haystack: str) -> float:
        """Unrounded points, used only to order venues."""
        return float(self.score(venue, answers, haystack))

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for this band."""
        pass
