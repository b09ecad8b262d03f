"""Pydantic models for venues, questionnaire answers and ranked results."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_RATING = 5.0


class Venue(BaseModel):
    """Canonical venue record as seen by the recommendation engine."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    name_ar: str = Field(default="", description="Localized (Arabic) display name")
    city: str = Field(default="", description="Free text, may be noisy")
    address: str = ""
    type: str = Field(default="", description="'cafe' or anything else")
    cuisine_type: str = ""
    price_range: str = Field(default="", description="'$' .. '$$$$', empty when unknown")
    rating: float = 0.0
    description: str = ""
    image_url: Optional[str] = None

    @field_validator(
        "name", "name_ar", "city", "address", "type", "cuisine_type",
        "price_range", "description",
        mode="before",
    )
    @classmethod
    def _none_to_empty(cls, value):
        return "" if value is None else value

    @field_validator("rating", mode="before")
    @classmethod
    def _clamp_rating(cls, value):
        if value is None:
            return 0.0
        return min(MAX_RATING, max(0.0, float(value)))

    def display_name(self, locale: str = "en") -> str:
        if locale == "ar" and self.name_ar:
            return self.name_ar
        return self.name or self.name_ar


class AnswerSet(BaseModel):
    """Questionnaire answers: mood, category and region.

    Values are plain strings so the engine can score anything it is handed.
    Validation against the offered options happens in the questionnaire.
    """

    model_config = ConfigDict(frozen=True)

    mood: str = ""
    category: str = ""
    region: str = "any"


class ScoredResult(BaseModel):
    """A venue with its score and explanation for one query."""

    venue: Venue
    score: int
    match_reason: str = ""
    match_percent: int = Field(default=0, description="Display-only normalization of score")


class Recommendation(BaseModel):
    """Ranked shortlist for one completed questionnaire."""

    answers: AnswerSet
    locale: str = "en"
    results: list[ScoredResult] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.results

    def to_json_for_display(self) -> dict:
        """Serialize for the presentation layer (minimal, frontend-friendly format)."""
        return {
            "answers": self.answers.model_dump(),
            "locale": self.locale,
            "results": [
                {
                    "id": r.venue.id,
                    "name": r.venue.display_name(self.locale),
                    "city": r.venue.city,
                    "image": r.venue.image_url,
                    "rating": r.venue.rating,
                    "priceRange": r.venue.price_range,
                    "score": r.score,
                    "matchPercent": r.match_percent,
                    "matchReason": r.match_reason,
                    "detailsPath": f"/restaurant/{r.venue.id}",
                }
                for r in self.results
            ],
        }
