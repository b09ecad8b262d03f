"""The four additive scoring bands: category, mood, region, rating."""

from vibefinder.models import AnswerSet, Venue

from .base import BaseBand, round_half_up

CAFE_TYPE = "cafe"
ANY_REGION = "any"
UPSCALE_PRICES = {"$$$", "$$$$"}

# Haystack keywords per mood; "fancy" is price based and has none
MOOD_KEYWORDS: dict[str, tuple[str, ...]] = {
    "chill": ("quiet", "cozy", "هادئ"),
    "lively": ("music", "busy", "crowded"),
    "work": ("wifi", "quiet"),
}


def _is_cafe(venue: Venue) -> bool:
    return venue.type == CAFE_TYPE


class CategoryBand(BaseBand):
    """Food answers match non-cafes, coffee answers match cafes."""

    @property
    def name(self) -> str:
        return "category"

    def score(self, venue: Venue, answers: AnswerSet, haystack: str) -> int:
        if answers.category == "food" and not _is_cafe(venue):
            return self.config.category_points
        if answers.category == "coffee" and _is_cafe(venue):
            return self.config.category_points
        return 0


class MoodBand(BaseBand):
    """Keyword and price signals for the requested mood."""

    @property
    def name(self) -> str:
        return "mood"

    def score(self, venue: Venue, answers: AnswerSet, haystack: str) -> int:
        if self.matches(venue, answers.mood, haystack):
            return self.config.mood_points
        return 0

    def matches(self, venue: Venue, mood: str, haystack: str) -> bool:
        if mood == "fancy":
            return venue.price_range in UPSCALE_PRICES
        keywords = MOOD_KEYWORDS.get(mood)
        if keywords is None:
            return False
        if any(word in haystack for word in keywords):
            return True
        return mood == "work" and _is_cafe(venue)


class RegionBand(BaseBand):
    """Exact city match, fuzzy haystack match, or the flat "any" bonus."""

    @property
    def name(self) -> str:
        return "region"

    def score(self, venue: Venue, answers: AnswerSet, haystack: str) -> int:
        region = answers.region
        if region == ANY_REGION:
            return self.config.region_any_points
        if not region:
            return 0
        wanted = region.lower()
        if venue.city.lower() == wanted:
            return self.config.region_exact_points
        if wanted in haystack:
            return self.config.region_fuzzy_points
        return 0


class RatingBand(BaseBand):
    """Rating times the multiplier, rounded to whole points."""

    @property
    def name(self) -> str:
        return "rating"

    def score(self, venue: Venue, answers: AnswerSet, haystack: str) -> int:
        return round_half_up(self.exact_score(venue, answers, haystack))

    def exact_score(self, venue: Venue, answers: AnswerSet, haystack: str) -> float:
        return venue.rating * self.config.rating_multiplier


DEFAULT_BANDS = (CategoryBand, MoodBand, RegionBand, RatingBand)
