"""Rule-based, localized match reasons."""

from vibefinder.models import AnswerSet, Venue

DEFAULT_LOCALE = "en"
TOP_RATED_THRESHOLD = 4.5

MESSAGES: dict[str, dict[str, str]] = {
    "elegant": {
        "en": "Perfect for an elegant, refined evening",
        "ar": "مثالي لأمسية راقية وأنيقة",
    },
    "focus": {
        "en": "A calm spot to focus and get work done",
        "ar": "مكان هادئ للتركيز وإنجاز العمل",
    },
    "cozy": {
        "en": "A cozy place to unwind and relax",
        "ar": "مكان دافئ ومريح للاسترخاء",
    },
    "top_rated": {
        "en": "One of the top rated places around",
        "ar": "من أعلى الأماكن تقييماً",
    },
    "generic": {
        "en": "Matches your preferences",
        "ar": "يتناسب مع تفضيلاتك",
    },
}

# Checked in order, first match wins
MOOD_REASONS = (
    ("fancy", "elegant"),
    ("work", "focus"),
    ("chill", "cozy"),
)


def reason_key(venue: Venue, answers: AnswerSet) -> str:
    """Pick which message explains this match."""
    for mood, key in MOOD_REASONS:
        if answers.mood == mood:
            return key
    if venue.rating > TOP_RATED_THRESHOLD:
        return "top_rated"
    return "generic"


def explain(venue: Venue, answers: AnswerSet, locale: str = DEFAULT_LOCALE) -> str:
    """Human-readable reason this venue was recommended.

    Unknown locales fall back to English.
    """
    variants = MESSAGES[reason_key(venue, answers)]
    return variants.get(locale, variants[DEFAULT_LOCALE])
