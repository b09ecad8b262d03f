"""Bilingual question definitions for the vibe questionnaire."""

from pydantic import BaseModel, Field

from vibefinder.models import Venue
from vibefinder.recommender import build_region_options
from vibefinder.recommender.bands import ANY_REGION


class Option(BaseModel):
    """One selectable answer."""

    id: str
    label_en: str
    label_ar: str = ""

    def label(self, locale: str = "en") -> str:
        if locale == "ar" and self.label_ar:
            return self.label_ar
        return self.label_en


class Question(BaseModel):
    """A question keyed by the answer field it fills."""

    id: str = Field(description="Answer key: 'mood', 'category' or 'region'")
    title_en: str
    title_ar: str = ""
    options: list[Option] = Field(default_factory=list)

    def title(self, locale: str = "en") -> str:
        if locale == "ar" and self.title_ar:
            return self.title_ar
        return self.title_en

    @property
    def option_ids(self) -> list[str]:
        return [o.id for o in self.options]

    def get_option(self, option_id: str) -> Option | None:
        """Exact id match first, then case-insensitive."""
        exact = next((o for o in self.options if o.id == option_id), None)
        if exact is not None:
            return exact
        wanted = option_id.casefold()
        return next((o for o in self.options if o.id.casefold() == wanted), None)


MOOD_QUESTION = Question(
    id="mood",
    title_en="What's the vibe today?",
    title_ar="شو جوّك اليوم؟",
    options=[
        Option(id="chill", label_en="Chill", label_ar="رايق"),
        Option(id="lively", label_en="Lively", label_ar="حيوي"),
        Option(id="fancy", label_en="Fancy", label_ar="فخم"),
        Option(id="work", label_en="Work", label_ar="شغل"),
    ],
)

CATEGORY_QUESTION = Question(
    id="category",
    title_en="Food or coffee?",
    title_ar="أكل ولا قهوة؟",
    options=[
        Option(id="food", label_en="Food", label_ar="أكل"),
        Option(id="coffee", label_en="Coffee", label_ar="قهوة"),
    ],
)

ANY_OPTION = Option(id=ANY_REGION, label_en="Anywhere", label_ar="أي مكان")


def build_region_question(venues: list[Venue]) -> Question:
    """Region question with choices taken from the catalog's cities."""
    options = [Option(id=city, label_en=city) for city in build_region_options(venues)]
    return Question(
        id="region",
        title_en="Preferred region?",
        title_ar="أي منطقة بتفضل؟",
        options=[*options, ANY_OPTION],
    )


def build_questions(venues: list[Venue]) -> list[Question]:
    """The three questions in the order they are asked."""
    return [MOOD_QUESTION, CATEGORY_QUESTION, build_region_question(venues)]
