"""Async questionnaire session driving the state machine against a catalog."""

import asyncio

from rich.console import Console

from vibefinder.models import Recommendation, Venue
from vibefinder.recommender import RecommendationEngine

from . import state as sm
from .questions import Question, build_questions

console = Console()

DEFAULT_THINKING_DELAY = 1.5


class QuestionnaireSession:
    """One user's pass through the questionnaire.

    Sessions share nothing, so any number can run concurrently over the
    same catalog.
    """

    def __init__(
        self,
        venues: list[Venue],
        engine: RecommendationEngine | None = None,
        locale: str = "en",
        thinking_delay: float = DEFAULT_THINKING_DELAY,
        verbose: bool = False,
    ):
        self.venues = venues
        self.engine = engine or RecommendationEngine(verbose=verbose)
        self.locale = locale
        self.thinking_delay = thinking_delay
        self.verbose = verbose
        self.questions: list[Question] = build_questions(venues)
        self.state = sm.initial_state()

    @property
    def current_question(self) -> Question | None:
        if self.state.phase is not sm.Phase.QUESTION:
            return None
        return self.questions[self.state.step]

    @property
    def recommendation(self) -> Recommendation | None:
        if self.state.phase is not sm.Phase.RESULTS:
            return None
        return Recommendation(
            answers=self.state.answer_set(),
            locale=self.locale,
            results=self.state.results,
        )

    async def select(self, option_id: str) -> sm.QuestionnaireState:
        """Answer the current question; the last answer triggers ranking."""
        self.state = sm.select(self.state, self.questions, option_id)
        if self.state.phase is sm.Phase.CALCULATING:
            await self._calculate()
        return self.state

    def back(self) -> sm.QuestionnaireState:
        self.state = sm.back(self.state)
        return self.state

    def reset(self) -> sm.QuestionnaireState:
        self.state = sm.reset(self.state)
        return self.state

    async def _calculate(self) -> None:
        # The delay only gives the UI a visible "analyzing" moment
        if self.thinking_delay > 0:
            await asyncio.sleep(self.thinking_delay)

        answers = self.state.answer_set()
        if self.verbose:
            console.print(f"[dim]Ranking {len(self.venues)} venues for {answers.model_dump()}[/dim]")
        results = self.engine.rank(self.venues, answers, self.locale)
        self.state = sm.complete(self.state, results)
