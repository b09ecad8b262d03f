"""Questionnaire state machine as an immutable state plus pure reducers.

Phases: QUESTION (step 0..n-1) -> CALCULATING -> RESULTS -> (reset) QUESTION.
Every reducer returns a new state; the input state is never modified.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from vibefinder.models import AnswerSet, ScoredResult

from .questions import Question


class QuestionnaireError(ValueError):
    """Base error for questionnaire input problems."""


class InvalidAnswerError(QuestionnaireError):
    """The selected option is not offered by the current question."""


class InvalidTransitionError(QuestionnaireError):
    """The reducer does not apply in the current phase."""


class Phase(Enum):
    QUESTION = "question"
    CALCULATING = "calculating"
    RESULTS = "results"


class QuestionnaireState(BaseModel):
    """Snapshot of one questionnaire run."""

    model_config = ConfigDict(frozen=True)

    phase: Phase = Phase.QUESTION
    step: int = 0
    answers: dict[str, str] = Field(default_factory=dict)
    results: list[ScoredResult] = Field(default_factory=list)

    def answer_set(self) -> AnswerSet:
        return AnswerSet(**self.answers)


def initial_state() -> QuestionnaireState:
    return QuestionnaireState()


def _require(state: QuestionnaireState, phase: Phase, action: str) -> None:
    if state.phase is not phase:
        raise InvalidTransitionError(
            f"Cannot {action} while {state.phase.value} (expected {phase.value})"
        )


def select(
    state: QuestionnaireState,
    questions: list[Question],
    option_id: str,
) -> QuestionnaireState:
    """Record an answer for the current question and advance.

    Reselecting after going back overwrites the earlier answer. Answering
    the last question moves to CALCULATING.
    """
    _require(state, Phase.QUESTION, "select an option")
    question = questions[state.step]
    option = question.get_option(option_id)
    if option is None:
        raise InvalidAnswerError(
            f"{option_id!r} is not an option for {question.id!r} "
            f"(choose from: {', '.join(question.option_ids)})"
        )

    answers = {**state.answers, question.id: option.id}
    if state.step < len(questions) - 1:
        return state.model_copy(update={"answers": answers, "step": state.step + 1})
    return state.model_copy(update={"answers": answers, "phase": Phase.CALCULATING})


def back(state: QuestionnaireState) -> QuestionnaireState:
    """Go to the previous question, keeping all answers. No-op on the first."""
    _require(state, Phase.QUESTION, "go back")
    if state.step == 0:
        return state
    return state.model_copy(update={"step": state.step - 1})


def complete(state: QuestionnaireState, results: list[ScoredResult]) -> QuestionnaireState:
    """Store ranked results once calculation is done."""
    _require(state, Phase.CALCULATING, "complete")
    return state.model_copy(update={"phase": Phase.RESULTS, "results": list(results)})


def reset(state: QuestionnaireState) -> QuestionnaireState:
    """Start over from the first question with no answers or results."""
    _require(state, Phase.RESULTS, "reset")
    return initial_state()
