"""Questionnaire flow: questions, state machine and sessions."""

from .questions import (
    CATEGORY_QUESTION,
    MOOD_QUESTION,
    Option,
    Question,
    build_questions,
    build_region_question,
)
from .session import QuestionnaireSession
from .state import (
    InvalidAnswerError,
    InvalidTransitionError,
    Phase,
    QuestionnaireError,
    QuestionnaireState,
    back,
    complete,
    initial_state,
    reset,
    select,
)

__all__ = [
    "CATEGORY_QUESTION",
    "InvalidAnswerError",
    "InvalidTransitionError",
    "MOOD_QUESTION",
    "Option",
    "Phase",
    "Question",
    "QuestionnaireError",
    "QuestionnaireSession",
    "QuestionnaireState",
    "back",
    "build_questions",
    "build_region_question",
    "complete",
    "initial_state",
    "reset",
    "select",
]
