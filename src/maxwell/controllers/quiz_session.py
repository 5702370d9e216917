"""
Quiz session state machine.

selecting_length -> generating -> in_progress -> submitted, with retry from
in_progress or submitted back to a fresh selecting_length session. Every
transition takes a session and returns a new one; inputs are never mutated.
"""

import math
from typing import List

from maxwell.controllers.config import QUIZ_LENGTHS
from maxwell.schemas import (
    OPTION_LETTERS,
    QuizPhase,
    QuizQuestion,
    QuizReviewItem,
    QuizScore,
    QuizSession,
    StudySuggestion,
)


class QuizTransitionError(ValueError):
    """A transition was applied in the wrong phase or with invalid input."""


class QuizInputError(QuizTransitionError):
    """The transition was allowed but its argument was not (length, answer letter)."""


def _require_phase(session: QuizSession, *phases: QuizPhase) -> None:
    if session.phase not in phases:
        allowed = ", ".join(phase.value for phase in phases)
        raise QuizTransitionError(
            f"Quiz is {session.phase.value}; expected one of: {allowed}"
        )


def new_session() -> QuizSession:
    return QuizSession()


def choose_length(session: QuizSession, length: int) -> QuizSession:
    _require_phase(session, QuizPhase.SELECTING_LENGTH)
    if length not in QUIZ_LENGTHS:
        raise QuizInputError(
            f"Unsupported quiz length {length}; choose one of {list(QUIZ_LENGTHS)}"
        )
    return session.model_copy(
        update={"phase": QuizPhase.GENERATING, "quiz_length": length, "error": None}
    )


def fail_generation(session: QuizSession, message: str) -> QuizSession:
    _require_phase(session, QuizPhase.GENERATING)
    return new_session().model_copy(update={"error": message})


def complete_generation(session: QuizSession, questions: List[QuizQuestion]) -> QuizSession:
    _require_phase(session, QuizPhase.GENERATING)
    if not questions:
        return fail_generation(session, "The model did not return any valid questions")
    return session.model_copy(
        update={
            "phase": QuizPhase.IN_PROGRESS,
            "questions": list(questions),
            "answers": {},
            "current_index": 0,
            "error": None,
        }
    )


def current_question(session: QuizSession) -> QuizQuestion:
    _require_phase(session, QuizPhase.IN_PROGRESS, QuizPhase.SUBMITTED)
    return session.questions[session.current_index]


def select_answer(session: QuizSession, letter: str) -> QuizSession:
    _require_phase(session, QuizPhase.IN_PROGRESS)
    letter = (letter or "").strip().upper()
    if letter not in OPTION_LETTERS:
        raise QuizInputError(f"Answer must be one of {', '.join(OPTION_LETTERS)}")
    answers = dict(session.answers)
    answers[current_question(session).id] = letter
    return session.model_copy(update={"answers": answers})


def go_to_question(session: QuizSession, index: int) -> QuizSession:
    _require_phase(session, QuizPhase.IN_PROGRESS)
    clamped = max(0, min(len(session.questions) - 1, index))
    return session.model_copy(update={"current_index": clamped})


def next_question(session: QuizSession) -> QuizSession:
    return go_to_question(session, session.current_index + 1)


def previous_question(session: QuizSession) -> QuizSession:
    return go_to_question(session, session.current_index - 1)


def is_last_question(session: QuizSession) -> bool:
    return session.current_index >= len(session.questions) - 1


def answered_count(session: QuizSession) -> int:
    return sum(1 for question in session.questions if question.id in session.answers)


def can_submit(session: QuizSession) -> bool:
    return (
        session.phase == QuizPhase.IN_PROGRESS
        and bool(session.questions)
        and answered_count(session) == len(session.questions)
    )


def compute_score(session: QuizSession) -> QuizScore:
    review = []
    for question in session.questions:
        chosen = session.answers.get(question.id)
        review.append(
            QuizReviewItem(
                question_id=question.id,
                chosen_letter=chosen,
                correct_letter=question.correct_letter,
                is_correct=chosen == question.correct_letter,
            )
        )
    correct = sum(1 for item in review if item.is_correct)
    total = len(review)
    # Half-up rounding so 12.5 shows as 13
    percentage = int(math.floor(100 * correct / total + 0.5)) if total else 0
    return QuizScore(correct=correct, total=total, percentage=percentage, review=review)


def missed_questions(session: QuizSession) -> List[QuizQuestion]:
    return [
        question
        for question in session.questions
        if session.answers.get(question.id) != question.correct_letter
    ]


def submit(session: QuizSession) -> QuizSession:
    _require_phase(session, QuizPhase.IN_PROGRESS)
    if not can_submit(session):
        unanswered = len(session.questions) - answered_count(session)
        raise QuizTransitionError(
            f"Answer every question before submitting ({unanswered} unanswered)"
        )
    return session.model_copy(
        update={
            "phase": QuizPhase.SUBMITTED,
            "submitted": True,
            "score": compute_score(session),
            "suggestions": [],
            "suggestions_loading": bool(missed_questions(session)),
        }
    )


def attach_suggestions(session: QuizSession, suggestions: List[StudySuggestion]) -> QuizSession:
    _require_phase(session, QuizPhase.SUBMITTED)
    return session.model_copy(
        update={"suggestions": list(suggestions), "suggestions_loading": False}
    )


def retry(session: QuizSession) -> QuizSession:
    _require_phase(session, QuizPhase.IN_PROGRESS, QuizPhase.SUBMITTED)
    return new_session()
