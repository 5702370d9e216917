from maxwell.controllers.config import logger
from maxwell.controllers.quiz_session import (
    attach_suggestions,
    choose_length,
    complete_generation,
    fail_generation,
    missed_questions,
)
from maxwell.schemas import QuizSession
from maxwell.utils.model_client import CircuitModelClient, ModelRequestError
from maxwell.utils.response_extractor import parse_quiz, parse_study_suggestions


def generate_quiz(session: QuizSession, length: int, client: CircuitModelClient) -> QuizSession:
    """Run selecting_length -> generating -> in_progress, or back to selecting_length with an error."""
    session = choose_length(session, length)

    try:
        text = client.generate_quiz(length)
    except ModelRequestError as e:
        logger.error(f"Quiz generation error: {e}")
        return fail_generation(session, f"Failed to generate quiz: {e}")

    questions = parse_quiz(text)
    logger.info(f"Parsed {len(questions)} of {length} requested quiz questions")
    return complete_generation(session, questions)


def load_study_suggestions(session: QuizSession, client: CircuitModelClient) -> QuizSession:
    """Ask the model for study topics covering the missed questions.

    A failed request leaves the suggestions empty; the score is not touched.
    """
    missed = missed_questions(session)
    if not missed:
        return attach_suggestions(session, [])

    try:
        text = client.suggest_study_topics([question.question_text for question in missed])
    except ModelRequestError as e:
        logger.error(f"Error generating suggestions: {e}")
        return attach_suggestions(session, [])

    return attach_suggestions(session, parse_study_suggestions(text))
