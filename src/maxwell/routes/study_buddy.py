from fastapi import APIRouter, Depends, HTTPException

from maxwell.controllers import quiz_session
from maxwell.controllers.quiz_session import QuizInputError, QuizTransitionError
from maxwell.controllers.study_buddy import generate_quiz, load_study_suggestions
from maxwell.schemas import (
    QuizAnswerRequest,
    QuizGenerateRequest,
    QuizNavigateRequest,
    QuizPhase,
    QuizSession,
    QuizSessionRequest,
)
from maxwell.utils.model_client import CircuitModelClient, get_model_client


router = APIRouter(prefix="/api/study-buddy/quiz", tags=["Study Buddy"])


def _apply(transition, *args) -> QuizSession:
    try:
        return transition(*args)
    except QuizInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except QuizTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/generate", response_model=QuizSession)
def generate(
    request: QuizGenerateRequest,
    client: CircuitModelClient = Depends(get_model_client),
):
    session = _apply(generate_quiz, quiz_session.new_session(), request.length, client)
    if session.phase != QuizPhase.IN_PROGRESS:
        raise HTTPException(status_code=502, detail=session.error)
    return session


@router.post("/answer", response_model=QuizSession)
def answer(request: QuizAnswerRequest):
    return _apply(quiz_session.select_answer, request.session, request.letter)


@router.post("/navigate", response_model=QuizSession)
def navigate(request: QuizNavigateRequest):
    if request.index is not None:
        return _apply(quiz_session.go_to_question, request.session, request.index)
    if request.direction == "next":
        return _apply(quiz_session.next_question, request.session)
    if request.direction == "previous":
        return _apply(quiz_session.previous_question, request.session)
    raise HTTPException(status_code=400, detail="Provide a direction or an index")


@router.post("/submit", response_model=QuizSession)
def submit(request: QuizSessionRequest):
    return _apply(quiz_session.submit, request.session)


@router.post("/suggestions", response_model=QuizSession)
def suggestions(
    request: QuizSessionRequest,
    client: CircuitModelClient = Depends(get_model_client),
):
    return _apply(load_study_suggestions, request.session, client)


@router.post("/retry", response_model=QuizSession)
def retry(request: QuizSessionRequest):
    return _apply(quiz_session.retry, request.session)
