import logging

from fastapi import APIRouter, HTTPException, Depends, status
from typing import Annotated
from sqlalchemy.orm import Session

from ...core.database import get_session
from ...core.errors import RowDecodeError, StoreFailure
from ...schemas.quiz_schemas import QuizCreateIn, QuizOut
from ...services.quiz_service import QuizService
from ...repositories.quiz_repository import QuizRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quizes", tags=["quizzes"])

# Dependency factory for the service; the session comes from the app's pool

def get_service(session: Annotated[Session, Depends(get_session)]) -> QuizService:
    return QuizService(QuizRepository(session))

ServiceDep = Annotated[QuizService, Depends(get_service)]

@router.get("", response_model=list[QuizOut])
def list_quizzes(svc: ServiceDep):
    try:
        quizzes = svc.list_quizzes()
    except RowDecodeError:
        logger.exception("Error decoding quiz row")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch quizzes")
    except StoreFailure:
        logger.exception("Error querying quizzes")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch quizzes")
    logger.info("Returning %d quizzes", len(quizzes))
    return quizzes

@router.post("", response_model=QuizOut, status_code=status.HTTP_201_CREATED)
def create_quiz(payload: QuizCreateIn, svc: ServiceDep):
    logger.info("Received POST request to /api/quizes")
    try:
        return svc.create_quiz(payload.title, payload.description)
    except StoreFailure:
        logger.exception("Error creating quiz")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create quiz")
