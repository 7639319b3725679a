"""Quiz endpoints - submit, read and retake the friendship quiz."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from friendmatch.db.database import get_db
from friendmatch.schemas.quiz import QuizDeleteResponse, QuizQuestion, QuizState, QuizSubmit
from friendmatch.services.quiz_option_service import quiz_option_service
from friendmatch.services.quiz_service import quiz_service

router = APIRouter()


@router.get("/options", response_model=list[QuizQuestion])
async def list_quiz_options():
    """The quiz questions and their allowed answers."""
    return quiz_option_service.list_questions()


@router.post("/", response_model=QuizState, status_code=201)
async def submit_quiz(data: QuizSubmit, user_id: str, db: AsyncSession = Depends(get_db)):
    """Store a new quiz submission for user_id."""
    quiz = await quiz_service.submit(db, user_id, data)
    return QuizState.model_validate(quiz)


@router.get("/me", response_model=QuizState | None)
async def get_my_quiz(user_id: str, db: AsyncSession = Depends(get_db)):
    """The user's latest quiz, or null if they have not taken it."""
    quiz = await quiz_service.get_latest(db, user_id)
    return QuizState.model_validate(quiz) if quiz else None


@router.delete("/", response_model=QuizDeleteResponse)
async def delete_quiz(user_id: str, db: AsyncSession = Depends(get_db)):
    """Delete all of the user's quiz responses so they can retake it."""
    deleted = await quiz_service.delete_all(db, user_id)
    return QuizDeleteResponse(success=True, deleted_count=deleted)
