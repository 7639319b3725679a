"""Quiz store - where the match service reads quiz records from."""

from collections.abc import Sequence
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from friendmatch.core.compatibility import QuizRecord
from friendmatch.models.quiz import QuizResponse


class QuizStore(Protocol):
    async def find_latest_quiz(self, user_id: str) -> QuizRecord | None: ...

    async def find_all_quizzes_excluding(self, user_id: str) -> Sequence[QuizRecord]:
        """Every quiz not owned by user_id; may hold several per user."""
        ...


class SqlQuizStore:
    """QuizStore over the quiz_responses table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_latest_quiz(self, user_id: str) -> QuizRecord | None:
        result = await self.db.execute(
            select(QuizResponse)
            .where(QuizResponse.user_id == user_id)
            .order_by(QuizResponse.created_at.desc(), QuizResponse.id.desc())
            .limit(1)
        )
        row = result.scalar_one_or_none()
        return QuizRecord.model_validate(row) if row is not None else None

    async def find_all_quizzes_excluding(self, user_id: str) -> list[QuizRecord]:
        result = await self.db.execute(
            select(QuizResponse)
            .where(QuizResponse.user_id != user_id)
            .order_by(QuizResponse.created_at, QuizResponse.id)
        )
        return [QuizRecord.model_validate(row) for row in result.scalars()]
