"""Quiz service - stores quiz submissions and keeps the profile's quiz flag in sync."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from friendmatch.exceptions import UserNotFoundError
from friendmatch.models.profile import Profile
from friendmatch.models.quiz import QuizResponse
from friendmatch.models.user import User
from friendmatch.schemas.quiz import QuizSubmit
from friendmatch.services.quiz_option_service import quiz_option_service

logger = logging.getLogger(__name__)


class QuizService:
    @staticmethod
    async def _require_user(db: AsyncSession, user_id: str) -> None:
        if await db.get(User, user_id) is None:
            raise UserNotFoundError(user_id)

    @staticmethod
    async def _set_quiz_completed(db: AsyncSession, user_id: str, completed: bool) -> None:
        profile = await db.get(Profile, user_id)
        if profile is None:
            profile = Profile(id=user_id)
            db.add(profile)
        profile.quiz_completed = completed

    @staticmethod
    async def submit(db: AsyncSession, user_id: str, data: QuizSubmit) -> QuizResponse:
        """Validate and store a new submission. Older submissions are kept; the newest wins."""
        await QuizService._require_user(db, user_id)
        quiz_option_service.validate(data)

        quiz = QuizResponse(
            user_id=user_id,
            interests=data.interests,
            social_style=data.social_style,
            friendship_values=data.friendship_values,
            communication_style=data.communication_style,
            hangout_vibe=data.hangout_vibe,
            availability=data.availability.model_dump(),
            dealbreakers=data.dealbreakers,
            bio=data.bio,
        )
        db.add(quiz)
        await QuizService._set_quiz_completed(db, user_id, True)
        await db.flush()
        await db.refresh(quiz)

        logger.info("Stored quiz %s for user %s", quiz.id, user_id)
        return quiz

    @staticmethod
    async def get_latest(db: AsyncSession, user_id: str) -> QuizResponse | None:
        result = await db.execute(
            select(QuizResponse)
            .where(QuizResponse.user_id == user_id)
            .order_by(QuizResponse.created_at.desc(), QuizResponse.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def delete_all(db: AsyncSession, user_id: str) -> int:
        """Delete every quiz the user submitted so they can retake it. Returns the count."""
        await QuizService._require_user(db, user_id)
        result = await db.execute(
            delete(QuizResponse).where(QuizResponse.user_id == user_id)
        )
        deleted = result.rowcount
        await QuizService._set_quiz_completed(db, user_id, False)
        await db.flush()

        logger.info("Deleted %d quiz response(s) for user %s", deleted, user_id)
        return deleted


quiz_service = QuizService()
