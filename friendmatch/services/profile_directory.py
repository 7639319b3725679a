"""Profile directory - display metadata (name, avatar, bio) for match cards."""

import asyncio
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from friendmatch.models.profile import Profile
from friendmatch.models.user import User
from friendmatch.schemas.user import DisplayMetadata


class ProfileDirectory(Protocol):
    async def find_display_metadata(self, user_id: str) -> DisplayMetadata | None:
        """Return None when no user exists for user_id."""
        ...


class SqlProfileDirectory:
    """ProfileDirectory over the users/profiles tables.

    One AsyncSession cannot run statements concurrently, so lookups fanned
    out by the match service take turns on the session. Each lookup runs in
    its own savepoint: a failed statement rolls back only that lookup and
    leaves the request transaction usable for the next candidate.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self._lock = asyncio.Lock()

    def _statement(self, user_id: str):
        return (
            select(User, Profile)
            .outerjoin(Profile, Profile.id == User.id)
            .where(User.id == user_id)
        )

    async def find_display_metadata(self, user_id: str) -> DisplayMetadata | None:
        async with self._lock, self.db.begin_nested():
            result = await self.db.execute(self._statement(user_id))
            row = result.first()
        if row is None:
            return None

        user, profile = row
        return DisplayMetadata(
            user_id=user.id,
            name=user.name,
            email=user.email,
            image=user.image,
            bio=profile.bio if profile else None,
            avatar_url=profile.avatar_url if profile else None,
            location=profile.location if profile else None,
        )
