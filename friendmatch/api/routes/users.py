"""User endpoints - create users and manage their display profile."""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from friendmatch.db.database import get_db
from friendmatch.models.profile import Profile
from friendmatch.models.user import User
from friendmatch.schemas.user import ProfileUpdate, UserCreate, UserState

router = APIRouter()


async def _get_user_or_404(user_id: str, db: AsyncSession) -> User:
    """Fetch a user by ID or raise 404."""
    user = await db.get(User, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


async def _get_or_create_profile(user_id: str, db: AsyncSession) -> Profile:
    profile = await db.get(Profile, user_id)
    if profile is None:
        profile = Profile(id=user_id)
        db.add(profile)
        await db.flush()
    return profile


def _user_to_response(user: User, profile: Profile) -> UserState:
    return UserState(
        id=user.id,
        name=user.name,
        email=user.email,
        image=user.image,
        bio=profile.bio,
        location=profile.location,
        avatar_url=profile.avatar_url,
        quiz_completed=profile.quiz_completed,
    )


@router.post("/", response_model=UserState, status_code=201)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Create a user with an empty profile."""
    user = User(name=data.name, email=data.email, image=data.image)
    db.add(user)
    await db.flush()
    profile = Profile(id=user.id, quiz_completed=False)
    db.add(profile)
    await db.flush()
    await db.refresh(profile)
    return _user_to_response(user, profile)


@router.get("/{user_id}", response_model=UserState)
async def get_user(user_id: str, db: AsyncSession = Depends(get_db)):
    user = await _get_user_or_404(user_id, db)
    profile = await _get_or_create_profile(user_id, db)
    return _user_to_response(user, profile)


@router.patch("/{user_id}", response_model=UserState)
async def update_user(user_id: str, data: ProfileUpdate, db: AsyncSession = Depends(get_db)):
    """Update name and profile fields (bio, location, avatar_url); unset fields are left alone."""
    user = await _get_user_or_404(user_id, db)
    profile = await _get_or_create_profile(user_id, db)

    update_data = data.model_dump(exclude_unset=True)
    name = update_data.pop("name", None)
    if name:
        user.name = name
    for field, value in update_data.items():
        setattr(profile, field, value)

    await db.flush()
    await db.refresh(profile)
    return _user_to_response(user, profile)


@router.delete("/{user_id}", status_code=204)
async def delete_user(user_id: str, db: AsyncSession = Depends(get_db)):
    """Delete a user together with their profile and quiz responses."""
    user = await _get_user_or_404(user_id, db)
    await db.delete(user)
    await db.flush()
