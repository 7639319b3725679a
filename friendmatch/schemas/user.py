"""User/profile-related Pydantic schemas."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    image: str | None = None


class ProfileUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    bio: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=255)
    avatar_url: str | None = None


class UserState(BaseModel):
    id: str
    name: str | None
    email: str
    image: str | None
    bio: str | None
    location: str | None
    avatar_url: str | None
    quiz_completed: bool


class DisplayMetadata(BaseModel):
    """What the profile directory knows about a user, for match cards."""
    user_id: str
    name: str | None = None
    email: str | None = None
    image: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    location: str | None = None
