"""Quiz-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class Availability(BaseModel):
    preset: str = ""  # weekday_evenings, weekends, flexible, busy
    custom_days: list[str] = []
    custom_times: list[str] = []


class QuizSubmit(BaseModel):
    interests: list[str]
    social_style: str
    friendship_values: list[str]
    communication_style: str
    hangout_vibe: list[str]
    availability: Availability = Field(default_factory=Availability)
    dealbreakers: list[str] = []
    bio: str | None = Field(default=None, max_length=500)


class QuizAnswers(BaseModel):
    """Raw answers shown on a match's detail page."""
    interests: list[str]
    social_style: str | None
    friendship_values: list[str]
    communication_style: str | None
    hangout_vibe: list[str]
    dealbreakers: list[str]

    model_config = {"from_attributes": True}


class QuizState(QuizAnswers):
    id: int
    user_id: str
    availability: Availability | None
    bio: str | None
    created_at: datetime


class QuizDeleteResponse(BaseModel):
    success: bool
    deleted_count: int


class QuizOption(BaseModel):
    value: str
    label: str
    emoji: str | None = None
    description: str | None = None


class QuizQuestion(BaseModel):
    """One quiz step loaded from the options YAML.

    kind is one of "multi", "single", "availability" or "text".
    min_choices / max_choices bound the number of tags for "multi" questions.
    """
    id: str
    title: str
    subtitle: str = ""
    kind: str
    min_choices: int = 0
    max_choices: int | None = None
    options: list[QuizOption] = []
