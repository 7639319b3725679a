"""Match-related Pydantic schemas."""

from pydantic import BaseModel

from friendmatch.schemas.quiz import QuizAnswers


class MatchUser(BaseModel):
    id: str
    name: str
    email: str | None = None
    image: str | None = None
    bio: str
    avatar_url: str | None = None
    avatar: str  # resolved: custom avatar > OAuth image > default
    location: str | None = None


class MatchResult(BaseModel):
    id: str  # "match-<user id>"
    user: MatchUser
    compatibility_score: int
    shared_interests: list[str]
    vibe_match: str | None
    match_reason: str


class MatchProfile(BaseModel):
    user: MatchUser
    quiz: QuizAnswers | None  # None when the candidate has not taken the quiz
    compatibility_score: int
    shared_interests: list[str]
    vibe_match: str | None
    match_reason: str
