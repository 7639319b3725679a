"""Database models package."""

from friendmatch.models.user import User
from friendmatch.models.profile import Profile
from friendmatch.models.quiz import QuizResponse

__all__ = ["User", "Profile", "QuizResponse"]
