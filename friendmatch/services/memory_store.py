"""In-memory quiz store and profile directory, for the CLI and for tests."""

from friendmatch.core.compatibility import QuizRecord
from friendmatch.schemas.user import DisplayMetadata
from friendmatch.services.match_service import latest_quiz_per_user


class InMemoryQuizStore:
    def __init__(self, records: list[QuizRecord] | None = None):
        self.records: list[QuizRecord] = list(records or [])

    def add(self, record: QuizRecord) -> None:
        self.records.append(record)

    async def find_latest_quiz(self, user_id: str) -> QuizRecord | None:
        own = (r for r in self.records if r.user_id == user_id)
        return latest_quiz_per_user(own).get(user_id)

    async def find_all_quizzes_excluding(self, user_id: str) -> list[QuizRecord]:
        return [r for r in self.records if r.user_id != user_id]


class InMemoryProfileDirectory:
    def __init__(self, profiles: list[DisplayMetadata] | None = None):
        self.profiles: dict[str, DisplayMetadata] = {p.user_id: p for p in profiles or []}

    def add(self, profile: DisplayMetadata) -> None:
        self.profiles[profile.user_id] = profile

    async def find_display_metadata(self, user_id: str) -> DisplayMetadata | None:
        return self.profiles.get(user_id)
