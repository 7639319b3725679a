"""Match service - ranks a viewer's potential friends by quiz compatibility.

Reads quizzes from a QuizStore, scores every candidate with the compatibility
engine, decorates each result with display metadata from a ProfileDirectory
and returns the list best-first. Nothing computed here is persisted.
"""

import asyncio
import logging
from collections.abc import Iterable

from friendmatch.config import settings
from friendmatch.core.compatibility import QuizRecord, evaluate
from friendmatch.exceptions import UserNotFoundError
from friendmatch.schemas.match import MatchProfile, MatchResult, MatchUser
from friendmatch.schemas.quiz import QuizAnswers
from friendmatch.schemas.user import DisplayMetadata
from friendmatch.services.profile_directory import ProfileDirectory
from friendmatch.services.quiz_store import QuizStore

logger = logging.getLogger(__name__)


def supersedes(record: QuizRecord, current: QuizRecord) -> bool:
    """True if record should replace current as a user's latest quiz.

    Equal timestamps go to the later record; an untimestamped record never
    replaces a timestamped one.
    """
    if record.created_at is None:
        return current.created_at is None
    if current.created_at is None:
        return True
    return record.created_at >= current.created_at


def latest_quiz_per_user(records: Iterable[QuizRecord]) -> dict[str, QuizRecord]:
    """Reduce quiz records to the latest one per user.

    Keys keep the order in which each user first appeared.
    """
    latest: dict[str, QuizRecord] = {}
    for record in records:
        current = latest.get(record.user_id)
        if current is None or supersedes(record, current):
            latest[record.user_id] = record
    return latest


def _first_present(*values):
    return next((v for v in values if v is not None), None)


def build_match_user(meta: DisplayMetadata, quiz: QuizRecord | None) -> MatchUser:
    """Apply display fallbacks: bio from profile, then quiz, then a default.

    Only missing values fall through; an empty name or bio is shown as is.
    """
    return MatchUser(
        id=meta.user_id,
        name=_first_present(meta.name, settings.DEFAULT_DISPLAY_NAME),
        email=meta.email,
        image=meta.image,
        bio=_first_present(meta.bio, quiz.bio if quiz else None, settings.DEFAULT_BIO),
        avatar_url=meta.avatar_url,
        avatar=meta.avatar_url or meta.image or settings.DEFAULT_AVATAR_URL,
        location=meta.location,
    )


class MatchService:
    def __init__(
        self,
        quizzes: QuizStore,
        profiles: ProfileDirectory,
        max_concurrency: int | None = None,
    ):
        self.quizzes = quizzes
        self.profiles = profiles
        self.max_concurrency = max_concurrency or settings.MATCH_FANOUT_CONCURRENCY

    async def rank_matches(self, viewer_id: str) -> list[MatchResult]:
        """All candidates with a quiz, best match first.

        A viewer without a quiz has no matches. Candidates whose profile
        lookup fails are left out rather than failing the whole ranking.
        """
        my_quiz = await self.quizzes.find_latest_quiz(viewer_id)
        if my_quiz is None:
            logger.debug("No quiz for viewer %s; no matches", viewer_id)
            return []

        others = await self.quizzes.find_all_quizzes_excluding(viewer_id)
        candidates = latest_quiz_per_user(r for r in others if r.user_id != viewer_id)

        metadata = await self._fetch_metadata(list(candidates))

        matches = []
        for user_id, their_quiz in candidates.items():
            meta = metadata.get(user_id)
            if meta is None:
                continue
            result = evaluate(my_quiz, their_quiz)
            matches.append(
                MatchResult(
                    id=f"match-{user_id}",
                    user=build_match_user(meta, their_quiz),
                    compatibility_score=result.score,
                    shared_interests=result.shared_interests,
                    vibe_match=result.vibe_match,
                    match_reason=result.match_reason,
                )
            )

        # Stable sort: equal scores keep candidate order
        matches.sort(key=lambda m: m.compatibility_score, reverse=True)
        logger.debug(
            "Ranked %d of %d candidates for viewer %s",
            len(matches), len(candidates), viewer_id,
        )
        return matches

    async def match_profile(self, viewer_id: str, candidate_id: str) -> MatchProfile:
        """Compatibility with one candidate plus their raw quiz answers.

        Raises UserNotFoundError only when the candidate user does not exist;
        a candidate (or viewer) without a quiz gets the neutral score.
        """
        meta = await self.profiles.find_display_metadata(candidate_id)
        if meta is None:
            raise UserNotFoundError(candidate_id)

        my_quiz = await self.quizzes.find_latest_quiz(viewer_id)
        their_quiz = await self.quizzes.find_latest_quiz(candidate_id)
        result = evaluate(my_quiz, their_quiz)

        return MatchProfile(
            user=build_match_user(meta, their_quiz),
            quiz=QuizAnswers.model_validate(their_quiz) if their_quiz else None,
            compatibility_score=result.score,
            shared_interests=result.shared_interests,
            vibe_match=result.vibe_match,
            match_reason=result.match_reason,
        )

    async def _fetch_metadata(self, user_ids: list[str]) -> dict[str, DisplayMetadata]:
        """Look up display metadata for all candidates concurrently."""
        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def lookup(user_id: str) -> DisplayMetadata | None:
            async with semaphore:
                return await self.profiles.find_display_metadata(user_id)

        results = await asyncio.gather(
            *(lookup(user_id) for user_id in user_ids), return_exceptions=True
        )

        found: dict[str, DisplayMetadata] = {}
        for user_id, result in zip(user_ids, results):
            if isinstance(result, BaseException):
                logger.warning("Profile lookup failed for %s; dropping candidate: %r", user_id, result)
            elif result is None:
                logger.warning("Quiz found for unknown user %s; dropping candidate", user_id)
            else:
                found[user_id] = result
        return found
