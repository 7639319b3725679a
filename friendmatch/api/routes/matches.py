"""Match endpoints - ranked matches and single-match detail."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from friendmatch.db.database import get_db
from friendmatch.schemas.match import MatchProfile, MatchResult
from friendmatch.services.match_service import MatchService
from friendmatch.services.profile_directory import SqlProfileDirectory
from friendmatch.services.quiz_store import SqlQuizStore

router = APIRouter()


async def get_match_service(db: AsyncSession = Depends(get_db)) -> MatchService:
    return MatchService(SqlQuizStore(db), SqlProfileDirectory(db))


@router.get("/", response_model=list[MatchResult])
async def list_matches(user_id: str, service: MatchService = Depends(get_match_service)):
    """Everyone who has taken the quiz, best match first."""
    return await service.rank_matches(user_id)


@router.get("/{candidate_id}", response_model=MatchProfile)
async def get_match_profile(
    candidate_id: str, user_id: str, service: MatchService = Depends(get_match_service)
):
    """Compatibility with one user, including their quiz answers."""
    return await service.match_profile(user_id, candidate_id)
