"""Service-layer exceptions and their FastAPI handler."""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class FriendMatchError(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class UserNotFoundError(FriendMatchError):
    """Raised when a user id has no user behind it."""
    status_code = 404

    def __init__(self, user_id: str):
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class InvalidQuizAnswerError(FriendMatchError):
    """Raised when a quiz submission uses unknown tags or the wrong number of choices."""
    status_code = 400

    def __init__(self, problems: list[str]):
        super().__init__("Invalid quiz answers: " + "; ".join(problems))
        self.problems = problems


async def friendmatch_exception_handler(request: Request, exc: FriendMatchError) -> JSONResponse:
    """Render service errors with the same shape as HTTPException."""
    if exc.status_code >= 500:
        logger.error("Service error in %s: %s", request.url.path, exc, exc_info=True)
    else:
        logger.info("%s in %s: %s", exc.__class__.__name__, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})
