"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from friendmatch.config import settings
from friendmatch.db.database import engine, Base
from friendmatch.exceptions import FriendMatchError, friendmatch_exception_handler
from friendmatch.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.LOG_LEVEL)
    # Startup: create tables (dev only; use migrations in production)
    import friendmatch.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("friendmatch API started (env=%s)", settings.APP_ENV)
    yield
    # Shutdown: close connections
    await engine.dispose()


app = FastAPI(
    title="FriendMatch API",
    description="Quiz-based friend matching: compatibility scores and ranked matches",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(FriendMatchError, friendmatch_exception_handler)

# --- Routes ---
from friendmatch.api.routes import users, quiz, matches  # noqa: E402

app.include_router(users.router, prefix="/api/users", tags=["users"])
app.include_router(quiz.router, prefix="/api/quiz", tags=["quiz"])
app.include_router(matches.router, prefix="/api/matches", tags=["matches"])


@app.get("/health")
async def health_check():
    return {"status": "ok"}
