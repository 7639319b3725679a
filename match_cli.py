#!/usr/bin/env python3
"""Rank friend matches for one user of a YAML population, right in the terminal.

Usage:
    python match_cli.py                              # sample population, first user
    python match_cli.py people.yaml                  # first user of people.yaml
    python match_cli.py people.yaml maya             # matches for maya

Uses the same matching code as the API with in-memory stores.
No server, database, or Docker needed.
"""

import asyncio
import logging
import sys
from pathlib import Path

import yaml

from friendmatch.config import settings
from friendmatch.core.compatibility import QuizRecord
from friendmatch.logging_config import setup_logging
from friendmatch.schemas.user import DisplayMetadata
from friendmatch.services.match_service import MatchService
from friendmatch.services.memory_store import InMemoryProfileDirectory, InMemoryQuizStore

logger = logging.getLogger("friendmatch.cli")

DEFAULT_POPULATION = Path(__file__).parent / "friendmatch" / "data" / "sample_population.yaml"

# --- ANSI Colors ---
RESET = "\033[0m"
DIM = "\033[90m"
BOLD = "\033[1m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIVIDER = DIM + "─" * 50 + RESET

PROFILE_FIELDS = ("name", "email", "image", "bio", "avatar_url", "location")


def load_population(path: Path) -> tuple[InMemoryQuizStore, InMemoryProfileDirectory, list[str]]:
    """Build in-memory stores from a population YAML; also return user ids in file order."""
    if not path.exists():
        raise FileNotFoundError(f"Population file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    quizzes = InMemoryQuizStore()
    profiles = InMemoryProfileDirectory()
    user_ids = []
    for entry in raw.get("users", []):
        user_id = str(entry["id"])
        user_ids.append(user_id)
        profiles.add(DisplayMetadata(
            user_id=user_id, **{k: entry[k] for k in PROFILE_FIELDS if k in entry}
        ))
        for quiz in entry.get("quizzes", []):
            quizzes.add(QuizRecord(user_id=user_id, **quiz))
    return quizzes, profiles, user_ids


def score_color(score: int) -> str:
    if score >= 80:
        return GREEN
    if score >= 60:
        return YELLOW
    return RED


async def show_matches(service: MatchService, viewer_id: str) -> int:
    """Print the ranked matches for viewer_id; returns how many were shown."""
    matches = await service.rank_matches(viewer_id)

    print(f"{BOLD}" + "=" * 50 + f"{RESET}")
    print(f"{BOLD}  Matches for {viewer_id}{RESET}")
    print(f"{BOLD}" + "=" * 50 + f"{RESET}")

    if not matches:
        print(f"  {DIM}No matches yet. Has {viewer_id} taken the quiz?{RESET}")
        return 0

    for rank, match in enumerate(matches, start=1):
        color = score_color(match.compatibility_score)
        print(f"  {rank}. {BOLD}{match.user.name}{RESET}  {color}{match.compatibility_score}%{RESET}")
        print(f"     {match.match_reason}")
        if match.shared_interests:
            print(f"     {DIM}shared: {', '.join(match.shared_interests)}{RESET}")
        if match.vibe_match:
            print(f"     {DIM}vibe: {match.vibe_match}{RESET}")
        print(f"     {DIM}{match.user.bio}{RESET}")
    print(DIVIDER)
    return len(matches)


def main():
    setup_logging(settings.LOG_LEVEL)

    path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_POPULATION
    quizzes, profiles, user_ids = load_population(path)
    if not user_ids:
        print(f"{RED}No users in {path}{RESET}")
        return

    viewer_id = sys.argv[2] if len(sys.argv) > 2 else user_ids[0]
    logger.debug("Loaded %d users from %s", len(user_ids), path)
    asyncio.run(show_matches(MatchService(quizzes, profiles), viewer_id))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print(f"\n\n{DIM}Bye.{RESET}")
    except FileNotFoundError as e:
        print(f"{RED}{e}{RESET}")
