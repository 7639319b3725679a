"""Compatibility engine - scores how well two quiz records fit as friends.

Everything here is pure and synchronous: no I/O, no logging, no hidden state.
A missing quiz (``None``) on either side yields the neutral score of 50 and
empty derived fields. Missing list fields count as empty, unknown tags never
match anything, and nothing in this module raises for well-typed input.
"""

import math
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator

# Weights of each sub-score; they also make up the normalisation denominator
INTEREST_WEIGHT = 25
SOCIAL_STYLE_WEIGHT = 20
VALUES_WEIGHT = 20
COMMUNICATION_WEIGHT = 15
VIBE_WEIGHT = 15
DEALBREAKER_WEIGHT = 5

MIN_SCORE = 35
MAX_SCORE = 98
NEUTRAL_SCORE = 50

INTEREST_BONUS_THRESHOLD = 3
INTEREST_BONUS_MULTIPLIER = 1.2

EASYGOING_BONUS = 5
NO_CONFLICT_BONUS = 3
FLAKY_PENALTY = -2
DEALBREAKER_PENALTY_FLOOR = -10
# Communication styles that a "flaky" dealbreaker objects to
FLAKY_STYLES = frozenset({"spontaneous", "low_maintenance"})

SOCIAL_STYLE_PAIRS = {
    frozenset({"solo", "small_group"}): 0.75,
    frozenset({"solo", "big_group"}): 0.4,
}
SOCIAL_STYLE_DEFAULT = 0.6

COMMUNICATION_PAIRS = {
    frozenset({"texter", "spontaneous"}): 0.8,
    frozenset({"planner", "spontaneous"}): 0.5,
}
COMMUNICATION_DEFAULT = 0.65

DEFAULT_REASON = "You might vibe well together!"


def _as_tags(value):
    """None -> (), duplicates dropped, first occurrence order kept."""
    if value is None:
        return ()
    return tuple(dict.fromkeys(value))


Tags = Annotated[tuple[str, ...], BeforeValidator(_as_tags)]


class QuizRecord(BaseModel):
    """A user's submitted quiz answers, as consumed by the scorer."""

    user_id: str
    interests: Tags = ()
    social_style: str | None = None
    friendship_values: Tags = ()
    communication_style: str | None = None
    hangout_vibe: Tags = ()
    dealbreakers: Tags = ()
    bio: str | None = None
    created_at: datetime | None = None

    model_config = {"frozen": True, "from_attributes": True}


class CompatibilityResult(BaseModel):
    """Score and derived facts for one pair, from the first record's side."""

    score: int
    shared_interests: list[str]
    vibe_match: str | None
    match_reason: str


def _shared(mine: tuple[str, ...], theirs: tuple[str, ...]) -> list[str]:
    """Tags of ``mine`` also present in ``theirs``, in ``mine``'s order."""
    other = set(theirs)
    return [tag for tag in mine if tag in other]


def _overlap_ratio(mine: tuple[str, ...], theirs: tuple[str, ...]) -> tuple[int, float]:
    """Return (shared count, shared/union ratio); ratio is 0 for an empty union."""
    union = set(mine) | set(theirs)
    if not union:
        return 0, 0.0
    shared = len(set(mine) & set(theirs))
    return shared, shared / len(union)


def social_style_compatibility(a: str | None, b: str | None) -> float:
    if not a or not b:
        return 0.5
    if a == b:
        return 1.0
    if "depends" in (a, b):
        return 0.85
    return SOCIAL_STYLE_PAIRS.get(frozenset((a, b)), SOCIAL_STYLE_DEFAULT)


def communication_compatibility(a: str | None, b: str | None) -> float:
    if not a or not b:
        return 0.5
    if a == b:
        return 1.0
    if "low_maintenance" in (a, b):
        return 0.85
    return COMMUNICATION_PAIRS.get(frozenset((a, b)), COMMUNICATION_DEFAULT)


def dealbreaker_adjustment(a: QuizRecord, b: QuizRecord) -> float:
    """Bonus for easygoing pairs, small penalty when a "flaky" dealbreaker meets a loose planner.

    Only ``flaky`` is checked; other dealbreaker tags are stored but do not
    affect the score.
    """
    if "none" in a.dealbreakers or "none" in b.dealbreakers:
        return EASYGOING_BONUS

    penalty = 0
    if "flaky" in a.dealbreakers and b.communication_style in FLAKY_STYLES:
        penalty += FLAKY_PENALTY
    if "flaky" in b.dealbreakers and a.communication_style in FLAKY_STYLES:
        penalty += FLAKY_PENALTY

    if penalty == 0:
        return NO_CONFLICT_BONUS
    return max(DEALBREAKER_PENALTY_FLOOR, penalty)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def calculate_compatibility(a: QuizRecord | None, b: QuizRecord | None) -> int:
    """Score two quiz records as a percentage clamped to [MIN_SCORE, MAX_SCORE]."""
    if a is None or b is None:
        return NEUTRAL_SCORE

    score = 0.0
    max_score = 0

    shared_count, ratio = _overlap_ratio(a.interests, b.interests)
    bonus = INTEREST_BONUS_MULTIPLIER if shared_count >= INTEREST_BONUS_THRESHOLD else 1.0
    score += min(ratio * bonus, 1.0) * INTEREST_WEIGHT
    max_score += INTEREST_WEIGHT

    score += social_style_compatibility(a.social_style, b.social_style) * SOCIAL_STYLE_WEIGHT
    max_score += SOCIAL_STYLE_WEIGHT

    # Not capped: three or more shared values can exceed the weight
    if a.friendship_values and b.friendship_values:
        shared_values = _shared(a.friendship_values, b.friendship_values)
        score += (len(shared_values) / 2) * VALUES_WEIGHT
    max_score += VALUES_WEIGHT

    score += communication_compatibility(a.communication_style, b.communication_style) * COMMUNICATION_WEIGHT
    max_score += COMMUNICATION_WEIGHT

    _, vibe_ratio = _overlap_ratio(a.hangout_vibe, b.hangout_vibe)
    score += vibe_ratio * VIBE_WEIGHT
    max_score += VIBE_WEIGHT

    score += dealbreaker_adjustment(a, b)
    max_score += DEALBREAKER_WEIGHT

    percent = _round_half_up(score * 100 / max_score)
    return max(MIN_SCORE, min(MAX_SCORE, percent))


def shared_interests(a: QuizRecord | None, b: QuizRecord | None) -> list[str]:
    if a is None or b is None:
        return []
    return _shared(a.interests, b.interests)


def vibe_match(a: QuizRecord | None, b: QuizRecord | None) -> str | None:
    if a is None or b is None:
        return None
    shared = _shared(a.hangout_vibe, b.hangout_vibe)
    return shared[0] if shared else None


def match_reason(a: QuizRecord | None, b: QuizRecord | None) -> str:
    """Pick the headline reason for a match; first rule that applies wins."""
    if a is None or b is None:
        return DEFAULT_REASON

    interests = shared_interests(a, b)
    if len(interests) >= 3:
        return f"You share {len(interests)} interests!"
    if len(_shared(a.friendship_values, b.friendship_values)) >= 2:
        return "You value the same things in friendship"
    if len(_shared(a.hangout_vibe, b.hangout_vibe)) >= 2:
        return "You're looking for the same kind of hangouts"
    if a.social_style and a.social_style == b.social_style:
        return "Similar social energy"
    return "Great potential for a friendship!"


def evaluate(a: QuizRecord | None, b: QuizRecord | None) -> CompatibilityResult:
    """Score a pair and collect the derived facts, from ``a``'s point of view."""
    return CompatibilityResult(
        score=calculate_compatibility(a, b),
        shared_interests=shared_interests(a, b),
        vibe_match=vibe_match(a, b),
        match_reason=match_reason(a, b),
    )
