"""Tests for the quiz option service - loading the YAML vocabulary and validating submissions."""

import pytest

from friendmatch.exceptions import InvalidQuizAnswerError
from friendmatch.schemas.quiz import QuizSubmit
from friendmatch.services.quiz_option_service import QuizOptionService, quiz_option_service


def _submission(**overrides) -> QuizSubmit:
    data = dict(
        interests=["brunch", "hiking"],
        social_style="depends",
        friendship_values=["reliability", "humor"],
        communication_style="texter",
        hangout_vibe=["chill"],
        availability={"preset": "weekends"},
        dealbreakers=["flaky"],
    )
    data.update(overrides)
    return QuizSubmit(**data)


def test_questions_in_display_order():
    ids = [q.id for q in quiz_option_service.list_questions()]
    assert ids == [
        "interests",
        "social_style",
        "friendship_values",
        "communication_style",
        "hangout_vibe",
        "availability",
        "dealbreakers",
        "bio",
    ]


def test_allowed_values():
    assert quiz_option_service.allowed_values("social_style") == {"solo", "small_group", "big_group", "depends"}
    assert "none" in quiz_option_service.allowed_values("dealbreakers")
    assert quiz_option_service.allowed_values("nonexistent") == set()


def test_friendship_values_pick_two():
    question = quiz_option_service.get_question("friendship_values")
    assert question is not None
    assert question.min_choices == 2
    assert question.max_choices == 2


def test_valid_submission_passes():
    quiz_option_service.validate(_submission())


def test_unknown_tags_rejected():
    with pytest.raises(InvalidQuizAnswerError) as exc:
        quiz_option_service.validate(_submission(interests=["brunch", "basejumping"], social_style="hermit"))
    problems = exc.value.problems
    assert any("basejumping" in p for p in problems)
    assert any("hermit" in p for p in problems)


def test_choice_counts_enforced():
    with pytest.raises(InvalidQuizAnswerError, match="friendship_values: pick at least 2"):
        quiz_option_service.validate(_submission(friendship_values=["humor"]))
    with pytest.raises(InvalidQuizAnswerError, match="friendship_values: pick at most 2"):
        quiz_option_service.validate(_submission(friendship_values=["humor", "depth", "support"]))
    with pytest.raises(InvalidQuizAnswerError, match="hangout_vibe: pick at least 1"):
        quiz_option_service.validate(_submission(hangout_vibe=[]))


def test_dealbreakers_optional():
    quiz_option_service.validate(_submission(dealbreakers=[]))


def test_unknown_availability_preset():
    with pytest.raises(InvalidQuizAnswerError, match="unknown preset"):
        quiz_option_service.validate(_submission(availability={"preset": "never"}))


def test_missing_options_file(tmp_path):
    service = QuizOptionService(tmp_path / "missing.yaml")
    with pytest.raises(FileNotFoundError):
        service.load_questions()
