"""Tests for the offline match CLI."""

import pytest

from friendmatch.services.match_service import MatchService
from match_cli import DEFAULT_POPULATION, load_population, show_matches


def test_load_sample_population():
    quizzes, profiles, user_ids = load_population(DEFAULT_POPULATION)
    assert user_ids == ["maya", "jordan", "sam", "alex"]
    assert len(quizzes.records) == 5
    assert profiles.profiles["sam"].avatar_url == "https://example.com/avatars/sam.png"


def test_load_missing_population(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_population(tmp_path / "nope.yaml")


async def test_sample_ranking(capsys):
    quizzes, profiles, _ = load_population(DEFAULT_POPULATION)
    service = MatchService(quizzes, profiles)

    matches = await service.rank_matches("maya")
    assert [m.user.id for m in matches] == ["jordan", "sam", "alex"]
    assert [m.compatibility_score for m in matches] == [83, 42, 35]
    assert matches[0].match_reason == "You share 3 interests!"
    assert matches[2].user.name == "Friend"

    shown = await show_matches(service, "maya")
    out = capsys.readouterr().out
    assert shown == 3
    assert "Jordan" in out
    assert "Weekend hiker" in out


async def test_unknown_viewer_shows_nothing(capsys):
    quizzes, profiles, _ = load_population(DEFAULT_POPULATION)
    assert await show_matches(MatchService(quizzes, profiles), "stranger") == 0
    assert "No matches yet" in capsys.readouterr().out
