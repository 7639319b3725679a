"""Tests for the quiz endpoints - submit, fetch latest, retake and options."""

QUIZ = {
    "interests": ["brunch", "hiking", "gaming"],
    "social_style": "depends",
    "friendship_values": ["reliability", "humor"],
    "communication_style": "texter",
    "hangout_vibe": ["chill", "active"],
    "availability": {"preset": "weekends", "custom_days": [], "custom_times": []},
    "dealbreakers": [],
    "bio": "Brunch first, questions later.",
}


async def _create_user(client, name: str = "Maya") -> str:
    resp = await client.post("/api/users/", json={"name": name, "email": f"{name.lower()}@example.com"})
    return resp.json()["id"]


async def test_quiz_options_route(client):
    resp = await client.get("/api/quiz/options")
    assert resp.status_code == 200
    questions = {q["id"]: q for q in resp.json()}
    assert {o["value"] for o in questions["hangout_vibe"]["options"]} == {
        "active", "chill", "explore", "creative", "nightout", "outdoors",
    }
    assert questions["friendship_values"]["max_choices"] == 2


async def test_submit_quiz_route(client):
    user_id = await _create_user(client)

    resp = await client.post("/api/quiz/", params={"user_id": user_id}, json=QUIZ)
    assert resp.status_code == 201
    data = resp.json()
    assert data["user_id"] == user_id
    assert data["interests"] == QUIZ["interests"]
    assert data["availability"]["preset"] == "weekends"
    assert "created_at" in data

    profile = (await client.get(f"/api/users/{user_id}")).json()
    assert profile["quiz_completed"] is True


async def test_submit_quiz_unknown_user(client):
    resp = await client.post("/api/quiz/", params={"user_id": "nobody"}, json=QUIZ)
    assert resp.status_code == 404
    assert "nobody" in resp.json()["detail"]


async def test_submit_quiz_invalid_answers(client):
    user_id = await _create_user(client)
    bad = dict(QUIZ, interests=["brunch", "basejumping"], friendship_values=["humor"])

    resp = await client.post("/api/quiz/", params={"user_id": user_id}, json=bad)

    assert resp.status_code == 400
    detail = resp.json()["detail"]
    assert "basejumping" in detail
    assert "friendship_values" in detail


async def test_submit_quiz_missing_fields(client):
    user_id = await _create_user(client)
    resp = await client.post("/api/quiz/", params={"user_id": user_id}, json={"interests": ["brunch"]})
    assert resp.status_code == 422


async def test_get_my_quiz_returns_latest(client):
    user_id = await _create_user(client)
    await client.post("/api/quiz/", params={"user_id": user_id}, json=QUIZ)
    await client.post(
        "/api/quiz/", params={"user_id": user_id}, json=dict(QUIZ, interests=["art", "movies"])
    )

    resp = await client.get("/api/quiz/me", params={"user_id": user_id})
    assert resp.status_code == 200
    assert resp.json()["interests"] == ["art", "movies"]


async def test_get_my_quiz_none(client):
    user_id = await _create_user(client)
    resp = await client.get("/api/quiz/me", params={"user_id": user_id})
    assert resp.status_code == 200
    assert resp.json() is None


async def test_delete_quiz_route(client):
    user_id = await _create_user(client)
    await client.post("/api/quiz/", params={"user_id": user_id}, json=QUIZ)
    await client.post("/api/quiz/", params={"user_id": user_id}, json=QUIZ)

    resp = await client.delete("/api/quiz/", params={"user_id": user_id})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "deleted_count": 2}

    assert (await client.get("/api/quiz/me", params={"user_id": user_id})).json() is None
    profile = (await client.get(f"/api/users/{user_id}")).json()
    assert profile["quiz_completed"] is False
