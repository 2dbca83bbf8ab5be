from datetime import datetime

import pytest
from sqlalchemy.exc import IntegrityError

from fitrealm import db
from fitrealm.errors import AlreadyClaimed
from fitrealm.repositories import achievements, characters
from fitrealm.services import rewards


def test_daily_reward_once_per_day(auth_client):
    first = auth_client.post("/api/rewards/daily")
    assert first.status_code == 200
    body = first.get_json()
    assert body["xpReward"] == 100
    assert body["coinReward"] == 50
    assert body["rewards"] == [
        {"type": "xp", "amount": 100, "name": "Daily Login XP"},
        {"type": "coins", "amount": 50, "name": "Daily Login Bonus"},
    ]

    after_first = auth_client.get("/api/character").get_json()
    assert (after_first["xp"], after_first["coins"]) == (100, 150)

    second = auth_client.post("/api/rewards/daily")
    assert second.status_code == 400
    assert second.get_json()["error"] == "AlreadyClaimed"

    after_second = auth_client.get("/api/character").get_json()
    assert (after_second["xp"], after_second["coins"]) == (100, 150)


def test_claim_is_recorded_in_trophy_case(auth_client):
    auth_client.post("/api/rewards/daily")
    trophies = auth_client.get("/api/achievements").get_json()["achievements"]
    assert len(trophies) == 1
    assert trophies[0]["type"] == "daily_reward"
    assert trophies[0]["title"] == "Daily Login"


def test_next_utc_day_can_claim_again(app, auth_client):
    user_id = auth_client.user["id"]
    with app.app_context():
        rewards.claim_daily(user_id, now=datetime(2024, 3, 1, 23, 59))
        with pytest.raises(AlreadyClaimed):
            rewards.claim_daily(user_id, now=datetime(2024, 3, 1, 0, 1))
        rewards.claim_daily(user_id, now=datetime(2024, 3, 2, 0, 0))

        character = characters.get_by_user(user_id, refresh=True)
        assert (character.xp, character.coins) == (200, 200)


def test_concurrent_claim_loses_on_the_unique_constraint(app, auth_client, monkeypatch):
    """A claim that slipped past the lookup is stopped at insert and pays nothing."""
    user_id = auth_client.user["id"]
    with app.app_context():
        now = datetime(2024, 3, 1, 9, 0)
        rewards.claim_daily(user_id, now=now)

        monkeypatch.setattr(rewards, "already_claimed", lambda *args: False)
        with pytest.raises(AlreadyClaimed):
            rewards.claim_daily(user_id, now=now)

        character = characters.get_by_user(user_id, refresh=True)
        assert (character.xp, character.coins) == (100, 150)
        assert len(achievements.list_for_user(user_id)) == 1


def test_daily_claim_marker_is_unique_per_day(app, auth_client):
    user_id = auth_client.user["id"]
    with app.app_context():
        now = datetime(2024, 3, 1, 9, 0)
        achievements.record_daily_claim(user_id, now.date(), now)
        with pytest.raises(IntegrityError):
            achievements.record_daily_claim(user_id, now.date(), now)
        db.session.rollback()
