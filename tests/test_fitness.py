from datetime import date

import pytest
from sqlalchemy import func, select
from sqlalchemy.dialects import mysql, sqlite

from fitrealm import db
from fitrealm.models.fitness_entry import FitnessEntry
from fitrealm.repositories.upsert import conflict_ignoring_insert
from fitrealm.services import fitness


def test_logging_activity_grants_xp(auth_client):
    response = auth_client.post(
        "/api/fitness",
        json={"calories": 300, "steps": 5000, "exerciseMinutes": 30, "activityType": "cardio"},
    )
    assert response.status_code == 200
    body = response.get_json()
    assert body["xpGained"] == 30 + 50 + 60
    assert body["rewards"] == [{"type": "xp", "amount": 140, "name": "Workout XP"}]
    assert body["activityType"] == "cardio"

    character = auth_client.get("/api/character").get_json()
    assert character["xp"] == 140
    assert character["level"] == 1


def test_two_posts_same_day_share_one_row(app, auth_client):
    auth_client.post("/api/fitness", json={"calories": 300, "steps": 2000, "activityType": "run"})
    second = auth_client.post("/api/fitness", json={"calories": 500})
    body = second.get_json()

    assert body["calories"] == 500
    assert body["steps"] == 2000  # not resubmitted, kept
    assert body["activityType"] == "run"

    with app.app_context():
        rows = db.session.scalar(select(func.count()).select_from(FitnessEntry))
    assert rows == 1

    # each submission pays for its own values: 30 + 20, then 50
    assert auth_client.get("/api/character").get_json()["xp"] == 100


def test_level_is_recomputed_from_total_xp(auth_client):
    auth_client.post("/api/fitness", json={"exerciseMinutes": 600})
    character = auth_client.get("/api/character").get_json()
    assert character["xp"] == 1200
    assert character["level"] == 2


def test_history_is_newest_first(app, auth_client):
    user_id = auth_client.user["id"]
    with app.app_context():
        fitness.log_activity(user_id, steps=100, today=date(2024, 1, 1))
        fitness.log_activity(user_id, steps=200, today=date(2024, 1, 3))
        fitness.log_activity(user_id, steps=300, today=date(2024, 1, 2))

    entries = auth_client.get("/api/fitness").get_json()
    assert [e["date"] for e in entries] == ["2024-01-03", "2024-01-02", "2024-01-01"]


def test_invalid_fitness_payload(auth_client):
    assert auth_client.post("/api/fitness", json={"steps": -5}).status_code == 400
    assert auth_client.post("/api/fitness", json={"calories": "lots"}).status_code == 400
    assert auth_client.post("/api/fitness", json=[1, 2]).status_code == 400


def test_out_of_range_counts_are_rejected(auth_client):
    response = auth_client.post("/api/fitness", json={"calories": 2**63})
    assert response.status_code == 400
    assert response.get_json()["error"] == "InvalidRequest"
    assert auth_client.get("/api/fitness").get_json() == []

    largest = auth_client.post("/api/fitness", json={"exerciseMinutes": 2**31 - 1})
    assert largest.status_code == 200
    assert largest.get_json()["xpGained"] == (2**31 - 1) * 2


def test_insert_ignore_per_dialect():
    sqlite_sql = str(conflict_ignoring_insert(FitnessEntry, "sqlite", user_id=1).compile(
        dialect=sqlite.dialect()))
    assert "ON CONFLICT DO NOTHING" in sqlite_sql

    mysql_sql = str(conflict_ignoring_insert(FitnessEntry, "mysql", user_id=1).compile(
        dialect=mysql.dialect()))
    assert mysql_sql.startswith("INSERT IGNORE")

    with pytest.raises(NotImplementedError):
        conflict_ignoring_insert(FitnessEntry, "oracle", user_id=1)
