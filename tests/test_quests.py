QUEST = {
    "title": "Walk 10k steps",
    "description": "Every step counts",
    "type": "daily",
    "target": 10000,
    "xpReward": 80,
    "coinReward": 30,
}


def test_create_and_list(auth_client):
    created = auth_client.post("/api/quests", json=QUEST)
    assert created.status_code == 201
    quest = created.get_json()
    assert quest["completed"] is False
    assert quest["progress"] == 0

    listed = auth_client.get("/api/quests").get_json()
    assert [q["id"] for q in listed] == [quest["id"]]


def test_create_uses_default_rewards(auth_client):
    quest = auth_client.post(
        "/api/quests", json={"title": "Stretch", "type": "weekly", "target": 3}
    ).get_json()
    assert (quest["xpReward"], quest["coinReward"]) == (50, 25)


def test_create_validates(auth_client):
    assert auth_client.post("/api/quests", json=dict(QUEST, type="monthly")).status_code == 400
    assert auth_client.post("/api/quests", json=dict(QUEST, target=0)).status_code == 400
    assert auth_client.post("/api/quests", json=dict(QUEST, title="")).status_code == 400
    assert auth_client.post("/api/quests", json=dict(QUEST, xpReward=2**40)).status_code == 400
    assert auth_client.post("/api/quests", json=dict(QUEST, target=2**31)).status_code == 400


def test_complete_pays_once(auth_client):
    quest_id = auth_client.post("/api/quests", json=QUEST).get_json()["id"]

    done = auth_client.post(f"/api/quests/{quest_id}/complete")
    assert done.status_code == 200
    body = done.get_json()
    assert body["completed"] is True
    assert body["completedAt"]
    assert {"type": "xp", "amount": 80, "name": "Quest: Walk 10k steps"} in body["rewards"]

    again = auth_client.post(f"/api/quests/{quest_id}/complete")
    assert again.status_code == 400
    assert again.get_json()["error"] == "QuestAlreadyCompleted"

    character = auth_client.get("/api/character").get_json()
    assert (character["xp"], character["coins"]) == (80, 130)


def test_cannot_complete_someone_elses_quest(make_client):
    owner = make_client("owner")
    intruder = make_client("intruder")
    quest_id = owner.post("/api/quests", json=QUEST).get_json()["id"]

    assert intruder.post(f"/api/quests/{quest_id}/complete").status_code == 404
    assert intruder.post("/api/quests/9999/complete").status_code == 404
    assert owner.get("/api/quests").get_json()[0]["completed"] is False
