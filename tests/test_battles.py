from .conftest import FixedRng


def _fight(client):
    return client.post(
        "/api/battles", json={"enemyType": "Sloth Dragon", "playerAction": "power attack"}
    )


def test_victory_is_recorded_and_paid(app, auth_client):
    auth_client.put("/api/character", json={"strength": 30, "agility": 20})
    app.config["BATTLE_RNG"] = FixedRng(49)

    response = _fight(auth_client)
    assert response.status_code == 200
    body = response.get_json()
    assert body["victory"] is True
    assert body["playerPower"] == 50
    assert body["enemyPower"] == 49
    assert body["xpGained"] == 50
    assert body["coinsGained"] == 25
    assert body["enemyType"] == "Sloth Dragon"
    assert body["playerAction"] == "power attack"
    assert {"type": "coins", "amount": 25, "name": "Battle Reward"} in body["rewards"]

    character = auth_client.get("/api/character").get_json()
    assert character["xp"] == 50
    assert character["coins"] == 125


def test_tie_is_a_defeat(app, auth_client):
    app.config["BATTLE_RNG"] = FixedRng(20)

    body = _fight(auth_client).get_json()
    assert body["victory"] is False
    assert (body["xpGained"], body["coinsGained"]) == (10, 5)

    character = auth_client.get("/api/character").get_json()
    assert (character["xp"], character["coins"]) == (10, 105)


def test_history_keeps_last_ten(app, auth_client):
    app.config["BATTLE_RNG"] = FixedRng(60)
    for _ in range(12):
        assert _fight(auth_client).status_code == 200

    battles = auth_client.get("/api/battles").get_json()
    assert len(battles) == 10
    ids = [b["id"] for b in battles]
    assert ids == sorted(ids, reverse=True)


def test_battle_requires_labels(auth_client):
    response = auth_client.post("/api/battles", json={"enemyType": "Couch Potato"})
    assert response.status_code == 400
