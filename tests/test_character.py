def test_get_character(auth_client):
    response = auth_client.get("/api/character")
    assert response.status_code == 200
    assert response.get_json()["coins"] == 100


def test_put_character_updates_given_fields_only(auth_client):
    response = auth_client.put("/api/character", json={"name": "Iron Lung", "agility": 14})
    assert response.status_code == 200
    body = response.get_json()
    assert body["name"] == "Iron Lung"
    assert body["agility"] == 14
    assert body["strength"] == 10


def test_put_character_validates(auth_client):
    assert auth_client.put("/api/character", json={"strength": -1}).status_code == 400
    assert auth_client.put("/api/character", json={"name": "   "}).status_code == 400
    assert auth_client.put("/api/character", json={}).status_code == 400
    assert auth_client.put("/api/character", data="not json",
                           content_type="application/json").status_code == 400


def test_upgrade_spends_coins_then_refuses_when_broke(auth_client):
    response = auth_client.post("/api/character/upgrade", json={"strength": 1, "endurance": 1})
    assert response.status_code == 200
    body = response.get_json()
    assert body["coins"] == 0
    assert body["strength"] == 11
    assert body["endurance"] == 11
    assert body["upgradeCost"] == 100

    refused = auth_client.post("/api/character/upgrade", json={"agility": 1})
    assert refused.status_code == 400
    assert refused.get_json()["error"] == "InsufficientFunds"

    after = auth_client.get("/api/character").get_json()
    assert (after["strength"], after["endurance"], after["agility"], after["coins"]) == (11, 11, 10, 0)


def test_upgrade_rejects_negative_deltas(auth_client):
    response = auth_client.post("/api/character/upgrade", json={"strength": 3, "agility": -1})
    assert response.status_code == 400
    assert auth_client.get("/api/character").get_json()["coins"] == 100


def test_put_character_rejects_null_stat(auth_client):
    response = auth_client.put("/api/character", json={"strength": None})
    assert response.status_code == 400
    assert auth_client.get("/api/character").get_json()["strength"] == 10


def test_out_of_range_stats_are_rejected(auth_client):
    assert auth_client.put("/api/character", json={"agility": 2**31}).status_code == 400

    response = auth_client.post("/api/character/upgrade", json={"strength": 2**62})
    assert response.status_code == 400
    assert response.get_json()["error"] == "InvalidRequest"

    after = auth_client.get("/api/character").get_json()
    assert (after["strength"], after["agility"], after["coins"]) == (10, 10, 100)
