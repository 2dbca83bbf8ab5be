def test_default_progress(auth_client):
    response = auth_client.get("/api/story")
    assert response.status_code == 200
    assert response.get_json() == {"currentChapter": 1, "completedChapters": []}


def test_save_and_update_progress(auth_client):
    saved = auth_client.put("/api/story", json={"currentChapter": 3, "completedChapters": [1, 2]})
    assert saved.status_code == 200
    assert saved.get_json()["currentChapter"] == 3

    updated = auth_client.put("/api/story", json={"completedChapters": [2, 1, 3, 2]})
    body = updated.get_json()
    assert body["currentChapter"] == 3
    assert body["completedChapters"] == [2, 1, 3]

    fetched = auth_client.get("/api/story").get_json()
    assert fetched["completedChapters"] == [2, 1, 3]


def test_story_validation(auth_client):
    assert auth_client.put("/api/story", json={}).status_code == 400
    assert auth_client.put("/api/story", json={"currentChapter": 0}).status_code == 400
    assert auth_client.put("/api/story", json={"completedChapters": ["one"]}).status_code == 400
