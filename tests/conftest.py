import pytest

from config import TestingConfig
from fitrealm import create_app, db


class FixedRng:
    """Stands in for random.Random; always draws the same enemy power."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.value


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def register(client, username="hero", email=None, password="secret123"):
    response = client.post(
        "/api/auth/register",
        json={
            "email": email or f"{username}@example.com",
            "username": username,
            "password": password,
        },
    )
    assert response.status_code == 201, response.get_json()
    return response.get_json()


@pytest.fixture
def auth_client(app):
    """Test client holding the session cookie of a freshly registered user."""
    client = app.test_client()
    client.user = register(client)["user"]
    return client


@pytest.fixture
def make_client(app):
    def _make(username):
        client = app.test_client()
        client.user = register(client, username=username)["user"]
        return client

    return _make
