import sys
from pathlib import Path as _Path
sys.path.insert(0, str(_Path(__file__).resolve().parents[1]))

import pytest

from app import create_app
from extensions import db


TEST_PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture()
def make_app(tmp_path):
    """
    Build an app bound to a fresh SQLite file under tmp_path.
    Extra config keys override the test defaults.
    """
    created = []

    def _make(**overrides):
        config = {
            "TESTING": True,
            "SECRET_KEY": "test-secret-key",
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / f'test-{len(created)}.db'}",
            "PASSWORD_HASH_METHOD": TEST_PASSWORD_HASH_METHOD,
        }
        config.update(overrides)
        flask_app = create_app(config)
        created.append(flask_app)
        return flask_app

    yield _make

    for flask_app in created:
        with flask_app.app_context():
            db.session.remove()
            db.drop_all()
            db.engine.dispose()


@pytest.fixture()
def app(make_app):
    return make_app()


@pytest.fixture()
def client(app):
    return app.test_client()


class AuthActions:
    def __init__(self, client):
        self._client = client

    def register(self, username="alice", password="secret1", **kwargs):
        return self._client.post(
            "/register", data={"username": username, "password": password}, **kwargs
        )

    def login(self, username="alice", password="secret1", **kwargs):
        return self._client.post(
            "/login", data={"username": username, "password": password}, **kwargs
        )

    def logout(self, **kwargs):
        return self._client.get("/logout", **kwargs)

    def register_and_login(self, username="alice", password="secret1"):
        self.register(username, password)
        return self.login(username, password)


@pytest.fixture()
def auth(client):
    return AuthActions(client)
