# tests/conftest.py
import os
import sys
import pytest
from flask import g

# so that `from app import create_app` works when run from the repo root
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from app import create_app
from extensions import db
from modules.users.store import UserStore


@pytest.fixture()
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SECRET_KEY": "test-secret",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    def _make(username: str, password: str = "secret", is_admin: bool = False):
        return UserStore().create_user(username, password, is_admin)
    return _make


@pytest.fixture()
def alice(make_user):
    return make_user("alice")


@pytest.fixture()
def bob(make_user):
    return make_user("bob")


@pytest.fixture()
def boss(make_user):
    return make_user("boss", is_admin=True)


@pytest.fixture()
def login(client):
    def _login(user) -> None:
        # the app context outlives requests here, drop the principal Flask-Login cached on g
        g.pop("_login_user", None)
        with client.session_transaction() as session:
            session["_user_id"] = str(user.id)
            session["_fresh"] = True
    return _login


def _task_payload(**overrides) -> dict:
    payload = {
        "date": "2025-03-01",
        "category": "HR",
        "subcategory": "Annual Leave",
        "title": "PTO request",
        "startTime": "09:00",
        "endTime": "17:00",
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def task_payload():
    return _task_payload
