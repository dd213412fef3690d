"""App-level behaviour: health, catalog, JSON errors."""

import pytest

from permissions import Identity, record_scope, resolve_list_scope
from errors import ValidationError
from modules.tasks.store import TaskStore


def test_health_is_public(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_categories(client, alice, login):
    login(alice)
    data = client.get("/categories").get_json()

    assert "Annual Leave" in data["categories"]["HR"]
    assert [s["name"] for s in data["statuses"]] == ["To Do", "Pending", "Done", "On Hold"]
    assert data["statuses"][0]["colors"]["bg"] == "#7c3aed"


def test_unknown_route_is_json(client):
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()


def test_unexpected_error_hides_details(app, caplog):
    @app.route("/boom")
    def boom():
        raise RuntimeError("database password is hunter2")

    resp = app.test_client().get("/boom")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "Internal server error"}
    assert "hunter2" not in resp.get_data(as_text=True)
    assert "Unhandled error on GET /boom" in caplog.text


def test_list_scope_for_regular_user(app):
    store = TaskStore()
    user = Identity("alice")

    for mode, target in (("all", None), ("user", "bob"), (None, None)):
        assert resolve_list_scope(store, user, mode, target).owner == "alice"


def test_list_scope_for_admin(app):
    store = TaskStore()
    admin = Identity("boss", is_admin=True)

    assert resolve_list_scope(store, admin, None, None).owner == "boss"
    assert resolve_list_scope(store, admin, "all", None).is_unscoped
    assert resolve_list_scope(store, admin, "user", "bob").owner == "bob"
    with pytest.raises(ValidationError):
        resolve_list_scope(store, admin, "user", "")


def test_record_scope(app):
    store = TaskStore()
    assert record_scope(store, Identity("boss", is_admin=True)).is_unscoped
    assert record_scope(store, Identity("alice")).owner == "alice"
