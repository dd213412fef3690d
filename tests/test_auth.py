"""Login flow and the default admin bootstrap."""

from models import User


def test_first_login_provisions_default_admin(client, app):
    assert User.query.count() == 0

    resp = client.post("/auth/login", json={"username": "admin", "password": "admin"})
    assert resp.status_code == 200
    user = resp.get_json()["user"]
    assert user["username"] == "admin"
    assert user["isAdmin"] is True
    assert "password" not in user

    me = client.get("/auth/me").get_json()["user"]
    assert me == {"username": "admin", "isAdmin": True}


def test_repeated_logins_keep_one_admin(client):
    for _ in range(2):
        client.post("/auth/login", json={"username": "admin", "password": "admin"})
    assert User.query.filter_by(username="admin").count() == 1


def test_login_with_own_account(client, alice):
    resp = client.post("/auth/login", json={"username": "alice", "password": "secret"})
    assert resp.status_code == 200
    assert resp.get_json()["user"]["isAdmin"] is False


def test_bad_credentials(client, alice):
    resp = client.post("/auth/login", json={"username": "alice", "password": "wrong"})
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "Invalid username or password"

    resp = client.post("/auth/login", json={"username": "nobody", "password": "secret"})
    assert resp.status_code == 401


def test_missing_credentials(client):
    assert client.post("/auth/login", json={"username": "alice"}).status_code == 400
    assert client.post("/auth/login", data="garbage").status_code == 400


def test_logout_ends_session(client, alice):
    client.post("/auth/login", json={"username": "alice", "password": "secret"})
    assert client.post("/auth/logout").get_json() == {"success": True}
    assert client.get("/auth/me").status_code == 401
