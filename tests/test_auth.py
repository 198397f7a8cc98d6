# tests/test_auth.py


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_register_then_login(client):
    r = client.post("/auth/register", json={"email": "new@x.com", "password": "pass1", "role": "user"})
    assert r.status_code == 201
    data = r.json()
    assert data["email"] == "new@x.com"
    assert data["role"] == "user"
    assert data["id"]
    assert "password_hash" not in data

    r2 = client.post("/auth/login", json={"email": "new@x.com", "password": "pass1"})
    assert r2.status_code == 200
    body = r2.json()
    assert body["accessToken"]
    assert body["user"] == {"id": data["id"], "email": "new@x.com", "role": "user"}


def test_register_duplicate_email(client):
    first = client.post("/auth/register", json={"email": "dup@x.com", "password": "pass1", "role": "admin"})
    assert first.status_code == 201

    second = client.post("/auth/register", json={"email": "dup@x.com", "password": "other", "role": "user"})
    assert second.status_code == 400
    assert second.json()["message"] == "Email already exists"

    # first registration still works with its own password and role
    r = client.post("/auth/login", json={"email": "dup@x.com", "password": "pass1"})
    assert r.status_code == 200
    assert r.json()["user"]["role"] == "admin"


def test_register_validation_errors(client):
    bad_email = client.post("/auth/register", json={"email": "not-an-email", "password": "pass1", "role": "user"})
    assert bad_email.status_code == 400
    assert isinstance(bad_email.json()["message"], list)

    short_password = client.post("/auth/register", json={"email": "a@x.com", "password": "abc", "role": "user"})
    assert short_password.status_code == 400

    bad_role = client.post("/auth/register", json={"email": "a@x.com", "password": "pass1", "role": "root"})
    assert bad_role.status_code == 400
    assert bad_role.json()["message"][0]["loc"] == ["body", "role"]


def test_login_failures_are_indistinguishable(client):
    client.post("/auth/register", json={"email": "who@x.com", "password": "pass1", "role": "user"})

    wrong_password = client.post("/auth/login", json={"email": "who@x.com", "password": "wrong"})
    unknown_email = client.post("/auth/login", json={"email": "nobody@x.com", "password": "pass1"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": "Invalid credentials"}


def test_login_validation_error(client):
    r = client.post("/auth/login", json={"email": "who@x.com"})
    assert r.status_code == 400


def test_missing_token_is_rejected(client):
    r = client.get("/tickets/my")
    assert r.status_code == 401
    assert r.json()["message"] == "Access denied"


def test_garbage_token_is_rejected(client):
    r = client.get("/tickets/my", headers={"Authorization": "Bearer not.a.token"})
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid token"


def test_unknown_route_uses_message_body(client):
    r = client.get("/nope")
    assert r.status_code == 404
    assert "message" in r.json()
