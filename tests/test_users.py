# tests/test_users.py


def test_list_users_sorted_by_email(client, admin, user, other_user):
    r = client.get("/users", headers=admin["headers"])
    assert r.status_code == 200
    data = r.json()
    assert [u["email"] for u in data] == ["admin@x.com", "other@x.com", "user@x.com"]
    assert data[0] == {"id": admin["id"], "email": "admin@x.com", "role": "admin"}
    assert all(set(u) == {"id", "email", "role"} for u in data)


def test_list_users_requires_token(client):
    r = client.get("/users")
    assert r.status_code == 401
