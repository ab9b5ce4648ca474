"""
Tests de usuarios
"""
from app.models.club import Club
from app.models.membership import Membership


def test_list_users_never_exposes_credentials(client, make_user):
    make_user(email="one@example.com")
    make_user(email="two@example.com", role="Admin")

    users = client.get("/users").json()["users"]

    assert [u["email"] for u in users] == ["one@example.com", "two@example.com"]
    for user in users:
        assert set(user) == {"id", "email", "role", "createdAt"}


def test_get_user_includes_clubs(client, sample_user, sample_club):
    client.post(f"/clubs/{sample_club.id}/join", json={"userId": sample_user.id})

    user = client.get(f"/users/{sample_user.id}").json()["user"]

    assert user["email"] == sample_user.email
    assert user["clubs"] == [{"id": sample_club.id, "name": "Chess"}]


def test_get_missing_user(client):
    resp = client.get("/users/999")

    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


def test_update_role_to_leader(client, sample_user):
    resp = client.put(f"/users/{sample_user.id}", json={"role": "Leader"})

    assert resp.status_code == 200
    user = client.get(f"/users/{sample_user.id}").json()["user"]
    assert user["role"] == "Leader"
    assert user["email"] == "member@example.com"


def test_update_role_outside_enum_is_rejected(client, sample_user):
    resp = client.put(f"/users/{sample_user.id}", json={"role": "Owner"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid role"}


def test_update_password_is_rehashed(client, sample_user):
    client.put(f"/users/{sample_user.id}", json={"password": "new-secret"})

    old = client.post("/auth/login", json={"email": sample_user.email, "password": "secret"})
    new = client.post("/auth/login", json={"email": sample_user.email, "password": "new-secret"})

    assert old.status_code == 401
    assert new.status_code == 200


def test_update_email_taken_by_another_user(client, make_user, sample_user):
    make_user(email="taken@example.com")

    resp = client.put(f"/users/{sample_user.id}", json={"email": "taken@example.com"})

    assert resp.status_code == 409


def test_update_missing_user(client):
    resp = client.put("/users/999", json={"role": "Leader"})

    assert resp.status_code == 404


def test_delete_user_removes_memberships_and_club_references(client, db, sample_user):
    club = Club(
        name="Chess",
        description="d",
        image="i",
        admin_id=sample_user.id,
        leader_id=sample_user.id,
    )
    db.add(club)
    db.commit()
    client.post(f"/clubs/{club.id}/join", json={"userId": sample_user.id})

    resp = client.delete(f"/users/{sample_user.id}")

    assert resp.status_code == 200
    assert resp.json() == {"message": "User deleted successfully"}
    assert db.query(Membership).count() == 0
    remaining = client.get(f"/clubs/{club.id}").json()["club"]
    assert remaining["adminId"] is None
    assert remaining["leaderId"] is None
    assert remaining["members"] == []


def test_delete_missing_user(client):
    assert client.delete("/users/999").status_code == 404
