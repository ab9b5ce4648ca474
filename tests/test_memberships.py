"""
Tests de membresías: unirse y abandonar clubs
"""
import pytest

from app.crud import membership as membership_crud
from app.utils.errors import ConflictError


def test_join_twice_conflicts(client, sample_club, sample_user):
    client.post(f"/clubs/{sample_club.id}/join", json={"userId": sample_user.id})

    resp = client.post(f"/clubs/{sample_club.id}/join", json={"userId": sample_user.id})

    assert resp.status_code == 409
    assert resp.json() == {"error": "Already a member of this club"}


def test_join_leave_join_again(client, sample_club, sample_user):
    url = f"/clubs/{sample_club.id}"

    assert client.post(f"{url}/join", json={"userId": sample_user.id}).status_code == 200
    leave = client.post(f"{url}/leave", json={"userId": sample_user.id})
    assert leave.status_code == 200
    assert leave.json() == {"message": "Successfully left club"}
    assert client.post(f"{url}/join", json={"userId": sample_user.id}).status_code == 200

    assert client.get(url).json()["club"]["members"] == [sample_user.id]


def test_leave_when_not_a_member(client, sample_club, sample_user):
    resp = client.post(f"/clubs/{sample_club.id}/leave", json={"userId": sample_user.id})

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not a member of this club"}


@pytest.mark.parametrize("action", ["join", "leave"])
def test_user_id_is_required(client, sample_club, action):
    resp = client.post(f"/clubs/{sample_club.id}/{action}", json={})

    assert resp.status_code == 400
    assert resp.json() == {"error": "User ID required"}


def test_join_missing_club(client, sample_user):
    resp = client.post("/clubs/999/join", json={"userId": sample_user.id})

    assert resp.status_code == 404
    assert resp.json() == {"error": "Club not found"}


def test_join_missing_user(client, sample_club):
    resp = client.post(f"/clubs/{sample_club.id}/join", json={"userId": 999})

    assert resp.status_code == 404
    assert resp.json() == {"error": "User not found"}


def test_duplicate_membership_insert_maps_to_conflict(db, sample_club, sample_user):
    """
    Test: si dos joins concurrentes pasan la comprobación previa, la restricción
    única de la base de datos produce el mismo ConflictError
    """
    membership_crud.create_membership(db, sample_club.id, sample_user.id)

    with pytest.raises(ConflictError) as exc:
        membership_crud.create_membership(db, sample_club.id, sample_user.id)

    assert exc.value.message == "Already a member of this club"
    assert membership_crud.get_membership(db, sample_club.id, sample_user.id) is not None
