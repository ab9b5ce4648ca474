"""
Tests de clubs: creación, lectura agregada, actualización parcial y borrado
"""
from app.models.announcement import ClubAnnouncement
from app.models.event import Event
from app.models.membership import Membership

CLUB_PAYLOAD = {
    "name": "Chess",
    "description": "Weekly chess nights",
    "image": "https://img.example.com/chess.png",
}


def test_create_club_returns_empty_aggregates(client):
    resp = client.post("/clubs", json=CLUB_PAYLOAD)

    assert resp.status_code == 201
    club = resp.json()["club"]
    assert club["name"] == "Chess"
    assert club["members"] == []
    assert club["announcements"] == []
    assert club["events"] == []
    assert club["adminId"] is None
    assert club["leaderId"] is None


def test_create_club_requires_name_description_and_image(client):
    resp = client.post("/clubs", json={"name": "Chess", "description": "x"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "Name, description, and image required"}


def test_create_club_stores_admin_and_leader_without_checking_them(client):
    """
    Test: adminId/leaderId son referencias blandas, se guardan aunque no existan
    """
    resp = client.post("/clubs", json={**CLUB_PAYLOAD, "adminId": 999, "leaderId": 998})

    assert resp.status_code == 201
    club = resp.json()["club"]
    assert club["adminId"] == 999
    assert club["leaderId"] == 998


def test_scenario_create_join_and_list(client, sample_user):
    club_id = client.post("/clubs", json=CLUB_PAYLOAD).json()["club"]["id"]

    join = client.post(f"/clubs/{club_id}/join", json={"userId": sample_user.id})
    assert join.status_code == 200
    assert join.json() == {"message": "Successfully joined club"}

    clubs = client.get("/clubs").json()["clubs"]
    assert [c["members"] for c in clubs if c["id"] == club_id] == [[sample_user.id]]


def test_list_embeds_newest_announcements_and_events_by_date(client, db, sample_club):
    for i in range(12):
        db.add(ClubAnnouncement(club_id=sample_club.id, text=f"note {i}"))
    db.add(Event(title="Late", description="d", event_date="2025-06-01", club_id=sample_club.id))
    db.add(Event(title="Early", description="d", event_date="2025-01-01", club_id=sample_club.id))
    db.commit()

    club = client.get("/clubs").json()["clubs"][0]

    assert len(club["announcements"]) == 10
    assert club["announcements"][0]["text"] == "note 11"
    assert [e["title"] for e in club["events"]] == ["Early", "Late"]
    assert club["events"][0]["date"] == "2025-01-01"


def test_get_club_embeds_all_announcements(client, db, sample_club):
    for i in range(12):
        db.add(ClubAnnouncement(club_id=sample_club.id, text=f"note {i}"))
    db.commit()

    club = client.get(f"/clubs/{sample_club.id}").json()["club"]

    assert len(club["announcements"]) == 12
    assert club["announcements"][-1]["text"] == "note 0"


def test_get_missing_club(client):
    resp = client.get("/clubs/999")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Club not found"}


def test_partial_update_keeps_omitted_fields(client, sample_club):
    client.put(f"/clubs/{sample_club.id}", json={"leaderId": 5})

    resp = client.put(f"/clubs/{sample_club.id}", json={"name": "X"})

    assert resp.status_code == 200
    assert resp.json() == {"message": "Club updated successfully"}
    club = client.get(f"/clubs/{sample_club.id}").json()["club"]
    assert club["name"] == "X"
    assert club["description"] == "Weekly chess nights"
    assert club["image"] == "https://img.example.com/chess.png"
    assert club["leaderId"] == 5


def test_update_with_no_fields_is_rejected(client, sample_club):
    resp = client.put(f"/clubs/{sample_club.id}", json={})

    assert resp.status_code == 400
    assert resp.json() == {"error": "At least one field required"}


def test_update_missing_club(client):
    resp = client.put("/clubs/999", json={"name": "X"})

    assert resp.status_code == 404
    assert resp.json() == {"error": "Club not found"}


def test_delete_club_removes_memberships_announcements_and_events(client, db, sample_club, sample_user):
    client.post(f"/clubs/{sample_club.id}/join", json={"userId": sample_user.id})
    client.post(f"/clubs/{sample_club.id}/announcements", json={"text": "hello"})
    client.post(
        "/events",
        json={"title": "T", "description": "D", "date": "2025-01-01", "clubId": sample_club.id},
    )

    resp = client.delete(f"/clubs/{sample_club.id}")

    assert resp.status_code == 200
    assert resp.json() == {"message": "Club deleted successfully"}
    assert client.get(f"/clubs/{sample_club.id}").status_code == 404
    assert db.query(Membership).count() == 0
    assert db.query(ClubAnnouncement).count() == 0
    assert db.query(Event).count() == 0


def test_delete_missing_club(client):
    resp = client.delete("/clubs/999")

    assert resp.status_code == 404
