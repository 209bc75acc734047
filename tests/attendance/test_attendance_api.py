from __future__ import annotations


def test_check_in_and_out_over_http(client):
    resp = client.post("/api/attendance/check-in", json={"personnelId": "p1", "personnelName": "Ada"})
    assert resp.status_code == 201
    record = resp.get_json()["record"]
    assert record["checkIn"] == "09:00"
    assert record["checkOut"] is None
    assert record["date"] == "31.01.2026"

    resp = client.post("/api/attendance/check-in", json={"personnelId": "p1", "personnelName": "Ada"})
    assert resp.status_code == 409
    assert resp.get_json()["error"] == "ALREADY_CHECKED_IN"

    resp = client.post("/api/attendance/check-out", json={"personnelId": "p1"})
    assert resp.status_code == 200
    assert resp.get_json()["record"]["duration"] == 0


def test_check_out_without_session_is_conflict(client):
    resp = client.post("/api/attendance/check-out", json={"personnelId": "nobody"})
    assert resp.status_code == 409
    assert resp.get_json()["error"] == "NO_OPEN_SESSION"


def test_check_in_resolves_name_from_personnel(client, container):
    p = container.personnel_service.add_personnel(
        name="Grace", email="g@example.com", position="Engineer", department="Information Technology"
    )

    resp = client.post("/api/attendance/check-in", json={"personnelId": p.id})
    assert resp.status_code == 201
    assert resp.get_json()["record"]["personnelName"] == "Grace"

    today = client.get("/api/attendance/today").get_json()
    assert [r["personnelId"] for r in today] == [p.id]


def test_check_in_unknown_personnel_without_name_is_not_found(client):
    resp = client.post("/api/attendance/check-in", json={"personnelId": "missing"})
    assert resp.status_code == 404


def test_check_in_requires_personnel_id(client):
    resp = client.post("/api/attendance/check-in", json={})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "VALIDATION_FAILED"


def test_delete_record(client):
    rec = client.post("/api/attendance/check-in", json={"personnelId": "p1", "personnelName": "Ada"}).get_json()["record"]

    assert client.delete(f"/api/attendance/{rec['id']}").get_json()["deleted"] is True
    assert client.get("/api/attendance").get_json() == []


def test_non_text_notes_are_a_validation_error(client):
    resp = client.post("/api/attendance/check-in", json={"personnelId": "p1", "personnelName": "Ada", "notes": 5})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "VALIDATION_FAILED"
