"""Owner-scoped CRUD across internships, skills and certifications."""

import pytest
from bson import ObjectId

INTERNSHIP = {
    "company": "Acme",
    "role": "Intern",
    "startDate": "2024-01-01",
    "status": "ongoing",
    "skills": ["Go"],
}
SKILL = {"name": "Python", "proficiency": 4, "category": "technical", "status": "proficient"}
CERTIFICATION = {
    "name": "Cloud Practitioner",
    "platform": "AWS",
    "completionDate": "2024-03-15",
    "certificateLink": "https://example.com/cert/1",
    "credentialId": "ABC-123",
}

PAYLOADS = {
    "internships": (INTERNSHIP, "Internship"),
    "skills": (SKILL, "Skill"),
    "certifications": (CERTIFICATION, "Certification"),
}


def test_internship_lifecycle_across_users(client, alice, bob):
    created = client.post("/api/internships", json=INTERNSHIP, headers=alice["headers"])
    assert created.status_code == 201
    record = created.json()
    assert record["_id"]
    assert record["owner"] == alice["id"]
    assert record["company"] == "Acme"
    assert record["skills"] == ["Go"]

    url = f"/api/internships/{record['_id']}"
    as_bob = client.get(url, headers=bob["headers"])
    assert as_bob.status_code == 404
    assert as_bob.json() == {"message": "Internship not found"}

    deleted = client.delete(url, headers=alice["headers"])
    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Internship removed"}

    assert client.get(url, headers=alice["headers"]).status_code == 404


@pytest.mark.parametrize("resource", list(PAYLOADS))
def test_other_owner_sees_not_found(client, alice, bob, resource):
    payload, label = PAYLOADS[resource]
    record = client.post(f"/api/{resource}", json=payload, headers=alice["headers"]).json()
    url = f"/api/{resource}/{record['_id']}"
    missing_url = f"/api/{resource}/{ObjectId()}"

    for method, kwargs in [("GET", {}), ("PUT", {"json": payload}), ("DELETE", {})]:
        foreign = client.request(method, url, headers=bob["headers"], **kwargs)
        missing = client.request(method, missing_url, headers=bob["headers"], **kwargs)
        assert foreign.status_code == missing.status_code == 404
        assert foreign.json() == missing.json() == {"message": f"{label} not found"}

    # Still intact for the owner
    assert client.get(url, headers=alice["headers"]).status_code == 200


@pytest.mark.parametrize("resource", list(PAYLOADS))
def test_malformed_id_is_not_found(client, alice, resource):
    response = client.get(f"/api/{resource}/not-an-id", headers=alice["headers"])
    assert response.status_code == 404


def test_list_only_own_records_newest_first(client, alice, bob):
    for name in ("First", "Second", "Third"):
        client.post("/api/skills", json={"name": name}, headers=alice["headers"])
    client.post("/api/skills", json={"name": "Bob's"}, headers=bob["headers"])

    names = [s["name"] for s in client.get("/api/skills", headers=alice["headers"]).json()]
    assert names == ["Third", "Second", "First"]
    assert [s["name"] for s in client.get("/api/skills", headers=bob["headers"]).json()] == ["Bob's"]


def test_create_sets_owner_even_if_payload_names_another(client, alice, bob):
    payload = dict(SKILL, owner=bob["id"], _id=str(ObjectId()))
    record = client.post("/api/skills", json=payload, headers=alice["headers"]).json()
    assert record["owner"] == alice["id"]
    assert record["_id"] != payload["_id"]


def test_update_keeps_owner_and_created_at(client, db, alice, bob):
    record = client.post("/api/internships", json=INTERNSHIP, headers=alice["headers"]).json()
    stored_before = db["internships"].find_one({"_id": ObjectId(record["_id"])})

    changes = dict(INTERNSHIP, status="completed", endDate="2024-06-30",
                   owner=bob["id"], createdAt="1999-01-01T00:00:00")
    response = client.put(f"/api/internships/{record['_id']}", json=changes, headers=alice["headers"])
    assert response.status_code == 200
    updated = response.json()
    assert updated["status"] == "completed"
    assert updated["endDate"].startswith("2024-06-30")
    assert updated["owner"] == alice["id"]

    stored = db["internships"].find_one({"_id": ObjectId(record["_id"])})
    assert stored["owner"] == ObjectId(alice["id"])
    assert stored["createdAt"] == stored_before["createdAt"]
    assert client.get(f"/api/internships/{record['_id']}", headers=bob["headers"]).status_code == 404


def test_update_is_full_overwrite(client, alice):
    record = client.post("/api/internships", json=dict(INTERNSHIP, notes="first notes"),
                         headers=alice["headers"]).json()
    updated = client.put(f"/api/internships/{record['_id']}", json=INTERNSHIP,
                         headers=alice["headers"]).json()
    assert "notes" not in updated


def test_update_revalidates(client, alice):
    record = client.post("/api/internships", json=INTERNSHIP, headers=alice["headers"]).json()
    response = client.put(f"/api/internships/{record['_id']}", json=dict(INTERNSHIP, status="paused"),
                          headers=alice["headers"])
    assert response.status_code == 500
    assert response.json()["message"] == "Server error"
    unchanged = client.get(f"/api/internships/{record['_id']}", headers=alice["headers"]).json()
    assert unchanged["status"] == "ongoing"


@pytest.mark.parametrize("payload,field", [
    ({k: v for k, v in INTERNSHIP.items() if k != "company"}, "company"),
    (dict(INTERNSHIP, company="   "), "company"),
    (dict(INTERNSHIP, startDate="not a date"), "startDate"),
    (dict(INTERNSHIP, status="paused"), "status"),
])
def test_invalid_internship_is_server_error_naming_field(client, db, alice, payload, field):
    response = client.post("/api/internships", json=payload, headers=alice["headers"])
    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Server error"
    assert field in body["error"]
    assert db["internships"].count_documents({}) == 0


def test_non_object_body_is_server_error(client, alice):
    response = client.post("/api/skills", json=["not", "an", "object"], headers=alice["headers"])
    assert response.status_code == 500


def test_create_applies_defaults_and_trims(client, alice):
    skill = client.post("/api/skills", json={"name": "  SQL  "}, headers=alice["headers"]).json()
    assert skill["name"] == "SQL"
    assert skill["proficiency"] == 1
    assert skill["category"] == "technical"
    assert skill["status"] == "learning"
    assert "createdAt" in skill

    internship = client.post("/api/internships", json=dict(INTERNSHIP, skills=[" Go ", "", "Rust"], status=None),
                             headers=alice["headers"])
    # null status is not an allowed value
    assert internship.status_code == 500

    without_status = {k: v for k, v in INTERNSHIP.items() if k != "status"}
    without_status["skills"] = [" Go ", "", "Rust"]
    internship = client.post("/api/internships", json=without_status, headers=alice["headers"]).json()
    assert internship["status"] == "ongoing"
    assert internship["skills"] == ["Go", "Rust"]


def test_certification_optional_fields(client, alice):
    payload = {"name": "Scrum", "platform": "Coursera", "completionDate": "2023-11-02"}
    record = client.post("/api/certifications", json=payload, headers=alice["headers"]).json()
    assert record["platform"] == "Coursera"
    assert "certificateLink" not in record
    assert "credentialId" not in record


def test_create_returns_stored_datetimes(client, alice):
    payload = dict(INTERNSHIP, startDate="2024-01-01T10:00:00+05:00", endDate="2024-06-30T23:30:00-02:00")
    created = client.post("/api/internships", json=payload, headers=alice["headers"])
    assert created.status_code == 201

    fetched = client.get(f"/api/internships/{created.json()['_id']}", headers=alice["headers"])
    assert fetched.json() == created.json()
    assert created.json()["startDate"] == "2024-01-01T05:00:00+00:00"
    assert created.json()["endDate"] == "2024-07-01T01:30:00+00:00"
    assert created.json()["createdAt"].endswith("+00:00")

    listed = client.get("/api/internships", headers=alice["headers"]).json()
    assert listed == [created.json()]


def test_error_responses_documented(client):
    paths = client.get("/openapi.json").json()["paths"]
    error_ref = "#/components/schemas/ErrorResponse"

    item = paths["/api/internships/{record_id}"]
    for method in ("get", "put", "delete"):
        for status in ("401", "404", "500"):
            schema = item[method]["responses"][status]["content"]["application/json"]["schema"]
            assert schema == {"$ref": error_ref}

    create = paths["/api/skills"]["post"]["responses"]
    assert create["500"]["content"]["application/json"]["schema"] == {"$ref": error_ref}
