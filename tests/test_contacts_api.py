"""
HTTP tests for the contact routes.
"""

MISSING_ID = "0" * 24


def _create(client, payload):
    response = client.post("/api/v1/contacts", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestCreateContact:
    def test_returns_envelope_with_stored_record(self, client, contact_payload):
        response = client.post("/api/v1/contacts", json=contact_payload)

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        data = body["data"]
        assert len(data["id"]) == 24
        assert data["fullName"] == "Ada Lovelace"
        assert data["companyName"] == "Analytical Engines Ltd"
        assert data["status"] == "new"
        assert data["createdAt"] == data["updatedAt"]

    def test_empty_body_reports_every_missing_field(self, client):
        response = client.post("/api/v1/contacts", json={})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == (
            "Please provide your full name, Please provide your email, Please provide a message"
        )
        assert [d["field"] for d in body["details"]] == ["fullName", "email", "message"]
        assert {d["rule"] for d in body["details"]} == {"required"}

    def test_bad_email_is_rejected(self, client, contact_payload):
        contact_payload["email"] = "ada@"
        response = client.post("/api/v1/contacts", json=contact_payload)

        assert response.status_code == 400
        assert response.json()["error"] == "Please provide a valid email address"

    def test_non_object_body_is_rejected(self, client):
        response = client.post("/api/v1/contacts", json=["not", "an", "object"])

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "Invalid request body"

    def test_malformed_json_is_rejected(self, client):
        response = client.post(
            "/api/v1/contacts",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"


class TestReadContacts:
    def test_empty_list(self, client):
        response = client.get("/api/v1/contacts")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    def test_list_is_newest_first(self, client, contact_payload):
        first = _create(client, dict(contact_payload, fullName="First"))
        second = _create(client, dict(contact_payload, fullName="Second"))

        data = client.get("/api/v1/contacts").json()["data"]

        assert [c["id"] for c in data] == [second["id"], first["id"]]

    def test_get_by_id(self, client, contact_payload):
        created = _create(client, contact_payload)

        response = client.get(f"/api/v1/contacts/{created['id']}")

        assert response.status_code == 200
        assert response.json()["data"] == created

    def test_missing_id_is_404(self, client):
        response = client.get(f"/api/v1/contacts/{MISSING_ID}")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Contact not found"}

    def test_malformed_id_is_400(self, client):
        response = client.get("/api/v1/contacts/not-an-id")

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert "not-an-id" in response.json()["error"]


class TestUpdateContact:
    def test_status_change_keeps_other_fields(self, client, contact_payload):
        created = _create(client, contact_payload)

        response = client.put(f"/api/v1/contacts/{created['id']}", json={"status": "replied"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "replied"
        assert data["message"] == contact_payload["message"]
        assert data["createdAt"] == created["createdAt"]

    def test_status_may_go_backwards(self, client, contact_payload):
        created = _create(client, contact_payload)
        client.put(f"/api/v1/contacts/{created['id']}", json={"status": "replied"})

        response = client.put(f"/api/v1/contacts/{created['id']}", json={"status": "new"})

        assert response.json()["data"]["status"] == "new"

    def test_unknown_status_is_rejected_and_nothing_changes(self, client, contact_payload):
        created = _create(client, contact_payload)

        response = client.put(f"/api/v1/contacts/{created['id']}", json={"status": "archived"})

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "status"
        stored = client.get(f"/api/v1/contacts/{created['id']}").json()["data"]
        assert stored["status"] == "new"

    def test_update_missing_is_404(self, client):
        response = client.put(f"/api/v1/contacts/{MISSING_ID}", json={"status": "read"})

        assert response.status_code == 404


class TestDeleteContact:
    def test_delete_then_delete_again(self, client, contact_payload):
        created = _create(client, contact_payload)

        first = client.delete(f"/api/v1/contacts/{created['id']}")
        second = client.delete(f"/api/v1/contacts/{created['id']}")

        assert first.status_code == 200
        assert first.json() == {"success": True, "data": {}}
        assert second.status_code == 404
        assert client.get("/api/v1/contacts").json()["data"] == []


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/nothing-here")

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert "error" in body
