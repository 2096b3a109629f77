"""Tests for posting service requests."""

import uuid

from tests.helpers import auth_headers

REQUEST = {
    "title": "Need a DJ",
    "description": "Two hours for a dorm party",
    "needed_by": "2030-05-01",
}


class TestCreateRequest:
    async def test_request_starts_active(self, client, buyer):
        response = await client.post("/api/requests", json=REQUEST, headers=auth_headers(buyer.id))

        assert response.status_code == 201
        body = response.json()
        assert body["msg"] == "Request created successfully"
        assert body["data"]["status"] == "active"
        assert body["data"]["user_id"] == str(buyer.id)
        assert body["data"]["needed_by"] == "2030-05-01"

    async def test_needed_by_is_required(self, client, buyer):
        payload = {k: v for k, v in REQUEST.items() if k != "needed_by"}
        response = await client.post("/api/requests", json=payload, headers=auth_headers(buyer.id))
        assert response.status_code == 400

    async def test_requires_profile(self, client):
        response = await client.post(
            "/api/requests", json=REQUEST, headers=auth_headers(uuid.uuid4())
        )
        assert response.status_code == 404

    async def test_requires_bearer_token(self, client):
        response = await client.post("/api/requests", json=REQUEST)
        assert response.status_code == 401
