"""Tests for seller service management."""

import uuid

from sqlalchemy import select

from hustle_village.models import Seller, Service
from hustle_village.services.seller_service import clean_service_updates
from tests.helpers import auth_headers, make_service

NEW_SERVICE = {
    "title": "Logo design",
    "description": "Three concepts and two revisions",
    "category": "design_creative",
    "portfolio": "https://portfolio.example/logos",
    "default_price": "40.00",
    "default_delivery_time": "5 days",
}

STOREFRONT = {
    "title": "Sam's Study Corner",
    "description": "Tutoring for first-years",
    "category": "tutoring",
    "portfolio": "https://portfolio.example/sam",
    "default_price": "20.00",
}


def test_clean_service_updates_strips_protected_and_null_fields():
    cleaned = clean_service_updates(
        {"title": "New", "description": None, "is_verified": True, "user_id": uuid.uuid4()}
    )
    assert cleaned == {"title": "New"}


class TestSetupSeller:
    async def test_first_setup_creates_storefront(self, client, seller):
        response = await client.post(
            "/api/seller/setup", json=STOREFRONT, headers=auth_headers(seller.id)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["msg"] == "Seller info saved successfully"
        assert body["data"]["user_id"] == str(seller.id)
        assert body["data"]["title"] == STOREFRONT["title"]

    async def test_second_setup_replaces_the_same_row(self, client, session_maker, seller):
        first = await client.post(
            "/api/seller/setup", json=STOREFRONT, headers=auth_headers(seller.id)
        )
        second = await client.post(
            "/api/seller/setup",
            json={**STOREFRONT, "title": "Sam's Exam Clinic", "category": "tech_dev"},
            headers=auth_headers(seller.id),
        )

        assert second.status_code == 200
        assert second.json()["data"]["id"] == first.json()["data"]["id"]
        assert second.json()["data"]["title"] == "Sam's Exam Clinic"

        async with session_maker() as session:
            rows = (await session.execute(select(Seller))).scalars().all()
            assert len(rows) == 1
            assert rows[0].category == "tech_dev"

    async def test_missing_required_field(self, client, seller):
        payload = {k: v for k, v in STOREFRONT.items() if k != "description"}
        response = await client.post(
            "/api/seller/setup", json=payload, headers=auth_headers(seller.id)
        )
        assert response.status_code == 400
        assert response.json()["data"] is None

    async def test_requires_profile(self, client):
        response = await client.post(
            "/api/seller/setup", json=STOREFRONT, headers=auth_headers(uuid.uuid4())
        )
        assert response.status_code == 404

    async def test_requires_bearer_token(self, client):
        response = await client.post("/api/seller/setup", json=STOREFRONT)
        assert response.status_code == 401


class TestCreateService:
    async def test_create_starts_active_and_unverified(self, client, seller):
        payload = {**NEW_SERVICE, "is_verified": True, "is_active": False}
        response = await client.post(
            "/api/seller/services", json=payload, headers=auth_headers(seller.id)
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["user_id"] == str(seller.id)
        assert data["is_active"] is True
        assert data["is_verified"] is False

    async def test_unknown_category_is_rejected(self, client, seller):
        payload = {**NEW_SERVICE, "category": "crypto"}
        response = await client.post(
            "/api/seller/services", json=payload, headers=auth_headers(seller.id)
        )
        assert response.status_code == 400

    async def test_missing_portfolio_is_rejected(self, client, seller):
        payload = {k: v for k, v in NEW_SERVICE.items() if k != "portfolio"}
        response = await client.post(
            "/api/seller/services", json=payload, headers=auth_headers(seller.id)
        )
        assert response.status_code == 400


class TestListMyServices:
    async def test_lists_only_own_services(self, client, db_session, seller, outsider, service):
        await make_service(db_session, outsider, title="Not mine")
        response = await client.get("/api/seller/services", headers=auth_headers(seller.id))

        assert response.status_code == 200
        assert [s["id"] for s in response.json()["data"]] == [str(service.id)]


class TestEditService:
    async def test_edit_updates_fields_but_not_verification(
        self, client, session_maker, db_session, seller
    ):
        pending = await make_service(db_session, seller, is_verified=False)
        response = await client.put(
            f"/api/seller/services/{pending.id}",
            json={"title": "Updated title", "is_verified": True},
            headers=auth_headers(seller.id),
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["title"] == "Updated title"
        assert data["is_verified"] is False

        async with session_maker() as session:
            stored = (await session.execute(select(Service).where(Service.id == pending.id))).scalar_one()
            assert stored.is_verified is False

    async def test_empty_edit_is_rejected(self, client, seller, service):
        response = await client.put(
            f"/api/seller/services/{service.id}",
            json={"is_verified": False},
            headers=auth_headers(seller.id),
        )
        assert response.status_code == 400
        assert response.json()["msg"] == "No valid fields to update"

    async def test_non_owner_gets_not_found(self, client, outsider, service):
        response = await client.put(
            f"/api/seller/services/{service.id}",
            json={"title": "Hijacked"},
            headers=auth_headers(outsider.id),
        )
        assert response.status_code == 404
        assert response.json()["msg"] == "Service not found or you do not have permission"


class TestToggleService:
    async def test_toggle_flips_active_flag(self, client, seller, service):
        off = await client.patch(
            f"/api/seller/services/{service.id}/toggle", headers=auth_headers(seller.id)
        )
        assert off.status_code == 200
        assert off.json()["msg"] == "Service is now inactive"
        assert off.json()["data"]["is_active"] is False

        on = await client.patch(
            f"/api/seller/services/{service.id}/toggle", headers=auth_headers(seller.id)
        )
        assert on.json()["msg"] == "Service is now active"

    async def test_non_owner_cannot_toggle(self, client, buyer, service):
        response = await client.patch(
            f"/api/seller/services/{service.id}/toggle", headers=auth_headers(buyer.id)
        )
        assert response.status_code == 404
