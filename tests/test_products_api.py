"""Tests for the public product catalog."""

from datetime import UTC, datetime, timedelta

from tests.helpers import auth_headers, make_service

BASE = datetime(2026, 3, 1, tzinfo=UTC)


class TestListProducts:
    async def test_only_active_services_are_listed(self, client, db_session, seller, service):
        await make_service(db_session, seller, is_active=False, title="Retired")
        response = await client.get("/api/products")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [p["id"] for p in data["products"]] == [str(service.id)]
        assert data["count"] == 1
        assert data["limit"] == 50
        assert data["offset"] == 0

    async def test_products_embed_seller(self, client, seller, service):
        response = await client.get("/api/products")
        product = response.json()["data"]["products"][0]
        assert product["seller"] == {
            "id": str(seller.id),
            "full_name": seller.full_name,
            "storefront": None,
        }

    async def test_products_embed_storefront(self, client, seller, service):
        await client.post(
            "/api/seller/setup",
            json={
                "title": "Sam's Study Corner",
                "description": "Tutoring for first-years",
                "category": "tutoring",
                "portfolio": "https://portfolio.example/sam",
            },
            headers=auth_headers(seller.id),
        )

        response = await client.get(f"/api/products/{service.id}")

        storefront = response.json()["data"]["seller"]["storefront"]
        assert storefront["title"] == "Sam's Study Corner"
        assert storefront["category"] == "tutoring"

    async def test_category_filter(self, client, db_session, seller, service):
        cakes = await make_service(db_session, seller, title="Birthday cake", category="food_baking")
        response = await client.get("/api/products", params={"category": "food_baking"})

        assert [p["id"] for p in response.json()["data"]["products"]] == [str(cakes.id)]

    async def test_search_matches_title_or_description(self, client, db_session, seller):
        by_title = await make_service(
            db_session, seller, title="Python TUTORING", description="Intro course", created_at=BASE
        )
        by_description = await make_service(
            db_session,
            seller,
            title="Study help",
            description="Exam prep in python",
            created_at=BASE + timedelta(days=1),
        )
        await make_service(db_session, seller, title="Haircut", description="Fade")

        response = await client.get("/api/products", params={"search": "python"})

        ids = [p["id"] for p in response.json()["data"]["products"]]
        assert ids == [str(by_description.id), str(by_title.id)]

    async def test_sort_and_paging(self, client, db_session, seller):
        for index, title in enumerate(["Bravo", "Alpha", "Charlie"]):
            await make_service(db_session, seller, title=title, created_at=BASE + timedelta(hours=index))

        response = await client.get(
            "/api/products", params={"sortBy": "title", "order": "asc", "limit": 2, "offset": 1}
        )

        titles = [p["title"] for p in response.json()["data"]["products"]]
        assert titles == ["Bravo", "Charlie"]

    async def test_limit_is_bounded(self, client):
        response = await client.get("/api/products", params={"limit": 1000})
        assert response.status_code == 400


class TestGetProduct:
    async def test_active_product(self, client, service):
        response = await client.get(f"/api/products/{service.id}")
        assert response.status_code == 200
        assert response.json()["data"]["title"] == service.title

    async def test_inactive_product_is_not_found(self, client, db_session, seller):
        retired = await make_service(db_session, seller, is_active=False)
        response = await client.get(f"/api/products/{retired.id}")

        assert response.status_code == 404
        assert response.json()["msg"] == "Product not found"
