"""Tests for per-user booking listings."""

from datetime import UTC, datetime, timedelta

from hustle_village.services.booking_query_service import booking_query_service
from tests.helpers import make_booking, make_profile, make_service

BASE = datetime(2026, 1, 1, 9, 0, tzinfo=UTC)


class TestListForUser:
    async def test_buyer_sees_only_own_bookings_newest_first(
        self, session_maker, db_session, buyer, outsider, service
    ):
        older = await make_booking(db_session, buyer, service, created_at=BASE)
        newer = await make_booking(db_session, buyer, service, created_at=BASE + timedelta(hours=1))
        await make_booking(db_session, outsider, service, created_at=BASE + timedelta(hours=2))

        async with session_maker() as session:
            bookings = await booking_query_service.list_for_user(session, buyer.id, "buyer")

        assert [b.id for b in bookings] == [newer.id, older.id]

    async def test_seller_sees_bookings_on_owned_services(
        self, session_maker, db_session, buyer, outsider, seller, service
    ):
        other_seller = await make_profile(db_session, role="seller")
        other_service = await make_service(db_session, other_seller)
        mine_a = await make_booking(db_session, buyer, service, created_at=BASE)
        mine_b = await make_booking(db_session, outsider, service, created_at=BASE + timedelta(minutes=5))
        await make_booking(db_session, buyer, other_service, created_at=BASE + timedelta(minutes=10))

        async with session_maker() as session:
            bookings = await booking_query_service.list_for_user(session, seller.id, "seller")
            assert [b.id for b in bookings] == [mine_b.id, mine_a.id]
            assert all(b.service.user_id == seller.id for b in bookings)

    async def test_seller_without_services_gets_empty_list(self, db_session, buyer, service):
        await make_booking(db_session, buyer, service)
        assert await booking_query_service.list_for_user(db_session, buyer.id, "seller") == []

    async def test_buyer_without_bookings_gets_empty_list(self, db_session, seller, service):
        assert await booking_query_service.list_for_user(db_session, seller.id, "buyer") == []
