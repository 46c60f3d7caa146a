"""
Unit tests for BookingService against the in-memory Supabase double.
"""

from datetime import date, time

import pytest

from chefconnect.core.exceptions import ForbiddenError, NotFoundError, UnavailableError, ValidationError
from chefconnect.modules.bookings.schemas import BookingCreate, BookingStatus, PaymentStatus
from chefconnect.modules.bookings.service import BookingService
from chefconnect.modules.users.schemas import UserResponse
from tests.fakes import FakeSupabase

pytestmark = pytest.mark.unit


@pytest.fixture
def db():
    db = FakeSupabase()
    db.customer = db.add("users", firebase_uid="uid-c", phone_number="+1", role="customer")
    db.chef_user = db.add("users", firebase_uid="uid-k", phone_number="+2", role="chef")
    db.chef = db.add("chefs", user_id=db.chef_user["id"], hourly_rate=80)
    return db


def new_booking(chef_id: str) -> BookingCreate:
    return BookingCreate(
        chef_id=chef_id,
        booking_date=date(2026, 12, 24),
        start_time=time(19, 0),
        end_time=time(23, 0),
        total_amount=320,
        number_of_guests=6,
        location="Lakeside cabin",
    )


def test_create_passes_every_field_to_transactional_insert(db):
    service = BookingService(db)

    booking = service.create_booking(db.customer["id"], new_booking(db.chef["id"]))

    assert db.calls == [("rpc", "create_booking")]
    assert booking.status == BookingStatus.PENDING
    assert booking.payment_status == PaymentStatus.PENDING
    assert booking.booking_date == date(2026, 12, 24)
    assert booking.start_time == time(19, 0)
    assert booking.number_of_guests == 6


def test_create_against_unavailable_chef(db):
    db.chef["is_available"] = False

    with pytest.raises(UnavailableError):
        BookingService(db).create_booking(db.customer["id"], new_booking(db.chef["id"]))
    assert db.tables["bookings"] == []


def test_create_against_missing_chef(db):
    with pytest.raises(NotFoundError):
        BookingService(db).create_booking(db.customer["id"], new_booking("chefs-404"))


def test_transition_without_fields_only_stamps_updated_at(db):
    service = BookingService(db)
    booking = service.create_booking(db.customer["id"], new_booking(db.chef["id"]))
    db.row("bookings", booking.id)["updated_at"] = "2000-01-01T00:00:00+00:00"

    updated = service.transition(booking.id, db.customer["id"])

    assert updated.status == BookingStatus.PENDING
    assert updated.updated_at.year > 2000


def test_transition_by_stranger_leaves_row_untouched(db):
    service = BookingService(db)
    booking = service.create_booking(db.customer["id"], new_booking(db.chef["id"]))
    db.calls.clear()

    with pytest.raises(ForbiddenError):
        service.transition(booking.id, "users-stranger", status=BookingStatus.CONFIRMED)
    assert ("bookings", "update") not in db.calls


@pytest.mark.parametrize("current,new", [
    ("pending", "confirmed"),
    ("pending", "cancelled"),
    ("confirmed", "completed"),
    ("confirmed", "cancelled"),
    ("completed", "completed"),
])
def test_strict_graph_allows(db, current, new):
    service = BookingService(db, enforce_status_transitions=True)
    booking = service.create_booking(db.customer["id"], new_booking(db.chef["id"]))
    db.row("bookings", booking.id)["status"] = current

    updated = service.transition(booking.id, db.chef_user["id"], status=BookingStatus(new))

    assert updated.status.value == new


@pytest.mark.parametrize("current,new", [
    ("pending", "completed"),
    ("completed", "pending"),
    ("cancelled", "confirmed"),
    ("confirmed", "pending"),
])
def test_strict_graph_rejects(db, current, new):
    service = BookingService(db, enforce_status_transitions=True)
    booking = service.create_booking(db.customer["id"], new_booking(db.chef["id"]))
    db.row("bookings", booking.id)["status"] = current

    with pytest.raises(ValidationError):
        service.transition(booking.id, db.chef_user["id"], status=BookingStatus(new))
    assert db.row("bookings", booking.id)["status"] == current


def test_strict_graph_blocks_cancelling_completed_booking(db):
    service = BookingService(db, enforce_status_transitions=True)
    booking = service.create_booking(db.customer["id"], new_booking(db.chef["id"]))
    db.row("bookings", booking.id)["status"] = "completed"

    with pytest.raises(ValidationError):
        service.cancel(booking.id, db.customer["id"])


def test_cancel_is_customer_only(db):
    service = BookingService(db)
    booking = service.create_booking(db.customer["id"], new_booking(db.chef["id"]))

    with pytest.raises(ForbiddenError):
        service.cancel(booking.id, db.chef_user["id"])

    cancelled = service.cancel(booking.id, db.customer["id"])
    assert cancelled.status == BookingStatus.CANCELLED
    assert len(db.tables["bookings"]) == 1


def test_list_for_chef_matches_profile_id(db):
    service = BookingService(db)
    other_chef = db.add("chefs", user_id="users-other", hourly_rate=10)
    mine = service.create_booking(db.customer["id"], new_booking(db.chef["id"]))
    service.create_booking(db.customer["id"], new_booking(other_chef["id"]))
    chef_user = UserResponse(**db.chef_user)

    bookings = service.list_bookings(chef_user)

    assert [b.id for b in bookings] == [mine.id]
    assert all(b.chef_id == db.chef["id"] for b in bookings)
