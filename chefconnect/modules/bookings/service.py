import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from postgrest.exceptions import APIError
from supabase import Client

from chefconnect.core.exceptions import (
    ChefConnectError, ForbiddenError, NotFoundError, UnavailableError, UnexpectedError, ValidationError
)
from chefconnect.database.supabase_client import first_row, translate_api_error, unexpected
from chefconnect.modules.bookings.models import ALLOWED_STATUS_TRANSITIONS, BOOKING_SELECT
from chefconnect.modules.bookings.schemas import (
    BookingCreate, BookingResponse, BookingStatus, PaymentStatus
)
from chefconnect.modules.chefs.service import ChefService
from chefconnect.modules.users.schemas import UserResponse, UserRole

logger = logging.getLogger(__name__)


class BookingService:
    """Booking ledger: creation, role-scoped reads and participant-only updates.

    A booking may be changed by its customer or by the user who owns its chef
    profile. Cancellation is customer-only and never removes the row.
    """

    def __init__(self, supabase: Client, enforce_status_transitions: bool = False):
        self.supabase = supabase
        self.enforce_status_transitions = enforce_status_transitions
        self.chefs = ChefService(supabase)

    def create_booking(self, customer_id: str, booking_data: BookingCreate) -> BookingResponse:
        """Create a pending booking; the chef availability check and insert share one transaction"""
        params = booking_data.model_dump(mode="json")
        try:
            result = self.supabase.rpc("create_booking", {
                "p_customer_id": customer_id,
                **{f"p_{key}": value for key, value in params.items()},
            }).execute()
        except APIError as e:
            raise translate_api_error(e, {
                "CHEF_NOT_FOUND": NotFoundError("Chef not found"),
                "CHEF_UNAVAILABLE": UnavailableError("Chef is not available"),
            }, "Failed to create booking", not_found=NotFoundError("Chef not found"))
        except Exception as e:
            raise unexpected(e, "Failed to create booking")

        row = first_row(result.data)
        if not row:
            raise UnexpectedError("Failed to create booking")
        logger.info("Customer %s booked chef %s (%s)", customer_id, booking_data.chef_id, row.get("id"))
        return BookingResponse(**row)

    def get_booking(self, booking_id: str) -> BookingResponse:
        """Get booking by ID with customer and chef embedded"""
        return BookingResponse(**self._fetch(booking_id, BOOKING_SELECT))

    def get_visible_booking(self, booking_id: str, requester: UserResponse) -> BookingResponse:
        """Get booking if the requester is a participant or an admin"""
        booking = self.get_booking(booking_id)
        if requester.role == UserRole.ADMIN:
            return booking
        if not self._is_participant(booking.customer_id, booking.chef_id, requester.id):
            raise ForbiddenError("Booking not accessible")
        return booking

    def list_bookings(self, requester: UserResponse, status: Optional[BookingStatus] = None) -> List[BookingResponse]:
        """Chefs see bookings assigned to their profile; everyone else sees bookings they made"""
        if requester.role == UserRole.CHEF:
            chef = self.chefs.find_by_user_id(requester.id)
            if chef is None:
                return []
            column, value = "chef_id", chef.id
        else:
            column, value = "customer_id", requester.id

        try:
            query = self.supabase.table("bookings")\
                .select(BOOKING_SELECT)\
                .eq(column, value)
            if status:
                query = query.eq("status", status.value)
            result = query.order("booking_date", desc=True).execute()
        except Exception as e:
            raise unexpected(e, "Failed to fetch bookings")

        return [BookingResponse(**booking) for booking in result.data or []]

    def transition(
        self,
        booking_id: str,
        requester_id: str,
        status: Optional[BookingStatus] = None,
        payment_status: Optional[PaymentStatus] = None,
    ) -> BookingResponse:
        """Update status and/or payment status; allowed for the customer and the booked chef"""
        row = self._fetch(booking_id)
        if not self._is_participant(row.get("customer_id"), row.get("chef_id"), requester_id):
            raise ForbiddenError("Unauthorized to update this booking")

        update_data: Dict[str, Any] = {}
        if status is not None:
            self._check_status_change(row.get("status"), status)
            update_data["status"] = status.value
        if payment_status is not None:
            update_data["payment_status"] = payment_status.value

        return self._update(booking_id, update_data, "Failed to update booking")

    def cancel(self, booking_id: str, requester_id: str) -> BookingResponse:
        """Soft-cancel; only the customer who made the booking may cancel it"""
        row = self._fetch(booking_id)
        if row.get("customer_id") != requester_id:
            raise ForbiddenError("Only the customer can cancel this booking")
        self._check_status_change(row.get("status"), BookingStatus.CANCELLED)

        return self._update(
            booking_id,
            {"status": BookingStatus.CANCELLED.value},
            "Failed to cancel booking",
            customer_id=requester_id,
        )

    def _fetch(self, booking_id: str, columns: str = "*") -> Dict[str, Any]:
        try:
            result = self.supabase.table("bookings")\
                .select(columns)\
                .eq("id", booking_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise unexpected(e, "Failed to fetch booking", not_found=NotFoundError("Booking not found"))

        row = first_row(result.data)
        if not row:
            raise NotFoundError("Booking not found")
        return row

    def _is_participant(self, customer_id: Optional[str], chef_id: Optional[str], user_id: str) -> bool:
        if customer_id and customer_id == user_id:
            return True
        if not chef_id:
            return False
        try:
            result = self.supabase.table("chefs")\
                .select("user_id")\
                .eq("id", chef_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise unexpected(e, "Failed to fetch chef")
        chef = first_row(result.data)
        return bool(chef) and chef.get("user_id") == user_id

    def _check_status_change(self, current: Optional[str], new: BookingStatus) -> None:
        if not self.enforce_status_transitions or current is None or current == new.value:
            return
        allowed = ALLOWED_STATUS_TRANSITIONS.get(BookingStatus(current), set())
        if new not in allowed:
            raise ValidationError(
                "Invalid status transition",
                details=f"Cannot move booking from {current} to {new.value}",
            )

    def _update(self, booking_id: str, changes: Dict[str, Any], error_message: str, **filters: str) -> BookingResponse:
        update_data = dict(changes)
        update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            query = self.supabase.table("bookings")\
                .update(update_data)\
                .eq("id", booking_id)
            for column, value in filters.items():
                query = query.eq(column, value)
            result = query.execute()

            row = first_row(result.data)
            if not row:
                raise NotFoundError("Booking not found")
            return BookingResponse(**row)
        except ChefConnectError:
            raise
        except Exception as e:
            raise unexpected(e, error_message)
