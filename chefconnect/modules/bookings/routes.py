from fastapi import APIRouter, Depends
from chefconnect.config import Settings
from chefconnect.core.dependencies import get_current_user, get_settings, get_supabase
from chefconnect.core.exceptions import ValidationError
from chefconnect.modules.bookings.schemas import (
    BookingCreate, BookingUpdate, BookingEnvelope, BookingListResponse, BookingStatus
)
from chefconnect.modules.bookings.service import BookingService
from chefconnect.modules.users.schemas import UserResponse
from supabase import Client
from typing import Optional, Union

router = APIRouter(prefix="/bookings", tags=["bookings"])


def get_booking_service(
    supabase: Client = Depends(get_supabase),
    settings: Settings = Depends(get_settings)
) -> BookingService:
    return BookingService(supabase, enforce_status_transitions=settings.enforce_status_transitions)


@router.get("", response_model=Union[BookingEnvelope, BookingListResponse])
async def get_bookings(
    id: Optional[str] = None,
    status: Optional[BookingStatus] = None,
    current_user: UserResponse = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service)
):
    """Get one booking by id, or list the current user's bookings (newest date first)"""
    if id:
        return BookingEnvelope(booking=service.get_visible_booking(id, current_user))
    return BookingListResponse(bookings=service.list_bookings(current_user, status=status))


@router.post("", response_model=BookingEnvelope, status_code=201)
async def create_booking(
    booking_data: BookingCreate,
    current_user: UserResponse = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service)
):
    """Book a chef as the current user"""
    booking = service.create_booking(current_user.id, booking_data)
    return BookingEnvelope(booking=booking, message="Booking created successfully")


@router.put("", response_model=BookingEnvelope)
async def update_booking(
    booking_data: BookingUpdate,
    current_user: UserResponse = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service)
):
    """Update booking status / payment status (customer or booked chef)"""
    booking = service.transition(
        booking_data.booking_id,
        current_user.id,
        status=booking_data.status,
        payment_status=booking_data.payment_status,
    )
    return BookingEnvelope(booking=booking, message="Booking updated successfully")


@router.delete("", response_model=BookingEnvelope)
async def cancel_booking(
    id: Optional[str] = None,
    current_user: UserResponse = Depends(get_current_user),
    service: BookingService = Depends(get_booking_service)
):
    """Cancel a booking (customer only); the row is kept with status cancelled"""
    if not id:
        raise ValidationError("Booking ID is required")
    booking = service.cancel(id, current_user.id)
    return BookingEnvelope(booking=booking, message="Booking cancelled successfully")
