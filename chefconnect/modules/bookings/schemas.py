from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import date, datetime, time

from chefconnect.modules.chefs.schemas import ChefResponse


class BookingStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"


class BookingCreate(BaseModel):
    chef_id: str = Field(min_length=1)
    booking_date: date
    start_time: time
    end_time: time
    total_amount: float = Field(gt=0)
    number_of_guests: int = Field(ge=1)
    location: str = Field(min_length=1)
    special_requests: Optional[str] = None
    cuisine_type: Optional[str] = None


class BookingUpdate(BaseModel):
    booking_id: str = Field(min_length=1)
    status: Optional[BookingStatus] = None
    payment_status: Optional[PaymentStatus] = None


class BookingParty(BaseModel):
    id: str
    full_name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: Optional[str] = None
    chef_id: Optional[str] = None
    booking_date: date
    start_time: time
    end_time: time
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    total_amount: float
    number_of_guests: int
    location: str
    special_requests: Optional[str] = None
    cuisine_type: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
    customer: Optional[BookingParty] = None
    chef: Optional[ChefResponse] = None


class BookingEnvelope(BaseModel):
    success: bool = True
    booking: BookingResponse
    message: Optional[str] = None


class BookingListResponse(BaseModel):
    success: bool = True
    bookings: List[BookingResponse]
