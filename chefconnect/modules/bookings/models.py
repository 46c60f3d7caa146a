# Supabase table: bookings
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- customer_id: uuid (foreign key to users.id, on delete set null)
- chef_id: uuid (foreign key to chefs.id, on delete set null)
- booking_date: date (not null)
- start_time: time (not null)
- end_time: time (not null)
- status: booking_status enum ('pending' | 'confirmed' | 'cancelled' | 'completed', default: 'pending')
- payment_status: payment_status enum ('pending' | 'paid' | 'refunded', default: 'pending')
- total_amount: numeric (not null)
- number_of_guests: integer (not null)
- location: text (not null)
- special_requests: text (nullable)
- cuisine_type: text (nullable)
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now())

Rows are never deleted by the API; cancellation sets status = 'cancelled'.
Inserts go through the create_booking function, which locks the chef row
while checking is_available.
"""

from chefconnect.modules.bookings.schemas import BookingStatus

BOOKING_SELECT = (
    "*, customer:customer_id (id, full_name, phone_number, email), "
    "chef:chef_id (*, user:user_id (id, full_name, phone_number, email))"
)

# Only consulted when ENFORCE_STATUS_TRANSITIONS is on
ALLOWED_STATUS_TRANSITIONS = {
    BookingStatus.PENDING: {BookingStatus.CONFIRMED, BookingStatus.CANCELLED},
    BookingStatus.CONFIRMED: {BookingStatus.COMPLETED, BookingStatus.CANCELLED},
    BookingStatus.CANCELLED: set(),
    BookingStatus.COMPLETED: set(),
}
