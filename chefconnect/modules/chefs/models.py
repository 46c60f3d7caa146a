# Supabase table: chefs
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (foreign key to users.id, unique, not null, on delete cascade)
- bio: text (nullable)
- specialties: text[] (default: '{}')
- experience_years: integer (default: 0)
- hourly_rate: numeric (not null, default: 0)
- rating: numeric (default: 0)
- total_bookings: integer (default: 0)
- is_verified: boolean (default: false)
- is_available: boolean (default: true)
- location: text (nullable)
- portfolio_images: text[] (default: '{}')
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now())

Creating or deleting a profile also flips users.role between 'chef' and
'customer'. Both writes happen in one transaction inside the
create_chef_profile / delete_chef_profile functions.
"""

# Public columns of the owning user embedded in chef responses
CHEF_SELECT = "*, user:user_id (id, full_name, avatar_url, phone_number, email)"
