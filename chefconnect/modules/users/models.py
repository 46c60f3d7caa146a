# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
# Authentication is handled by Firebase; rows are keyed to it by firebase_uid

"""
Expected Supabase table structure:

users:
- id: uuid (primary key, default: gen_random_uuid())
- firebase_uid: text (unique, not null) - Firebase subject identifier
- phone_number: text (not null) - from the verified ID token
- email: text (nullable)
- full_name: text (nullable)
- avatar_url: text (nullable)
- role: user_role enum ('customer' | 'chef' | 'admin', default: 'customer')
- created_at: timestamptz (default: now())
- updated_at: timestamptz (default: now())

role is only changed by the create_chef_profile / delete_chef_profile
functions (see supabase/migrations).
"""
