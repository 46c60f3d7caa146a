# Firebase Authentication
# Sign-in (phone number + OTP) happens client side with the Firebase SDK.
# The client sends the resulting Firebase ID token to this API:
# - POST /auth/verify-otp with {"idToken": ...} to register/refresh the user row
# - Authorization: Bearer <idToken> on every protected request

"""
Verified ID token claims consumed by the API:
- uid: Firebase subject identifier, stored as users.firebase_uid
- phone_number: E.164 phone number, stored as users.phone_number on first sign-in

No tables are owned by this module. User rows live in the users table
(see modules/users/models.py).
"""
