import logging
from datetime import datetime, timezone
from typing import Optional

from supabase import Client

from chefconnect.core.exceptions import NotFoundError, UnexpectedError
from chefconnect.database.supabase_client import first_row, unexpected
from chefconnect.modules.users.schemas import UserResponse, UserRole, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def find_by_external_id(self, firebase_uid: str) -> Optional[UserResponse]:
        """Get user by Firebase subject id, or None"""
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("firebase_uid", firebase_uid)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise unexpected(e, "Failed to fetch user")

        row = first_row(result.data)
        return UserResponse(**row) if row else None

    def get_by_external_id(self, firebase_uid: str) -> UserResponse:
        user = self.find_by_external_id(firebase_uid)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def get_user_by_id(self, user_id: str) -> UserResponse:
        """Get user by internal ID"""
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise unexpected(e, "Failed to fetch user", not_found=NotFoundError("User not found"))

        row = first_row(result.data)
        if not row:
            raise NotFoundError("User not found")
        return UserResponse(**row)

    def create_user(self, firebase_uid: str, phone_number: str) -> UserResponse:
        """Create a customer on first sign-in"""
        try:
            result = self.supabase.table("users").insert({
                "firebase_uid": firebase_uid,
                "phone_number": phone_number,
                "role": UserRole.CUSTOMER.value,
            }).execute()
        except Exception as e:
            raise unexpected(e, "Failed to create user")

        row = first_row(result.data)
        if not row:
            raise UnexpectedError("Failed to create user")
        logger.info("Created user %s for subject %s", row.get("id"), firebase_uid)
        return UserResponse(**row)

    def touch_user(self, firebase_uid: str) -> UserResponse:
        """Stamp updated_at on a returning user"""
        return self._update(firebase_uid, {})

    def update_user(self, firebase_uid: str, user_data: UserUpdate) -> UserResponse:
        """Partial update of the caller's own profile"""
        return self._update(firebase_uid, user_data.model_dump(exclude_unset=True))

    def _update(self, firebase_uid: str, changes: dict) -> UserResponse:
        update_data = dict(changes)
        update_data["updated_at"] = datetime.now(timezone.utc).isoformat()
        try:
            result = self.supabase.table("users")\
                .update(update_data)\
                .eq("firebase_uid", firebase_uid)\
                .execute()
        except Exception as e:
            raise unexpected(e, "Failed to update user")

        row = first_row(result.data)
        if not row:
            raise NotFoundError("User not found")
        return UserResponse(**row)

    def delete_user(self, firebase_uid: str) -> bool:
        """Delete the user row; chef profile and bookings follow the table's ON DELETE rules"""
        try:
            result = self.supabase.table("users")\
                .delete()\
                .eq("firebase_uid", firebase_uid)\
                .execute()
        except Exception as e:
            raise unexpected(e, "Failed to delete user")

        return bool(result.data)
