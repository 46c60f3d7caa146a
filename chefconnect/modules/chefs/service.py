import logging
from datetime import datetime, timezone
from typing import List, Optional

from postgrest.exceptions import APIError
from supabase import Client

from chefconnect.core.exceptions import ChefConnectError, NotFoundError, UnexpectedError, ValidationError
from chefconnect.database.supabase_client import first_row, translate_api_error, unexpected
from chefconnect.modules.chefs.models import CHEF_SELECT
from chefconnect.modules.chefs.schemas import ChefCreate, ChefResponse, ChefUpdate

logger = logging.getLogger(__name__)


class ChefService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_chefs(self, available: Optional[bool] = None, specialty: Optional[str] = None) -> List[ChefResponse]:
        """Public chef search, best rated first"""
        try:
            query = self.supabase.table("chefs")\
                .select(CHEF_SELECT)\
                .order("rating", desc=True)
            if available:
                query = query.eq("is_available", True)
            if specialty:
                query = query.contains("specialties", [specialty])
            result = query.execute()
        except Exception as e:
            raise unexpected(e, "Failed to fetch chefs")

        return [ChefResponse(**chef) for chef in result.data or []]

    def get_chef(self, chef_id: str) -> ChefResponse:
        """Get chef profile by ID"""
        try:
            result = self.supabase.table("chefs")\
                .select(CHEF_SELECT)\
                .eq("id", chef_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise unexpected(e, "Failed to fetch chef", not_found=NotFoundError("Chef not found"))

        row = first_row(result.data)
        if not row:
            raise NotFoundError("Chef not found")
        return ChefResponse(**row)

    def find_by_user_id(self, user_id: str) -> Optional[ChefResponse]:
        """Get the chef profile owned by a user, or None"""
        try:
            result = self.supabase.table("chefs")\
                .select("*")\
                .eq("user_id", user_id)\
                .limit(1)\
                .execute()
        except Exception as e:
            raise unexpected(e, "Failed to fetch chef")

        row = first_row(result.data)
        return ChefResponse(**row) if row else None

    def create_chef(self, user_id: str, chef_data: ChefCreate) -> ChefResponse:
        """Create the caller's chef profile and set their role to chef in one transaction"""
        try:
            result = self.supabase.rpc("create_chef_profile", {
                "p_user_id": user_id,
                "p_profile": chef_data.model_dump(mode="json"),
            }).execute()
        except APIError as e:
            raise translate_api_error(e, {
                "CHEF_PROFILE_EXISTS": ValidationError("Chef profile already exists"),
                "USER_NOT_FOUND": NotFoundError("User not found"),
            }, "Failed to create chef profile")
        except Exception as e:
            raise unexpected(e, "Failed to create chef profile")

        row = first_row(result.data)
        if not row:
            raise UnexpectedError("Failed to create chef profile")
        logger.info("User %s became chef %s", user_id, row.get("id"))
        return ChefResponse(**row)

    def update_chef(self, user_id: str, chef_data: ChefUpdate) -> ChefResponse:
        """Update the caller's chef profile (only supplied fields)"""
        try:
            update_data = chef_data.model_dump(mode="json", exclude_unset=True)
            update_data["updated_at"] = datetime.now(timezone.utc).isoformat()

            result = self.supabase.table("chefs")\
                .update(update_data)\
                .eq("user_id", user_id)\
                .execute()

            row = first_row(result.data)
            if not row:
                raise NotFoundError("Chef profile not found")
            return ChefResponse(**row)
        except ChefConnectError:
            raise
        except Exception as e:
            raise unexpected(e, "Failed to update chef profile")

    def delete_chef(self, user_id: str) -> None:
        """Delete the caller's chef profile and reset their role to customer in one transaction"""
        try:
            self.supabase.rpc("delete_chef_profile", {"p_user_id": user_id}).execute()
        except APIError as e:
            raise translate_api_error(e, {
                "CHEF_NOT_FOUND": NotFoundError("Chef profile not found"),
            }, "Failed to delete chef profile")
        except Exception as e:
            raise unexpected(e, "Failed to delete chef profile")
        logger.info("User %s is no longer a chef", user_id)
