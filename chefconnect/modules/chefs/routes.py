from fastapi import APIRouter, Depends
from chefconnect.core.dependencies import get_current_user, get_supabase, require_role
from chefconnect.modules.chefs.schemas import (
    ChefCreate, ChefUpdate, ChefEnvelope, ChefListResponse
)
from chefconnect.modules.chefs.service import ChefService
from chefconnect.modules.users.schemas import MessageResponse, UserResponse, UserRole
from supabase import Client
from typing import Optional, Union

router = APIRouter(prefix="/chefs", tags=["chefs"])


def get_chef_service(supabase: Client = Depends(get_supabase)) -> ChefService:
    return ChefService(supabase)


@router.get("", response_model=Union[ChefEnvelope, ChefListResponse])
async def get_chefs(
    id: Optional[str] = None,
    available: Optional[bool] = None,
    specialty: Optional[str] = None,
    service: ChefService = Depends(get_chef_service)
):
    """Public: get one chef by id, or search chefs by availability and specialty"""
    if id:
        return ChefEnvelope(chef=service.get_chef(id))
    return ChefListResponse(chefs=service.list_chefs(available=available, specialty=specialty))


@router.post("", response_model=ChefEnvelope, status_code=201)
async def create_chef(
    chef_data: ChefCreate,
    current_user: UserResponse = Depends(get_current_user),
    service: ChefService = Depends(get_chef_service)
):
    """Create the current user's chef profile"""
    chef = service.create_chef(current_user.id, chef_data)
    return ChefEnvelope(chef=chef, message="Chef profile created successfully")


@router.put("", response_model=ChefEnvelope)
async def update_chef(
    chef_data: ChefUpdate,
    current_user: UserResponse = Depends(require_role(UserRole.CHEF)),
    service: ChefService = Depends(get_chef_service)
):
    """Update the current user's chef profile"""
    chef = service.update_chef(current_user.id, chef_data)
    return ChefEnvelope(chef=chef, message="Chef profile updated successfully")


@router.delete("", response_model=MessageResponse)
async def delete_chef(
    current_user: UserResponse = Depends(require_role(UserRole.CHEF)),
    service: ChefService = Depends(get_chef_service)
):
    """Delete the current user's chef profile; the user becomes a customer again"""
    service.delete_chef(current_user.id)
    return MessageResponse(message="Chef profile deleted successfully")
