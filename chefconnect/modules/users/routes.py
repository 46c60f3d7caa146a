from fastapi import APIRouter, Depends
from chefconnect.core.dependencies import (
    get_current_identity, get_current_user, get_identity_verifier, get_user_service, is_admin
)
from chefconnect.core.exceptions import ChefConnectError, ForbiddenError, NotFoundError, UnexpectedError
from chefconnect.modules.auth.schemas import VerifiedIdentity
from chefconnect.modules.auth.verifier import FirebaseIdentityVerifier
from chefconnect.modules.users.schemas import MessageResponse, UserEnvelope, UserResponse, UserUpdate
from chefconnect.modules.users.service import UserService
from typing import Optional
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=UserEnvelope)
async def get_user(
    id: Optional[str] = None,
    current_user: UserResponse = Depends(get_current_user),
    service: UserService = Depends(get_user_service)
):
    """Get the current user, or another user by id (self or admin only)"""
    if not id or id == current_user.id:
        return UserEnvelope(user=current_user)
    if not is_admin(current_user):
        raise ForbiddenError("User not accessible")
    return UserEnvelope(user=service.get_user_by_id(id))


@router.put("", response_model=UserEnvelope)
async def update_user(
    user_data: UserUpdate,
    identity: VerifiedIdentity = Depends(get_current_identity),
    service: UserService = Depends(get_user_service)
):
    """Update the current user's profile (only supplied fields)"""
    user = service.update_user(identity.subject_id, user_data)
    return UserEnvelope(user=user, message="Profile updated successfully")


@router.delete("", response_model=MessageResponse)
async def delete_user(
    current_user: UserResponse = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
    verifier: FirebaseIdentityVerifier = Depends(get_identity_verifier)
):
    """Delete the current user's account here and in Firebase"""
    service.delete_user(current_user.firebase_uid)
    try:
        verifier.delete_subject(current_user.firebase_uid)
    except NotFoundError:
        logger.warning("Firebase user %s already gone; account %s deleted", current_user.firebase_uid, current_user.id)
    except ChefConnectError as e:
        logger.error(
            "Account %s deleted but Firebase user %s was not: %s",
            current_user.id, current_user.firebase_uid, e.details or e.message,
        )
        raise UnexpectedError(
            "Account data deleted but the Firebase account could not be removed",
            details=e.details or e.message,
        )
    logger.info("Deleted account %s", current_user.id)
    return MessageResponse(message="Account deleted successfully")
