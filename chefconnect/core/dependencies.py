"""
Core dependencies: process-wide clients and route protection
"""

from fastapi import Depends, Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from supabase import Client
from typing import Optional
import logging

from chefconnect.config import Settings, settings as default_settings
from chefconnect.core.exceptions import ForbiddenError, InvalidCredential
from chefconnect.modules.auth.schemas import VerifiedIdentity
from chefconnect.modules.auth.verifier import FirebaseIdentityVerifier
from chefconnect.modules.users.schemas import UserResponse, UserRole
from chefconnect.modules.users.service import UserService

logger = logging.getLogger(__name__)

# auto_error=False so a missing or non-Bearer header becomes a 401 envelope instead of FastAPI's 403
security = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    return default_settings


def get_supabase(request: Request) -> Client:
    """Supabase client built once at startup (see main.startup_event)"""
    return request.app.state.supabase


def get_identity_verifier(request: Request) -> FirebaseIdentityVerifier:
    """Identity verifier built once at startup (see main.startup_event)"""
    return request.app.state.identity_verifier


def get_user_service(supabase: Client = Depends(get_supabase)) -> UserService:
    return UserService(supabase)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> str:
    """Extract the ID token from the Authorization header"""
    if credentials is None or not credentials.credentials:
        raise InvalidCredential("Unauthorized - No token provided")
    return credentials.credentials


def get_current_identity(
    token: str = Depends(get_bearer_token),
    verifier: FirebaseIdentityVerifier = Depends(get_identity_verifier),
) -> VerifiedIdentity:
    """Verified Firebase identity for the request"""
    return verifier.verify(token)


def get_current_user(
    identity: VerifiedIdentity = Depends(get_current_identity),
    users: UserService = Depends(get_user_service),
) -> UserResponse:
    """User row for the verified identity; 404 if the caller never completed sign-in"""
    return users.get_by_external_id(identity.subject_id)


def is_admin(user: UserResponse) -> bool:
    return user.role == UserRole.ADMIN


def require_role(*roles: UserRole):
    """Factory function to create a role check dependency"""
    def check_role(user: UserResponse = Depends(get_current_user)) -> UserResponse:
        if user.role not in roles:
            raise ForbiddenError(
                f"Insufficient role. Required one of: {', '.join(r.value for r in roles)}"
            )
        return user
    return check_role
