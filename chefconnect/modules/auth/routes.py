from fastapi import APIRouter, Depends
from chefconnect.core.dependencies import (
    get_current_identity, get_current_user, get_identity_verifier, get_user_service
)
from chefconnect.modules.auth.schemas import (
    AuthResponse, CurrentUserResponse, LogoutResponse, VerifiedIdentity, VerifyTokenRequest
)
from chefconnect.modules.auth.service import AuthService
from chefconnect.modules.auth.verifier import FirebaseIdentityVerifier
from chefconnect.modules.users.schemas import UserResponse
from chefconnect.modules.users.service import UserService
router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(
    verifier: FirebaseIdentityVerifier = Depends(get_identity_verifier),
    users: UserService = Depends(get_user_service),
) -> AuthService:
    return AuthService(verifier, users)


@router.post("/verify-otp", response_model=AuthResponse)
async def verify_otp(
    body: VerifyTokenRequest,
    service: AuthService = Depends(get_auth_service)
):
    """Verify the Firebase ID token obtained after OTP sign-in and create/update the user"""
    return service.verify_and_upsert(body.id_token)


@router.post("/logout", response_model=LogoutResponse)
async def logout():
    """Firebase sign-out happens on the client; nothing to invalidate server side"""
    return LogoutResponse()


@router.get("/me", response_model=CurrentUserResponse)
async def me(
    identity: VerifiedIdentity = Depends(get_current_identity),
    user: UserResponse = Depends(get_current_user),
):
    """Get the verified identity and its user row"""
    return CurrentUserResponse(
        subject_id=identity.subject_id,
        phone_number=identity.phone_number,
        user=user,
    )
