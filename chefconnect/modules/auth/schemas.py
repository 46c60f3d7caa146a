from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any

from chefconnect.modules.users.schemas import UserResponse


class VerifiedIdentity(BaseModel):
    subject_id: str
    phone_number: Optional[str] = None
    claims: Dict[str, Any] = Field(default_factory=dict)


class VerifyTokenRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id_token: Optional[str] = Field(default=None, alias="idToken")


class AuthResponse(BaseModel):
    success: bool = True
    user: UserResponse
    message: str = "Authentication successful"


class LogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logout successful"


class CurrentUserResponse(BaseModel):
    success: bool = True
    subject_id: str
    phone_number: Optional[str] = None
    user: UserResponse
