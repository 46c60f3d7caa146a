from enum import Enum
from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Optional
from datetime import datetime


class UserRole(str, Enum):
    CUSTOMER = "customer"
    CHEF = "chef"
    ADMIN = "admin"


class UserUpdate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    avatar_url: Optional[str] = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    firebase_uid: str
    phone_number: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    role: UserRole = UserRole.CUSTOMER
    created_at: datetime
    updated_at: Optional[datetime] = None


class UserEnvelope(BaseModel):
    success: bool = True
    user: UserResponse
    message: Optional[str] = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str
