from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from datetime import datetime


class ChefCreate(BaseModel):
    bio: Optional[str] = None
    specialties: List[str] = Field(default_factory=list)
    experience_years: int = Field(default=0, ge=0)
    hourly_rate: float = Field(ge=0)
    is_available: bool = True
    location: Optional[str] = None
    portfolio_images: List[str] = Field(default_factory=list)


class ChefUpdate(BaseModel):
    bio: Optional[str] = None
    specialties: Optional[List[str]] = None
    experience_years: Optional[int] = Field(default=None, ge=0)
    hourly_rate: Optional[float] = Field(default=None, ge=0)
    is_available: Optional[bool] = None
    location: Optional[str] = None
    portfolio_images: Optional[List[str]] = None

    @field_validator("specialties", "experience_years", "hourly_rate", "is_available", "portfolio_images")
    @classmethod
    def not_null(cls, value):
        # Optional means "may be omitted"; these columns are NOT NULL
        if value is None:
            raise ValueError("may be omitted but not null")
        return value


class ChefOwner(BaseModel):
    id: str
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None


class ChefResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    bio: Optional[str] = None
    specialties: List[str] = Field(default_factory=list)
    experience_years: int = 0
    hourly_rate: float = 0
    rating: float = 0
    total_bookings: int = 0
    is_verified: bool = False
    is_available: bool = True
    location: Optional[str] = None
    portfolio_images: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: Optional[datetime] = None
    user: Optional[ChefOwner] = None


class ChefEnvelope(BaseModel):
    success: bool = True
    chef: ChefResponse
    message: Optional[str] = None


class ChefListResponse(BaseModel):
    success: bool = True
    chefs: List[ChefResponse]
