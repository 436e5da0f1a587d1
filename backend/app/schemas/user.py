"""End user schemas."""
from datetime import date, datetime

from pydantic import BaseModel, EmailStr, Field

from app.schemas.common import PageResponse


class UserUpdate(BaseModel):
    """Update user request. The phone number cannot be changed."""

    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    gender: str | None = None
    date_of_birth: date | None = None
    location: str | None = None
    email: EmailStr | None = None
    profile_photo_url: str | None = None


class UserCreate(UserUpdate):
    """Create user request."""

    phone_number: str = Field(..., description="Phone number in +993XXXXXXXX format")


class UserResponse(BaseModel):
    """User info response."""

    id: int
    first_name: str
    last_name: str
    phone_number: str
    blocked: bool
    registration_date: datetime
    gender: str | None = None
    date_of_birth: date | None = None
    location: str | None = None
    email: str | None = None
    profile_photo_url: str | None = None

    class Config:
        from_attributes = True


class UserListResponse(PageResponse):
    users: list[UserResponse]
