"""Admin management schemas."""
from typing import Literal

from pydantic import BaseModel, Field

from app.schemas.common import PageResponse

Role = Literal["admin", "super_admin"]


class AdminCreate(BaseModel):
    """Create admin request. All fields are required."""

    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)
    role: Role


class AdminUpdate(AdminCreate):
    """Update admin request. Replaces every field."""


class AdminResponse(BaseModel):
    """Admin info response; never includes the password hash or tokens."""

    id: int
    username: str
    role: str

    class Config:
        from_attributes = True


class AdminListResponse(PageResponse):
    admins: list[AdminResponse]
