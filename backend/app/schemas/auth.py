"""Authentication schemas."""
from pydantic import BaseModel, Field


class AdminLogin(BaseModel):
    """Admin login request."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class Token(BaseModel):
    """Token pair response."""

    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class LogoutRequest(BaseModel):
    """Logout request carrying the refresh token to invalidate."""

    refresh_token: str = ""
