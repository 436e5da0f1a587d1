"""Schemas shared across routers."""
from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


class PageResponse(BaseModel):
    """Navigation fields attached to every paginated listing."""

    current_page: int
    previous_page: int
    next_page: int
    first_page: int
    last_page: int
    total: int
