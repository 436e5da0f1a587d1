"""SQLAlchemy models package."""
from app.models.admin import Admin
from app.models.user import User

__all__ = [
    "Admin",
    "User",
]
