"""Admin account model."""
from sqlalchemy import Column, DateTime, Integer, String, Text

from app.database import Base

ROLE_ADMIN = "admin"
ROLE_SUPER_ADMIN = "super_admin"
ROLES = (ROLE_ADMIN, ROLE_SUPER_ADMIN)


class Admin(Base):
    """Administrator account.

    The refresh_token columns form the single stored-token slot: issuing a new
    token overwrites them and logging out clears them.
    """

    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=ROLE_ADMIN)

    refresh_token = Column(Text, index=True)
    refresh_token_created_at = Column(DateTime)
    refresh_token_expires_at = Column(DateTime)
