"""End user model."""
from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String

from app.database import Base, utcnow


class User(Base):
    """End user managed from the admin panel."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    phone_number = Column(String(12), unique=True, nullable=False, index=True)
    blocked = Column(Boolean, nullable=False, default=False)
    registration_date = Column(DateTime, nullable=False, default=utcnow)
    gender = Column(String(20))
    date_of_birth = Column(Date)
    location = Column(String(255))
    email = Column(String(255), unique=True, index=True)
    profile_photo_url = Column(String(512))
