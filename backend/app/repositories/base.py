"""Repository capability sets.

Each protocol has one SQLAlchemy-backed implementation in this package;
tests substitute in-memory fakes.
"""
from datetime import date, datetime
from typing import Protocol

from app.models.admin import Admin
from app.models.user import User


class AccountRepository(Protocol):
    """Account lookup and the stored refresh-token slot."""

    def by_username(self, username: str) -> Admin:
        ...

    def by_id(self, account_id: int) -> Admin:
        ...

    def store_refresh_token(
        self,
        account_id: int,
        token: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> None:
        ...

    def get_refresh_token(self, account_id: int) -> str | None:
        ...

    def clear_refresh_token(self, token: str) -> None:
        ...


class AdminRepository(Protocol):
    def list_page(self, page: int, page_size: int) -> list[Admin]:
        ...

    def count(self) -> int:
        ...

    def get(self, admin_id: int) -> Admin:
        ...

    def create(self, username: str, password_hash: str, role: str) -> Admin:
        ...

    def update(self, admin_id: int, username: str, password_hash: str, role: str) -> Admin:
        ...

    def delete(self, admin_id: int) -> None:
        ...

    def search(self, query: str, page: int, page_size: int) -> list[Admin]:
        ...

    def count_search(self, query: str) -> int:
        ...


class UserRepository(Protocol):
    def list_page(self, page: int, page_size: int) -> list[User]:
        ...

    def count(self) -> int:
        ...

    def get(self, user_id: int) -> User:
        ...

    def create(
        self,
        first_name: str,
        last_name: str,
        phone_number: str,
        gender: str | None = None,
        date_of_birth: date | None = None,
        location: str | None = None,
        email: str | None = None,
        profile_photo_url: str | None = None,
    ) -> User:
        ...

    def update(
        self,
        user_id: int,
        first_name: str,
        last_name: str,
        gender: str | None = None,
        date_of_birth: date | None = None,
        location: str | None = None,
        email: str | None = None,
        profile_photo_url: str | None = None,
    ) -> User:
        ...

    def delete(self, user_id: int) -> None:
        ...

    def set_blocked(self, user_id: int, blocked: bool) -> None:
        ...

    def search(self, query: str, page: int, page_size: int) -> list[User]:
        ...

    def count_search(self, query: str) -> int:
        ...
