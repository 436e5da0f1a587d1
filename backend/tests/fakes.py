"""In-memory repository fakes for service-level tests."""
from datetime import datetime

from app.database import utcnow
from app.errors import (
    AccountNotFound,
    AdminAlreadyExists,
    AdminNotFound,
    EmailInUse,
    PersistenceError,
    PhoneNumberInUse,
    UserNotFound,
)
from app.models.admin import Admin
from app.models.user import User


class InMemoryAccountRepository:
    """Accounts keyed by id; the token slot lives on each Admin object."""

    def __init__(self, admins: list[Admin] | None = None):
        self.admins = {admin.id: admin for admin in admins or []}
        self.fail_writes = False
        self.fail_reads = False

    def by_username(self, username: str) -> Admin:
        self._check_reads()
        for admin in self.admins.values():
            if admin.username == username:
                return admin
        raise AccountNotFound()

    def by_id(self, account_id: int) -> Admin:
        self._check_reads()
        try:
            return self.admins[account_id]
        except KeyError:
            raise AccountNotFound()

    def store_refresh_token(
        self,
        account_id: int,
        token: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> None:
        if self.fail_writes or account_id not in self.admins:
            raise PersistenceError("write failed")
        admin = self.admins[account_id]
        admin.refresh_token = token
        admin.refresh_token_created_at = created_at
        admin.refresh_token_expires_at = expires_at

    def get_refresh_token(self, account_id: int) -> str | None:
        self._check_reads()
        admin = self.admins.get(account_id)
        return admin.refresh_token if admin else None

    def clear_refresh_token(self, token: str) -> None:
        if self.fail_writes:
            raise PersistenceError("write failed")
        for admin in self.admins.values():
            if admin.refresh_token == token:
                admin.refresh_token = None
                admin.refresh_token_created_at = None
                admin.refresh_token_expires_at = None

    def _check_reads(self) -> None:
        if self.fail_reads:
            raise PersistenceError("read failed")


class InMemoryAdminRepository:
    def __init__(self):
        self.admins: dict[int, Admin] = {}
        self._next_id = 1

    def list_page(self, page: int, page_size: int) -> list[Admin]:
        ordered = sorted(self.admins.values(), key=lambda a: a.id)
        offset = (page - 1) * page_size
        return ordered[offset:offset + page_size]

    def count(self) -> int:
        return len(self.admins)

    def get(self, admin_id: int) -> Admin:
        try:
            return self.admins[admin_id]
        except KeyError:
            raise AdminNotFound()

    def create(self, username: str, password_hash: str, role: str) -> Admin:
        if any(a.username == username for a in self.admins.values()):
            raise AdminAlreadyExists()
        admin = Admin(id=self._next_id, username=username, password_hash=password_hash, role=role)
        self.admins[admin.id] = admin
        self._next_id += 1
        return admin

    def update(self, admin_id: int, username: str, password_hash: str, role: str) -> Admin:
        admin = self.get(admin_id)
        if any(a.username == username and a.id != admin_id for a in self.admins.values()):
            raise AdminAlreadyExists()
        admin.username = username
        admin.password_hash = password_hash
        admin.role = role
        return admin

    def delete(self, admin_id: int) -> None:
        self.get(admin_id)
        del self.admins[admin_id]

    def _matches(self, query: str) -> list[Admin]:
        needle = query.lower()
        return [
            a for a in sorted(self.admins.values(), key=lambda a: a.id)
            if needle in a.username.lower() or needle in a.role.lower()
        ]

    def search(self, query: str, page: int, page_size: int) -> list[Admin]:
        offset = (page - 1) * page_size
        return self._matches(query)[offset:offset + page_size]

    def count_search(self, query: str) -> int:
        return len(self._matches(query))


class InMemoryUserRepository:
    def __init__(self):
        self.users: dict[int, User] = {}
        self._next_id = 1

    def list_page(self, page: int, page_size: int) -> list[User]:
        offset = (page - 1) * page_size
        return sorted(self.users.values(), key=lambda u: u.id)[offset:offset + page_size]

    def count(self) -> int:
        return len(self.users)

    def get(self, user_id: int) -> User:
        try:
            return self.users[user_id]
        except KeyError:
            raise UserNotFound()

    def create(self, first_name, last_name, phone_number, gender=None, date_of_birth=None,
               location=None, email=None, profile_photo_url=None) -> User:
        if any(u.phone_number == phone_number for u in self.users.values()):
            raise PhoneNumberInUse()
        if email and any(u.email == email for u in self.users.values()):
            raise EmailInUse()
        user = User(
            id=self._next_id,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            blocked=False,
            registration_date=utcnow(),
            gender=gender,
            date_of_birth=date_of_birth,
            location=location,
            email=email,
            profile_photo_url=profile_photo_url,
        )
        self.users[user.id] = user
        self._next_id += 1
        return user

    def update(self, user_id, first_name, last_name, gender=None, date_of_birth=None,
               location=None, email=None, profile_photo_url=None) -> User:
        user = self.get(user_id)
        if email and any(u.email == email and u.id != user_id for u in self.users.values()):
            raise EmailInUse()
        user.first_name = first_name
        user.last_name = last_name
        user.gender = gender
        user.date_of_birth = date_of_birth
        user.location = location
        user.email = email
        user.profile_photo_url = profile_photo_url
        return user

    def delete(self, user_id: int) -> None:
        self.get(user_id)
        del self.users[user_id]

    def set_blocked(self, user_id: int, blocked: bool) -> None:
        self.get(user_id).blocked = blocked

    def _matches(self, query: str) -> list[User]:
        needle = query.lower()
        return [
            u for u in sorted(self.users.values(), key=lambda u: u.id)
            if any(needle in (value or "").lower()
                   for value in (u.first_name, u.last_name, u.phone_number, u.email))
        ]

    def search(self, query: str, page: int, page_size: int) -> list[User]:
        offset = (page - 1) * page_size
        return self._matches(query)[offset:offset + page_size]

    def count_search(self, query: str) -> int:
        return len(self._matches(query))
