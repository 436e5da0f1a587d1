"""SQLAlchemy repository over the users table."""
import logging
from datetime import date

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import EmailInUse, PhoneNumberInUse, UserNotFound
from app.models.user import User
from app.repositories.common import contains_pattern, paginate, store_errors

logger = logging.getLogger(__name__)


def _unique_violation(exc: IntegrityError) -> Exception | None:
    """Map a unique-constraint failure to the column it names."""
    detail = str(exc.orig)
    if "phone_number" in detail:
        return PhoneNumberInUse()
    if "email" in detail:
        return EmailInUse()
    return None


class SqlUserRepository:
    """CRUD, blocking and search over end users."""

    def __init__(self, db: Session):
        self.db = db

    def list_page(self, page: int, page_size: int) -> list[User]:
        with store_errors(self.db, "listing users"):
            return paginate(self.db.query(User).order_by(User.id), page, page_size).all()

    def count(self) -> int:
        with store_errors(self.db, "counting users"):
            return self.db.query(User).count()

    def get(self, user_id: int) -> User:
        with store_errors(self.db, "getting user"):
            user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise UserNotFound()
        return user

    def _ensure_email_free(self, email: str | None, exclude_id: int | None = None) -> None:
        if not email:
            return
        query = self.db.query(User.id).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise EmailInUse()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            mapped = _unique_violation(e)
            if mapped is None:
                raise
            raise mapped from e

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
        with store_errors(self.db, "creating user"):
            if self.db.query(User.id).filter(User.phone_number == phone_number).first():
                raise PhoneNumberInUse()
            self._ensure_email_free(email)

            user = User(
                first_name=first_name,
                last_name=last_name,
                phone_number=phone_number,
                gender=gender,
                date_of_birth=date_of_birth,
                location=location,
                email=email,
                profile_photo_url=profile_photo_url,
            )
            self.db.add(user)
            self._commit()
            self.db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

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
        """Replace every editable field; the phone number is fixed at creation."""
        user = self.get(user_id)
        with store_errors(self.db, "updating user"):
            self._ensure_email_free(email, exclude_id=user_id)

            user.first_name = first_name
            user.last_name = last_name
            user.gender = gender
            user.date_of_birth = date_of_birth
            user.location = location
            user.email = email
            user.profile_photo_url = profile_photo_url
            self._commit()
            self.db.refresh(user)
        return user

    def delete(self, user_id: int) -> None:
        user = self.get(user_id)
        with store_errors(self.db, "deleting user"):
            self.db.delete(user)
            self.db.commit()
        logger.info(f"Deleted user {user_id}")

    def set_blocked(self, user_id: int, blocked: bool) -> None:
        user = self.get(user_id)
        with store_errors(self.db, "updating user block status"):
            user.blocked = blocked
            self.db.commit()
        logger.info(f"User {user_id} {'blocked' if blocked else 'unblocked'}")

    def _search_query(self, query: str):
        pattern = contains_pattern(query)
        return self.db.query(User).filter(
            or_(
                User.first_name.ilike(pattern),
                User.last_name.ilike(pattern),
                User.phone_number.ilike(pattern),
                User.email.ilike(pattern),
            )
        )

    def search(self, query: str, page: int, page_size: int) -> list[User]:
        with store_errors(self.db, "searching users"):
            return paginate(self._search_query(query).order_by(User.id), page, page_size).all()

    def count_search(self, query: str) -> int:
        with store_errors(self.db, "counting user search results"):
            return self._search_query(query).count()
