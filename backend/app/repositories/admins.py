"""SQLAlchemy repositories over the admins table."""
import logging
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.errors import AccountNotFound, AdminAlreadyExists, AdminNotFound, PersistenceError
from app.models.admin import Admin
from app.repositories.common import contains_pattern, paginate, store_errors

logger = logging.getLogger(__name__)


class SqlAccountRepository:
    """Account lookup plus the per-account refresh-token slot."""

    def __init__(self, db: Session):
        self.db = db

    def by_username(self, username: str) -> Admin:
        with store_errors(self.db, "looking up admin by username"):
            admin = self.db.query(Admin).filter(Admin.username == username).first()
        if admin is None:
            raise AccountNotFound()
        return admin

    def by_id(self, account_id: int) -> Admin:
        with store_errors(self.db, "looking up admin by id"):
            admin = self.db.query(Admin).filter(Admin.id == account_id).first()
        if admin is None:
            raise AccountNotFound()
        return admin

    def store_refresh_token(
        self,
        account_id: int,
        token: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> None:
        """Overwrite the account's stored refresh token."""
        with store_errors(self.db, "storing refresh token"):
            updated = self.db.query(Admin).filter(Admin.id == account_id).update(
                {
                    "refresh_token": token,
                    "refresh_token_created_at": created_at,
                    "refresh_token_expires_at": expires_at,
                },
                synchronize_session=False,
            )
            self.db.commit()
        if not updated:
            raise PersistenceError(f"Refresh token not stored: admin {account_id} does not exist")

    def get_refresh_token(self, account_id: int) -> str | None:
        with store_errors(self.db, "reading refresh token"):
            row = self.db.query(Admin.refresh_token).filter(Admin.id == account_id).first()
        return row[0] if row else None

    def clear_refresh_token(self, token: str) -> None:
        """Clear whichever slot holds token; a no-op when none does."""
        with store_errors(self.db, "clearing refresh token"):
            self.db.query(Admin).filter(Admin.refresh_token == token).update(
                {
                    "refresh_token": None,
                    "refresh_token_created_at": None,
                    "refresh_token_expires_at": None,
                },
                synchronize_session=False,
            )
            self.db.commit()


class SqlAdminRepository:
    """CRUD and search over administrators."""

    def __init__(self, db: Session):
        self.db = db

    def list_page(self, page: int, page_size: int) -> list[Admin]:
        with store_errors(self.db, "listing admins"):
            return paginate(self.db.query(Admin).order_by(Admin.id), page, page_size).all()

    def count(self) -> int:
        with store_errors(self.db, "counting admins"):
            return self.db.query(Admin).count()

    def get(self, admin_id: int) -> Admin:
        with store_errors(self.db, "getting admin"):
            admin = self.db.query(Admin).filter(Admin.id == admin_id).first()
        if admin is None:
            raise AdminNotFound()
        return admin

    def create(self, username: str, password_hash: str, role: str) -> Admin:
        with store_errors(self.db, "creating admin"):
            if self.db.query(Admin.id).filter(Admin.username == username).first():
                raise AdminAlreadyExists()

            admin = Admin(username=username, password_hash=password_hash, role=role)
            self.db.add(admin)
            try:
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                raise AdminAlreadyExists() from e
            self.db.refresh(admin)
        logger.info(f"Created admin {admin.id} with role {role}")
        return admin

    def update(self, admin_id: int, username: str, password_hash: str, role: str) -> Admin:
        admin = self.get(admin_id)
        with store_errors(self.db, "updating admin"):
            taken = self.db.query(Admin.id).filter(
                Admin.username == username,
                Admin.id != admin_id,
            ).first()
            if taken:
                raise AdminAlreadyExists()

            admin.username = username
            admin.password_hash = password_hash
            admin.role = role
            try:
                self.db.commit()
            except IntegrityError as e:
                self.db.rollback()
                raise AdminAlreadyExists() from e
            self.db.refresh(admin)
        return admin

    def delete(self, admin_id: int) -> None:
        admin = self.get(admin_id)
        with store_errors(self.db, "deleting admin"):
            self.db.delete(admin)
            self.db.commit()
        logger.info(f"Deleted admin {admin_id}")

    def _search_query(self, query: str):
        pattern = contains_pattern(query)
        return self.db.query(Admin).filter(
            or_(Admin.username.ilike(pattern), Admin.role.ilike(pattern))
        )

    def search(self, query: str, page: int, page_size: int) -> list[Admin]:
        with store_errors(self.db, "searching admins"):
            return paginate(self._search_query(query).order_by(Admin.id), page, page_size).all()

    def count_search(self, query: str) -> int:
        with store_errors(self.db, "counting admin search results"):
            return self._search_query(query).count()
