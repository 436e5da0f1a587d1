import os
import sys

import pytest

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ACCESS_SECRET_KEY", "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef")
os.environ.setdefault("REFRESH_SECRET_KEY", "fedcba9876543210fedcba9876543210fedcba9876543210fedcba9876543210")

BACKEND_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(BACKEND_ROOT)
sys.path.append(os.path.join(BACKEND_ROOT, "scripts"))

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.database import Base
from app.models.admin import Admin
from app.services.passwords import verify_password

from create_admin import create_admin, main


def _session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def test_create_admin_creates_hashed_account():
    session_local = _session_factory()
    db = session_local()
    try:
        result = create_admin(db, "root", "SecurePassword123!", "super_admin")

        assert result["status"] == "created"
        admin = db.get(Admin, result["admin_id"])
        assert admin.role == "super_admin"
        assert verify_password("SecurePassword123!", admin.password_hash)
    finally:
        db.close()


def test_create_admin_is_idempotent():
    session_local = _session_factory()
    db = session_local()
    try:
        first = create_admin(db, "root", "SecurePassword123!", "super_admin")
        second = create_admin(db, "root", "another", "super_admin")

        assert second["status"] == "exists"
        assert second["admin_id"] == first["admin_id"]
        assert db.query(Admin).count() == 1
    finally:
        db.close()


def test_overlong_password_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        main(["--username", "root", "--password", "x" * 100])

    assert excinfo.value.code == 2
