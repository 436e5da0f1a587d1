"""Test app construction shared by the API tests."""
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import models  # noqa: F401
from app.api import deps
from app.api.admins import router as admins_router
from app.api.auth import router as auth_router
from app.api.errors import register_error_handlers
from app.api.users import router as users_router
from app.database import Base
from app.models.admin import Admin
from app.services.passwords import get_password_hash
from app.services.tokens import TokenIssuer


def build_test_client():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)

    app = FastAPI()
    register_error_handlers(app)
    app.include_router(auth_router)
    app.include_router(admins_router, prefix="/api")
    app.include_router(users_router, prefix="/api")

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    return TestClient(app), TestingSessionLocal


def seed_admin(session_factory, username: str, password: str, role: str = "admin") -> int:
    db = session_factory()
    try:
        admin = Admin(username=username, password_hash=get_password_hash(password), role=role)
        db.add(admin)
        db.commit()
        return admin.id
    finally:
        db.close()


def auth_headers(role: str = "super_admin", account_id: int = 1) -> dict[str, str]:
    """Bearer header with a freshly signed access token; no login round trip."""
    issuer = TokenIssuer(deps.get_token_config(), accounts=None)
    token = issuer.create_access_token(Admin(id=account_id, username="caller", role=role))
    return {"Authorization": f"Bearer {token}"}
