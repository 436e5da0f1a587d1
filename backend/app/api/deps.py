"""Shared API dependencies."""
from collections.abc import Callable

from fastapi import Depends, HTTPException, Query, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.errors import TokenError
from app.repositories.admins import SqlAccountRepository, SqlAdminRepository
from app.repositories.users import SqlUserRepository
from app.services.admins import AdminService
from app.services.auth import SessionService
from app.services.pagination import parse_positive_int
from app.services.tokens import (
    AccessClaims,
    TokenConfig,
    TokenIssuer,
    TokenValidator,
    decode_access_token,
)
from app.services.users import UserService

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_config() -> TokenConfig:
    """Token signing configuration from application settings."""
    return TokenConfig.from_settings(get_settings())


def get_session_service(
    db: Session = Depends(get_db),
    config: TokenConfig = Depends(get_token_config),
) -> SessionService:
    accounts = SqlAccountRepository(db)
    return SessionService(
        accounts,
        TokenIssuer(config, accounts),
        TokenValidator(config, accounts),
    )


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    return AdminService(SqlAdminRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(SqlUserRepository(db))


def get_current_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    config: TokenConfig = Depends(get_token_config),
) -> AccessClaims:
    """Verify the bearer access token statelessly."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization token not provided",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return decode_access_token(config, credentials.credentials)
    except TokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired access token",
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_roles(*roles: str) -> Callable[..., AccessClaims]:
    """Dependency factory admitting only access tokens carrying one of roles."""

    def check_role(claims: AccessClaims = Depends(get_current_claims)) -> AccessClaims:
        if claims.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return claims

    return check_role


class Pagination:
    """`page` and `pageSize` query parameters with lenient parsing."""

    def __init__(
        self,
        page: str | None = None,
        page_size: str | None = Query(None, alias="pageSize"),
    ):
        self.page = parse_positive_int(page, 1)
        self.page_size = parse_positive_int(page_size, get_settings().default_page_size)
