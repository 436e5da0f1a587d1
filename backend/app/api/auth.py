"""Authentication API endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials

from app.api.deps import bearer_scheme, get_session_service
from app.errors import AccountNotFound, Expired, InvalidCredentials, TokenError
from app.schemas.auth import AdminLogin, LogoutRequest, Token
from app.schemas.common import MessageResponse
from app.services.auth import SessionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=Token)
def login(
    credentials: AdminLogin,
    sessions: SessionService = Depends(get_session_service),
):
    """Login and get an access/refresh token pair."""
    try:
        pair = sessions.login(credentials.username, credentials.password)
    except (AccountNotFound, InvalidCredentials):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return Token(access_token=pair.access_token, refresh_token=pair.refresh_token)


@router.post("/refresh", response_model=Token)
def refresh_tokens(
    bearer: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    sessions: SessionService = Depends(get_session_service),
):
    """Exchange the refresh token from the Authorization header for a new pair."""
    if bearer is None or not bearer.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token not provided",
        )

    try:
        pair = sessions.refresh(bearer.credentials)
    except Expired:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Refresh token expired",
        )
    except (TokenError, AccountNotFound) as e:
        logger.info(f"Refresh rejected: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid refresh token",
        )

    return Token(access_token=pair.access_token, refresh_token=pair.refresh_token)


@router.post("/logout", response_model=MessageResponse)
def logout(
    body: LogoutRequest,
    sessions: SessionService = Depends(get_session_service),
):
    """Invalidate the given refresh token. Repeating the call is harmless."""
    if not body.refresh_token:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Refresh token not provided",
        )

    sessions.logout(body.refresh_token)
    return MessageResponse(message="Logout successful")
