"""Access and refresh token issuance and validation.

Access tokens are verified statelessly. A refresh token is only accepted while
it is the exact string stored on its account row, so issuing a new pair or
logging out revokes the previous refresh token without a denylist.
"""
import hmac
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt
from jose.exceptions import JOSEError

from app.config import Settings
from app.database import utcnow
from app.errors import (
    ClaimMissing,
    Expired,
    InternalError,
    NotCurrent,
    PersistenceError,
    SignatureInvalid,
    SigningError,
)
from app.models.admin import Admin
from app.repositories.base import AccountRepository

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


@dataclass(frozen=True)
class TokenConfig:
    """Signing keys and lifetimes handed to the issuer and validator."""

    access_secret_key: str
    refresh_secret_key: str
    algorithm: str = "HS256"
    access_token_lifetime: timedelta = timedelta(minutes=30)
    refresh_token_lifetime: timedelta = timedelta(days=7)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        return cls(
            access_secret_key=settings.access_secret_key,
            refresh_secret_key=settings.refresh_secret_key,
            algorithm=settings.algorithm,
            access_token_lifetime=timedelta(minutes=settings.access_token_expire_minutes),
            refresh_token_lifetime=timedelta(days=settings.refresh_token_expire_days),
        )


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class AccessClaims:
    account_id: int
    role: str
    issued_at: datetime | None
    expires_at: datetime | None


@dataclass(frozen=True)
class RefreshClaims:
    account_id: int
    token_id: str | None
    issued_at: datetime | None
    expires_at: datetime | None


def _sign(claims: dict[str, Any], key: str, algorithm: str) -> str:
    try:
        return jwt.encode(claims, key, algorithm=algorithm)
    except JOSEError as e:
        logger.error(f"Token signing failed: {e}")
        raise SigningError() from e


def _decode(token: str, key: str, algorithm: str, expected_type: str) -> dict[str, Any]:
    """Verify signature and expiry, keeping expiry distinct from other failures."""
    try:
        payload = jwt.decode(token, key, algorithms=[algorithm])
    except ExpiredSignatureError as e:
        raise Expired() from e
    except JWTError as e:
        raise SignatureInvalid() from e

    if payload.get("type") != expected_type:
        raise SignatureInvalid("Wrong token type")
    return payload


def _account_id(payload: dict[str, Any]) -> int:
    subject = payload.get("sub")
    if subject is None:
        raise ClaimMissing()
    try:
        return int(subject)
    except (TypeError, ValueError) as e:
        raise ClaimMissing() from e


def _timestamp(payload: dict[str, Any], claim: str) -> datetime | None:
    value = payload.get(claim)
    if value is None:
        return None
    return datetime.fromtimestamp(value, timezone.utc).replace(tzinfo=None)


class TokenIssuer:
    """Signs token pairs and records the refresh token on the account."""

    def __init__(self, config: TokenConfig, accounts: AccountRepository):
        self.config = config
        self.accounts = accounts

    def create_access_token(self, account: Admin, now: datetime | None = None) -> str:
        """Create a JWT access token carrying the account id and role."""
        now = now or utcnow()
        claims = {
            "sub": str(account.id),
            "role": account.role,
            "iat": now,
            "exp": now + self.config.access_token_lifetime,
            "type": ACCESS_TOKEN_TYPE,
        }
        return _sign(claims, self.config.access_secret_key, self.config.algorithm)

    def create_refresh_token(self, account: Admin, now: datetime | None = None) -> tuple[str, datetime]:
        """Create a JWT refresh token; returns the token and its expiry."""
        now = now or utcnow()
        expires_at = now + self.config.refresh_token_lifetime
        claims = {
            "sub": str(account.id),
            "jti": str(uuid.uuid4()),
            "iat": now,
            "exp": expires_at,
            "type": REFRESH_TOKEN_TYPE,
        }
        return _sign(claims, self.config.refresh_secret_key, self.config.algorithm), expires_at

    def issue_pair(self, account: Admin) -> TokenPair:
        """Sign a new pair and overwrite the account's stored refresh token.

        Raises SigningError or PersistenceError; a refresh token is only
        returned once it has been stored.
        """
        now = utcnow()
        access_token = self.create_access_token(account, now)
        refresh_token, expires_at = self.create_refresh_token(account, now)
        self.accounts.store_refresh_token(account.id, refresh_token, now, expires_at)
        logger.debug(f"Issued token pair for admin {account.id}")
        return TokenPair(access_token=access_token, refresh_token=refresh_token)


class TokenValidator:
    """Checks presented tokens against their signature and the credential store."""

    def __init__(self, config: TokenConfig, accounts: AccountRepository):
        self.config = config
        self.accounts = accounts

    def validate(self, refresh_token: str) -> RefreshClaims:
        """Validate a refresh token.

        Raises SignatureInvalid, Expired, ClaimMissing or NotCurrent, and
        InternalError when the stored token cannot be read.
        """
        payload = _decode(
            refresh_token,
            self.config.refresh_secret_key,
            self.config.algorithm,
            REFRESH_TOKEN_TYPE,
        )
        claims = RefreshClaims(
            account_id=_account_id(payload),
            token_id=payload.get("jti"),
            issued_at=_timestamp(payload, "iat"),
            expires_at=_timestamp(payload, "exp"),
        )

        try:
            stored = self.accounts.get_refresh_token(claims.account_id)
        except PersistenceError as e:
            raise InternalError() from e

        if stored is None or not hmac.compare_digest(stored.encode("utf-8"), refresh_token.encode("utf-8")):
            logger.info(f"Rejected refresh token for admin {claims.account_id}: not current")
            raise NotCurrent()
        return claims


def decode_access_token(config: TokenConfig, access_token: str) -> AccessClaims:
    """Verify an access token without touching the store."""
    payload = _decode(
        access_token,
        config.access_secret_key,
        config.algorithm,
        ACCESS_TOKEN_TYPE,
    )
    return AccessClaims(
        account_id=_account_id(payload),
        role=payload.get("role", ""),
        issued_at=_timestamp(payload, "iat"),
        expires_at=_timestamp(payload, "exp"),
    )
