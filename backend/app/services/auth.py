"""Login, token refresh and logout for admin accounts."""
import logging

from app.errors import AccountNotFound, InternalError, InvalidCredentials, PersistenceError
from app.repositories.base import AccountRepository
from app.services.passwords import DUMMY_PASSWORD_HASH, verify_password
from app.services.tokens import TokenIssuer, TokenPair, TokenValidator

logger = logging.getLogger(__name__)


class SessionService:
    """Orchestrates the session lifecycle.

    No state is held between calls; the stored refresh token on the account
    row decides whether a session is still live.
    """

    def __init__(self, accounts: AccountRepository, issuer: TokenIssuer, validator: TokenValidator):
        self.accounts = accounts
        self.issuer = issuer
        self.validator = validator

    def login(self, username: str, password: str) -> TokenPair:
        """Check credentials and issue a token pair.

        Raises AccountNotFound for an unknown username and InvalidCredentials
        for a wrong password; both paths pay for one bcrypt comparison.
        """
        try:
            account = self.accounts.by_username(username)
        except AccountNotFound:
            verify_password(password, DUMMY_PASSWORD_HASH)
            logger.info("Login failed: unknown username")
            raise
        except PersistenceError as e:
            raise InternalError() from e

        if not verify_password(password, account.password_hash):
            logger.info(f"Login failed for admin {account.id}: wrong password")
            raise InvalidCredentials()

        pair = self.issuer.issue_pair(account)
        logger.info(f"Admin {account.id} logged in")
        return pair

    def refresh(self, refresh_token: str) -> TokenPair:
        """Exchange a current refresh token for a new pair, spending the old one."""
        claims = self.validator.validate(refresh_token)

        try:
            account = self.accounts.by_id(claims.account_id)
        except AccountNotFound:
            logger.info(f"Refresh for deleted admin {claims.account_id}")
            raise
        except PersistenceError as e:
            raise InternalError() from e

        return self.issuer.issue_pair(account)

    def logout(self, refresh_token: str) -> None:
        """Clear the stored slot holding this token. Idempotent."""
        try:
            self.accounts.clear_refresh_token(refresh_token)
        except PersistenceError as e:
            raise InternalError() from e
