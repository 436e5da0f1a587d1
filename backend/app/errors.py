"""Domain errors raised by repositories and services.

Routers translate these into HTTP responses; nothing below the API layer
knows about status codes.
"""


class AppError(Exception):
    """Base class for every error the service layer raises on purpose."""

    message = "Internal server error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


# Sessions


class AccountNotFound(AppError):
    message = "Admin not found"


class InvalidCredentials(AppError):
    message = "Invalid credentials"


class TokenError(AppError):
    """A presented token was rejected."""

    message = "Invalid refresh token"


class SignatureInvalid(TokenError):
    message = "Invalid token signature"


class Expired(TokenError):
    message = "Token expired"


class ClaimMissing(TokenError):
    message = "Token is missing the account identifier claim"


class NotCurrent(TokenError):
    message = "Refresh token is no longer current"


class PersistenceError(AppError):
    message = "Database error"


class SigningError(AppError):
    message = "Could not sign token"


class InternalError(AppError):
    message = "Internal server error"


# Admin management


class AdminNotFound(AppError):
    message = "Admin not found"


class AdminAlreadyExists(AppError):
    message = "Admin with the same username already exists"


class AdminCannotBeDeleted(AppError):
    message = "Super admin cannot be deleted"


class PasswordTooLong(AppError):
    message = "Password must be at most 72 bytes"


# User management


class UserNotFound(AppError):
    message = "User not found"


class PhoneNumberInUse(AppError):
    message = "Phone number already in use"


class EmailInUse(AppError):
    message = "Email already in use"


class InvalidPhoneNumber(AppError):
    message = "Invalid phone number format"
