"""Password hashing."""
import bcrypt

from app.errors import PasswordTooLong

# bcrypt only looks at the first 72 bytes and newer releases refuse longer input.
MAX_PASSWORD_BYTES = 72


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    password_bytes = plain_password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        # Still pay for one comparison so the rejection takes as long as a wrong password.
        bcrypt.checkpw(b"", hashed_password.encode("utf-8"))
        return False
    return bcrypt.checkpw(password_bytes, hashed_password.encode("utf-8"))


def get_password_hash(password: str) -> str:
    """Hash a password."""
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        raise PasswordTooLong()
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt()).decode("utf-8")


# Compared against when the username is unknown so that a missing account
# costs the same bcrypt work as a wrong password.
DUMMY_PASSWORD_HASH = get_password_hash("not-a-real-password")
