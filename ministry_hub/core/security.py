"""Password hashing and session token issue/verification."""

import enum
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from ministry_hub.core.config import get_settings

if TYPE_CHECKING:
    from ministry_hub.core.config import Settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128


class Role(str, enum.Enum):
    """Closed set of user roles. Anything not listed here is rejected."""

    ADMIN = "admin"
    USER = "user"

    @classmethod
    def parse(cls, value: object) -> "Role | None":
        try:
            return cls(value)
        except ValueError:
            return None


class ConfigurationError(Exception):
    """Raised when a required secret or credential is missing at first use."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class TokenClaims:
    """Decoded session token: identity, role and expiry."""

    id: int
    email: str
    role: Role
    expires_at: datetime


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _secret(settings: "Settings") -> str:
    secret = settings.JWT_SECRET.get_secret_value() if settings.JWT_SECRET else ""
    if not secret or not secret.strip():
        raise ConfigurationError("JWT_SECRET is not set; cannot sign or verify session tokens.")
    return secret


def issue_token(
    user_id: int,
    email: str,
    role: Role | str,
    *,
    settings: "Settings | None" = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign a session token carrying sub (user id), email, role, iat and exp."""
    settings = settings or get_settings()
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.JWT_EXPIRE_MINUTES))
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "email": email,
        "role": Role(role).value,
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(payload, _secret(settings), algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str, *, settings: "Settings | None" = None) -> dict[str, Any]:
    """
    Decode and validate a session token; return the raw payload.
    Raises jwt.PyJWTError on invalid or expired token.
    """
    settings = settings or get_settings()
    return jwt.decode(
        token,
        _secret(settings),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )


def verify_token(token: str | None, *, settings: "Settings | None" = None) -> TokenClaims | None:
    """Return the claims of a valid, unexpired token, or None for anything else."""
    if not token:
        return None
    try:
        payload = decode_token(token, settings=settings)
    except jwt.PyJWTError:
        return None
    try:
        user_id = int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return None
    email = payload.get("email")
    role = Role.parse(payload.get("role"))
    if not isinstance(email, str) or role is None:
        return None
    return TokenClaims(
        id=user_id,
        email=email,
        role=role,
        expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
    )
