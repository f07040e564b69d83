"""Password hashing and session tokens.

Both login passwords and wedding site passwords go through the same salted one-way hash.
"""

import logging
from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.auth.dtos import SessionDTO
from src.config.settings import settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str | None) -> bool:
    """Constant-time check of ``password`` against a stored hash."""
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(password, hashed_password)
    except ValueError:
        # not a hash this context understands
        logger.warning("Unrecognised password hash format")
        return False


def create_session_token(user_id: UUID, email: str, expires_minutes: int | None = None) -> str:
    expire = datetime.now(UTC) + timedelta(
        minutes=expires_minutes or settings.access_token_expire_minutes
    )
    payload = {"sub": str(user_id), "email": email, "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_session_token(token: str | None) -> SessionDTO | None:
    """Return the session identity, or None for a missing, expired or tampered token."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        return SessionDTO(user_id=UUID(payload["sub"]), email=payload["email"])
    except (JWTError, KeyError, ValueError):
        return None
