# app/core/security.py
import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import Settings
from app.core.errors import InvalidToken

logger = logging.getLogger(__name__)

# argon2 for password hashing
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

ROLES = ("admin", "user")


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    user_id: str,
    email: str,
    role: str,
    settings: Settings,
    expires_delta: timedelta | None = None,
) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode = {"sub": user_id, "email": email, "role": role, "iat": now, "exp": expire}
    return jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> dict:
    """Return ``{"id", "email", "role"}`` from a signed, unexpired token.

    No database lookup happens here: whatever the token says at issue time is
    trusted until it expires.
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except JWTError as exc:
        logger.info("JWT verification failed: %s", exc)
        raise InvalidToken() from exc

    user_id = payload.get("sub")
    email = payload.get("email")
    role = payload.get("role")
    if not user_id or not email or role not in ROLES:
        logger.info("JWT verification failed: incomplete claims")
        raise InvalidToken()

    return {"id": user_id, "email": email, "role": role}
