# app/auth/services.py
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.core.database import transaction
from app.core.errors import AuthenticationError, ConflictError
from app.core.security import create_access_token, get_password_hash, verify_password
from app.auth.schemas import LoginRequest, RegisterRequest
from app.user.models import User
from app.user.services import get_user_by_email

logger = logging.getLogger(__name__)


def register_user(db: Session, payload: RegisterRequest) -> User:
    if get_user_by_email(db, payload.email):
        raise ConflictError("Email already exists")

    user = User(
        email=payload.email,
        password_hash=get_password_hash(payload.password),
        role=payload.role.value,
    )
    try:
        with transaction(db):
            db.add(user)
    except IntegrityError as exc:
        # lost a race with a concurrent registration of the same email
        raise ConflictError("Email already exists") from exc
    db.refresh(user)
    logger.info("Registered %s user %s", user.role, user.id)
    return user


def login(db: Session, payload: LoginRequest, settings: Settings) -> tuple[str, User]:
    """Check credentials and issue an access token.

    Unknown email and wrong password fail the same way.
    """
    user = get_user_by_email(db, payload.email)
    if user is None or not verify_password(payload.password, user.password_hash):
        logger.info("Failed login for %s", payload.email)
        raise AuthenticationError("Invalid credentials")

    token = create_access_token(user.id, user.email, user.role, settings)
    return token, user
