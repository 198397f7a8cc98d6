# app/auth/dependencies.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings, get_settings
from app.core.errors import Forbidden, Unauthenticated
from app.core.security import decode_access_token
from app.auth.schemas import CurrentUser
from app.user.models import Role

# auto_error off so a missing header and a bad token report differently
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> CurrentUser:
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()
    return CurrentUser(**decode_access_token(credentials.credentials, settings))


def require_role(role: Role):
    """Dependency factory: authenticate, then insist on ``role``."""

    def checker(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        if user.role != role:
            raise Forbidden()
        return user

    return checker
