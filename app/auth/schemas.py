# app/auth/schemas.py
from pydantic import BaseModel, EmailStr, Field

from app.user.models import Role
from app.user.schemas import UserOut


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=4)


class RegisterRequest(LoginRequest):
    role: Role


class LoginResponse(BaseModel):
    accessToken: str
    user: UserOut


class CurrentUser(BaseModel):
    """Identity carried by a verified bearer token."""

    id: str
    email: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
