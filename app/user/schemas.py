# app/user/schemas.py
from pydantic import BaseModel

from app.user.models import Role


class UserOut(BaseModel):
    id: str
    email: str
    role: Role

    model_config = {"from_attributes": True}
