# app/user/routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.core.database import get_db
from app.auth.dependencies import require_role
from app.user.models import Role
from app.user.schemas import UserOut
from app.user import services as user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserOut], dependencies=[Depends(require_role(Role.ADMIN))])
def list_users(db: Session = Depends(get_db)):
    return user_service.get_all_users(db)
