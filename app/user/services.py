# app/user/services.py
from sqlalchemy.orm import Session
from app.user.models import User

def get_all_users(db: Session) -> list[User]:
    return db.query(User).order_by(User.email).all()

def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()

def find_missing_user_ids(db: Session, user_ids: list[str]) -> list[str]:
    """Ids from ``user_ids`` with no matching user, in request order."""
    if not user_ids:
        return []
    found = {row.id for row in db.query(User.id).filter(User.id.in_(user_ids))}
    return [uid for uid in user_ids if uid not in found]
