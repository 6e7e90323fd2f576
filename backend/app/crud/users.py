from sqlalchemy.orm import Session
from app.db.models.user import User
from app.core.security import hash_password
from app.schemas.auth import UserCreateIn

def get_user_by_login(db: Session, login: str) -> User | None:
    return db.query(User).filter(User.login == login).one_or_none()

def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).one_or_none()

def create_user(db: Session, data: UserCreateIn) -> User:
    u = User(
        login=data.login,
        password_hash=hash_password(data.password),
        role=data.role,
        first_name=data.first_name,
        last_name=data.last_name,
        company_name=data.company_name,
    )
    db.add(u)
    db.commit()
    db.refresh(u)
    return u
