from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.deps import get_db, get_current_user
from app.core.logging import logger
from app.schemas.auth import LoginIn, TokenOut, UserCreateIn, UserOut
from app.crud.users import create_user, get_user_by_login
from app.core.security import verify_password, create_access_token

router = APIRouter()

def _user_out(user) -> UserOut:
    return UserOut(id=user.id, login=user.login, role=user.role, display_name=user.display_name)

@router.post("/register", response_model=UserOut, status_code=201)
def register(data: UserCreateIn, db: Session = Depends(get_db)):
    if get_user_by_login(db, data.login):
        raise HTTPException(status_code=409, detail="Login already registered")
    user = create_user(db, data)
    logger.info("user_registered", user_id=user.id, role=user.role)
    return _user_out(user)

@router.post("/login", response_model=TokenOut)
def login(data: LoginIn, db: Session = Depends(get_db)):
    user = get_user_by_login(db, data.login)
    if not user or not user.is_active:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    ok, new_hash = verify_password(data.password, user.password_hash)
    if not ok:
        logger.info("login_failed", user_id=user.id)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    if new_hash:
        user.password_hash = new_hash
        db.commit()
    return TokenOut(access_token=create_access_token(user))

@router.get("/me", response_model=UserOut)
def me(user = Depends(get_current_user)):
    return _user_out(user)
