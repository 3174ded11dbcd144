from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from axion.core.deps import get_db, get_current_user
from axion.core.logging import logger
from axion.schemas.auth import LoginIn, TokenOut, UserOut
from axion.crud.users import get_user_by_login
from axion.core.security import verify_password, create_access_token

router = APIRouter()

@router.post("/login", response_model=TokenOut)
def login(data: LoginIn, db: Session = Depends(get_db)):
    user = get_user_by_login(db, data.login)
    if not user or not user.is_active or not verify_password(data.password, user.password_hash):
        logger.warning("login_failed", login=data.login)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    token = create_access_token(sub=user.login, roles=user.role_names)
    return TokenOut(access_token=token)

@router.get("/me", response_model=UserOut)
def me(user = Depends(get_current_user)):
    return UserOut(id=user.id, login=user.login, name=user.name, roles=user.role_names)
