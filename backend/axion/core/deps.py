from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from axion.db.session import SessionLocal
from axion.core.security import decode_token
from axion.db.models.user import User, Role
from axion.crud.users import get_user_by_login
from axion.core.logging import bind_user

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_current_user(db: Session = Depends(get_db), token: str = Depends(oauth2_scheme)) -> User:
    try:
        payload = decode_token(token)
        login = payload.get("sub")
    except Exception:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    user = get_user_by_login(db, login)
    if not user or not user.is_active:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found/disabled")
    bind_user(user.login, user.role_names)
    return user

def require_roles(*roles: Role):
    allowed = {r.value for r in roles}

    def _dep(user: User = Depends(get_current_user)) -> User:
        if not allowed.intersection(user.role_names):
            raise HTTPException(status_code=403, detail="Forbidden")
        return user
    return _dep
