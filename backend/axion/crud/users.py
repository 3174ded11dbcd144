from sqlalchemy.orm import Session
from axion.db.models.user import User, UserRole, CollaboratorSettings, Role
from axion.core.security import hash_password
from axion.schemas.admin import UserCreateIn, CollaboratorSettingsIn

def get_user_by_login(db: Session, login: str) -> User | None:
    return db.query(User).filter(User.login == login).one_or_none()

def get_user(db: Session, user_id: int) -> User | None:
    return db.query(User).filter(User.id == user_id).one_or_none()

def list_users(db: Session):
    return db.query(User).order_by(User.id).all()

def _apply_compensation(u: User, username: str | None, percent: float | None, fixed: float | None) -> None:
    # commission percent only makes sense for sellers; fixed cost applies to every role
    if Role.seller.value not in u.role_names:
        percent = None
    if u.collaborator is None:
        u.collaborator = CollaboratorSettings(user_id=u.id)
    u.collaborator.username = username if username is not None else (u.collaborator.username or u.login)
    u.collaborator.commission_percent = percent
    u.collaborator.commission_fixed = fixed

def create_user(db: Session, data: UserCreateIn) -> User:
    u = User(login=data.login, password_hash=hash_password(data.password), name=data.name, email=data.email)
    u.roles = [UserRole(role=r.value) for r in dict.fromkeys(data.roles)]
    db.add(u)
    db.flush()
    _apply_compensation(u, None, data.commission_percent, data.commission_fixed)
    db.commit()
    db.refresh(u)
    return u

def upsert_collaborator_settings(db: Session, u: User, data: CollaboratorSettingsIn) -> User:
    _apply_compensation(u, data.username, data.commission_percent, data.commission_fixed)
    db.commit()
    db.refresh(u)
    return u

def collaborator_view(u: User) -> dict:
    c = u.collaborator
    return dict(
        user_id=u.id,
        login=u.login,
        name=u.name,
        email=u.email,
        roles=u.role_names,
        username=c.username if c else None,
        commission_percent=c.commission_percent if c else None,
        commission_fixed=c.commission_fixed if c else None,
    )

def list_collaborators(db: Session) -> list[dict]:
    return [collaborator_view(u) for u in list_users(db) if u.is_active]
