from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from axion.core.deps import get_db, require_roles
from axion.db.models.user import Role
from axion.schemas.admin import UserCreateIn, CollaboratorSettingsIn, CollaboratorOut
from axion.crud.users import (
    create_user,
    get_user,
    get_user_by_login,
    list_collaborators,
    upsert_collaborator_settings,
    collaborator_view,
)

router = APIRouter()

@router.get("/collaborators", response_model=list[CollaboratorOut])
def collaborators(db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin))):
    return list_collaborators(db)

@router.post("/users", response_model=CollaboratorOut)
def create_user_endpoint(data: UserCreateIn, db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin))):
    if get_user_by_login(db, data.login):
        raise HTTPException(status_code=409, detail="Login already taken")
    return collaborator_view(create_user(db, data))

@router.put("/collaborators/{user_id}", response_model=CollaboratorOut)
def put_collaborator_settings(
    user_id: int,
    data: CollaboratorSettingsIn,
    db: Session = Depends(get_db),
    _user=Depends(require_roles(Role.admin)),
):
    u = get_user(db, user_id)
    if not u:
        raise HTTPException(status_code=404, detail="User not found")
    return collaborator_view(upsert_collaborator_settings(db, u, data))
