from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from axion.core.deps import get_db, require_roles
from axion.db.models.user import Role
from axion.schemas.app_settings import AppSettingsIn, AppSettingsOut
from axion.crud.app_settings import get_or_create_app_settings, update_app_settings

router = APIRouter()

@router.get("", response_model=AppSettingsOut)
def get_settings(db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin, Role.seller, Role.production))):
    return get_or_create_app_settings(db)

@router.put("", response_model=AppSettingsOut)
def put_settings(data: AppSettingsIn, db: Session = Depends(get_db), _user=Depends(require_roles(Role.admin))):
    return update_app_settings(db, data)
