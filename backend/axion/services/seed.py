from sqlalchemy.orm import Session
from axion.db.session import SessionLocal
from axion.core.config import settings
from axion.core.logging import logger
from axion.crud.users import get_user_by_login, create_user
from axion.crud.app_settings import get_or_create_app_settings
from axion.schemas.admin import UserCreateIn
from axion.db.models.user import Role

def seed_demo(db: Session | None = None):
    own = db is None
    db = db or SessionLocal()
    try:
        if settings.DEMO_ADMIN_LOGIN and settings.DEMO_ADMIN_PASSWORD:
            if not get_user_by_login(db, settings.DEMO_ADMIN_LOGIN):
                create_user(db, UserCreateIn(
                    login=settings.DEMO_ADMIN_LOGIN,
                    password=settings.DEMO_ADMIN_PASSWORD,
                    roles=[Role.admin],
                    name="Demo Admin",
                ))
                logger.info("demo_admin_created", login=settings.DEMO_ADMIN_LOGIN)
        # single settings row with the configured defaults
        get_or_create_app_settings(db)
    finally:
        if own:
            db.close()
