from sqlalchemy.orm import Session
from axion.db.models.app_settings import AppSettings
from axion.core.config import settings
from axion.schemas.app_settings import AppSettingsIn

def get_app_settings(db: Session) -> AppSettings | None:
    return db.query(AppSettings).order_by(AppSettings.id).first()

def get_or_create_app_settings(db: Session) -> AppSettings:
    s = get_app_settings(db)
    if s is None:
        s = AppSettings(
            company_name=settings.DEFAULT_COMPANY_NAME,
            currency=settings.DEFAULT_CURRENCY,
            tax_rate=settings.DEFAULT_TAX_RATE,
            signup_enabled=False,
        )
        db.add(s)
        db.commit()
        db.refresh(s)
    return s

def update_app_settings(db: Session, data: AppSettingsIn) -> AppSettings:
    s = get_or_create_app_settings(db)
    s.company_name = data.company_name
    s.currency = data.currency
    s.tax_rate = data.tax_rate
    s.signup_enabled = data.signup_enabled
    db.commit()
    db.refresh(s)
    return s
