from sqlalchemy import String, Boolean, Float
from sqlalchemy.orm import Mapped, mapped_column

from axion.db.base import Base
from axion.db.models._mixins import TimestampMixin

class AppSettings(Base, TimestampMixin):
    __tablename__ = "app_settings"

    id: Mapped[int] = mapped_column(primary_key=True)
    company_name: Mapped[str] = mapped_column(String(256))
    currency: Mapped[str] = mapped_column(String(8), default="BRL")
    tax_rate: Mapped[float] = mapped_column(Float, default=15.0)
    signup_enabled: Mapped[bool] = mapped_column(Boolean, default=False)
