import datetime as dt
from sqlalchemy import ForeignKey, Date, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from axion.db.base import Base
from axion.db.models._mixins import TimestampMixin

class FinancialTransaction(Base, TimestampMixin):
    __tablename__ = "financial_transaction"

    id: Mapped[int] = mapped_column(primary_key=True)
    type: Mapped[str] = mapped_column(String(16), index=True)  # income|expense
    category: Mapped[str] = mapped_column(String(128), default="")
    cost_center: Mapped[str] = mapped_column(String(128), default="")
    description: Mapped[str] = mapped_column(String(512), default="")
    value: Mapped[float] = mapped_column(Float, default=0.0)
    received_value: Mapped[float] = mapped_column(Float, default=0.0)
    pending_value: Mapped[float] = mapped_column(Float, default=0.0)
    date: Mapped[dt.date] = mapped_column(Date, index=True)
    project_id: Mapped[int | None] = mapped_column(ForeignKey("legacy_project.id", ondelete="SET NULL"), nullable=True)
