import datetime as dt
from sqlalchemy import Date, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from axion.db.base import Base
from axion.db.models._mixins import TimestampMixin

class LegacyProject(Base, TimestampMixin):
    __tablename__ = "legacy_project"

    id: Mapped[int] = mapped_column(primary_key=True)
    title: Mapped[str] = mapped_column(String(256))
    client: Mapped[str] = mapped_column(String(256), default="")
    responsible: Mapped[str] = mapped_column(String(256), default="")
    total_value: Mapped[float] = mapped_column(Float, default=0.0)
    paid_value: Mapped[float] = mapped_column(Float, default=0.0)
    billing_type: Mapped[str] = mapped_column(String(16), default="single")  # single|monthly|pending
    status: Mapped[str] = mapped_column(String(16), default="backlog")  # backlog|production|review|completed
    deadline: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    briefing: Mapped[str | None] = mapped_column(Text, nullable=True)
