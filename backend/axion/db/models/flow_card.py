import datetime as dt
from enum import Enum
from sqlalchemy import ForeignKey, Date, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from axion.db.base import Base
from axion.db.models._mixins import TimestampMixin

class FlowCardStatus(str, Enum):
    leads = "leads"
    negociacao = "negociacao"
    aguardando_pagamento = "aguardando_pagamento"
    em_producao = "em_producao"
    revisao = "revisao"
    concluido = "concluido"

class FlowCard(Base, TimestampMixin):
    __tablename__ = "flow_card"

    id: Mapped[int] = mapped_column(primary_key=True)
    date: Mapped[dt.date] = mapped_column(Date, index=True)
    client_name: Mapped[str] = mapped_column(String(256))
    whatsapp: Mapped[str | None] = mapped_column(String(32), nullable=True)

    leads_count: Mapped[int] = mapped_column(Integer, default=0)
    quantity: Mapped[int] = mapped_column(Integer, default=1)
    entry_value: Mapped[float] = mapped_column(Float, default=0.0)
    received_value: Mapped[float] = mapped_column(Float, default=0.0)
    payment_method: Mapped[str | None] = mapped_column(String(64), nullable=True)
    category: Mapped[str | None] = mapped_column(String(128), nullable=True)

    status: Mapped[str] = mapped_column(String(32), default=FlowCardStatus.leads.value, index=True)

    created_by_id: Mapped[int | None] = mapped_column(ForeignKey("user.id", ondelete="SET NULL"), nullable=True)
    created_by_name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    attendant_id: Mapped[int | None] = mapped_column(ForeignKey("user.id", ondelete="SET NULL"), nullable=True, index=True)
    attendant_name: Mapped[str | None] = mapped_column(String(256), nullable=True)
    production_responsible_id: Mapped[int | None] = mapped_column(ForeignKey("user.id", ondelete="SET NULL"), nullable=True)
    production_responsible_name: Mapped[str | None] = mapped_column(String(256), nullable=True)

    deadline: Mapped[dt.date | None] = mapped_column(Date, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
