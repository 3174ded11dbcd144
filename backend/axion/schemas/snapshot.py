"""Immutable record shapes the KPI engine reads.

Every collection is validated here, at the data-source boundary, so the engine
itself never has to guess: numbers are already floats (malformed values became
0), dates are ISO strings ("" when missing) and ids are strings.
"""
import datetime as dt
from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from axion.core.config import settings
from axion.services.kpis.utils import to_number, to_iso, to_text, parse_iso_date

TRAFFIC_ENTRY_CATEGORY = "Tráfego"

CardStatus = Literal["leads", "negociacao", "aguardando_pagamento", "em_producao", "revisao", "concluido"]


def _field(obj, *names):
    for n in names:
        v = obj.get(n) if isinstance(obj, dict) else getattr(obj, n, None)
        if v is not None:
            return v
    return None


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True, from_attributes=True)


class CardRecord(_Record):
    id: str = ""
    entry_value: float = Field(0.0, validation_alias=AliasChoices("entry_value", "entryValue"))
    leads_count: int = Field(0, validation_alias=AliasChoices("leads_count", "leadsCount"))
    status: CardStatus = "leads"
    attendant_id: str = Field("", validation_alias=AliasChoices("attendant_id", "attendantId"))
    attendant_name: str = Field("", validation_alias=AliasChoices("attendant_name", "attendantName"))
    date: str = ""
    updated_at: str = Field("", validation_alias=AliasChoices("updated_at", "updatedAt"))

    @field_validator("entry_value", mode="before")
    @classmethod
    def _money(cls, v):
        return to_number(v)

    @field_validator("leads_count", mode="before")
    @classmethod
    def _count(cls, v):
        return int(to_number(v))

    @field_validator("id", "attendant_id", "attendant_name", mode="before")
    @classmethod
    def _text(cls, v):
        return to_text(v)

    @field_validator("date", "updated_at", mode="before")
    @classmethod
    def _dates(cls, v):
        return to_iso(v)


class TransactionRecord(_Record):
    type: Literal["income", "expense"]
    category: str = ""
    value: float = 0.0
    date: str = ""

    @field_validator("value", mode="before")
    @classmethod
    def _money(cls, v):
        return to_number(v)

    @field_validator("category", mode="before")
    @classmethod
    def _text(cls, v):
        return to_text(v)

    @field_validator("date", mode="before")
    @classmethod
    def _dates(cls, v):
        return to_iso(v)


class CollaboratorRecord(_Record):
    id: str = Field("", validation_alias=AliasChoices("id", "user_id", "userId"))
    commission_fixed: float = Field(0.0, validation_alias=AliasChoices("commission_fixed", "commissionFixed"))
    commission_percent: float = Field(0.0, validation_alias=AliasChoices("commission_percent", "commissionPercent"))
    roles: list[str] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def _text(cls, v):
        return to_text(v)

    @field_validator("commission_fixed", "commission_percent", mode="before")
    @classmethod
    def _money(cls, v):
        return to_number(v)

    @field_validator("roles", mode="before")
    @classmethod
    def _roles(cls, v):
        return [str(r) for r in (v or [])]


class SettingsRecord(_Record):
    tax_rate: float = Field(settings.DEFAULT_TAX_RATE, validation_alias=AliasChoices("tax_rate", "taxRate"))
    company_name: str = Field(settings.DEFAULT_COMPANY_NAME, validation_alias=AliasChoices("company_name", "companyName"))

    @field_validator("tax_rate", mode="before")
    @classmethod
    def _rate(cls, v):
        # null falls back to the default rate, anything else follows the usual coercion
        if v is None:
            return settings.DEFAULT_TAX_RATE
        return to_number(v)

    @field_validator("company_name", mode="before")
    @classmethod
    def _name(cls, v):
        return to_text(v) or settings.DEFAULT_COMPANY_NAME


class LegacyProjectRecord(_Record):
    total_value: float = Field(0.0, validation_alias=AliasChoices("total_value", "totalValue"))
    paid_value: float = Field(0.0, validation_alias=AliasChoices("paid_value", "paidValue"))
    status: str = "backlog"
    updated_at: str = Field("", validation_alias=AliasChoices("updated_at", "updatedAt"))

    @field_validator("total_value", "paid_value", mode="before")
    @classmethod
    def _money(cls, v):
        return to_number(v)

    @field_validator("updated_at", mode="before")
    @classmethod
    def _dates(cls, v):
        return to_iso(v)


class LeadRecord(_Record):
    """CRM lead; only the stage matters for conversion."""
    stage: str = ""

    @field_validator("stage", mode="before")
    @classmethod
    def _text(cls, v):
        return to_text(v)


class DateRange(_Record):
    """Inclusive [start, end] pair of ISO yyyy-mm-dd strings."""
    start: str
    end: str

    @field_validator("start", "end", mode="before")
    @classmethod
    def _iso_day(cls, v):
        s = to_iso(v)[:10]
        if parse_iso_date(s) is None:
            raise ValueError(f"invalid ISO date: {v!r}")
        return s

    @model_validator(mode="after")
    def _ordered(self):
        if self.end < self.start:
            raise ValueError("date range end precedes start")
        return self

    @classmethod
    def of(cls, start: dt.date, end: dt.date) -> "DateRange":
        return cls(start=start.isoformat(), end=end.isoformat())


class KpiSnapshot(_Record):
    """Plain copies of every collection the engine needs, taken once per request."""
    cards: list[CardRecord] = Field(default_factory=list, validation_alias=AliasChoices("cards", "flowCards", "flow_cards"))
    transactions: list[TransactionRecord] = Field(default_factory=list)
    collaborators: list[CollaboratorRecord] = Field(
        default_factory=list, validation_alias=AliasChoices("collaborators", "team")
    )
    settings: SettingsRecord = Field(default_factory=SettingsRecord)
    legacy_projects: list[LegacyProjectRecord] | None = Field(
        None, validation_alias=AliasChoices("legacy_projects", "projects")
    )
    date_range: DateRange | None = Field(None, validation_alias=AliasChoices("date_range", "dateRange"))
    leads: list[LeadRecord] | None = None

    @model_validator(mode="before")
    @classmethod
    def _traffic_entries_as_expenses(cls, data):
        # ad-spend entries become expense transactions; the amount is the spend plus tax
        if not isinstance(data, dict):
            return data
        key = next((k for k in ("trafficEntries", "traffic_entries") if k in data), None)
        if key is None:
            return data
        data = dict(data)
        entries = data.pop(key) or []
        transactions = list(data.get("transactions") or [])
        for e in entries:
            transactions.append(dict(
                type="expense",
                category=TRAFFIC_ENTRY_CATEGORY,
                value=_field(e, "totalWithTax", "total_with_tax"),
                date=_field(e, "date"),
            ))
        data["transactions"] = transactions
        return data
