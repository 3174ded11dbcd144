import datetime as dt
from pydantic import BaseModel, ConfigDict, Field, field_validator

from axion.db.models.flow_card import FlowCardStatus

class FlowCardCreate(BaseModel):
    date: dt.date
    client_name: str = Field(..., min_length=1)
    whatsapp: str | None = None
    leads_count: int = Field(0, ge=0)
    quantity: int = Field(1, ge=0)
    entry_value: float = Field(0.0, ge=0)
    received_value: float = Field(0.0, ge=0)
    payment_method: str | None = None
    category: str | None = None
    status: FlowCardStatus = FlowCardStatus.leads
    attendant_id: int | None = None
    attendant_name: str | None = None
    production_responsible_id: int | None = None
    production_responsible_name: str | None = None
    deadline: dt.date | None = None
    notes: str | None = None

class FlowCardUpdate(BaseModel):
    date: dt.date | None = None
    client_name: str | None = None
    whatsapp: str | None = None
    leads_count: int | None = Field(None, ge=0)
    quantity: int | None = Field(None, ge=0)
    entry_value: float | None = Field(None, ge=0)
    received_value: float | None = Field(None, ge=0)
    payment_method: str | None = None
    category: str | None = None
    status: FlowCardStatus | None = None
    attendant_id: int | None = None
    attendant_name: str | None = None
    production_responsible_id: int | None = None
    production_responsible_name: str | None = None
    deadline: dt.date | None = None
    notes: str | None = None

    # omitted means "keep"; an explicit null is only allowed on nullable columns
    @field_validator(
        "date", "client_name", "leads_count", "quantity", "entry_value", "received_value", "status", mode="before"
    )
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("field cannot be null")
        return v

class StatusMoveIn(BaseModel):
    status: FlowCardStatus

class FlowCardOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: dt.date
    client_name: str
    whatsapp: str | None = None
    leads_count: int
    quantity: int
    entry_value: float
    received_value: float
    payment_method: str | None = None
    category: str | None = None
    status: str
    created_by_id: int | None = None
    created_by_name: str | None = None
    attendant_id: int | None = None
    attendant_name: str | None = None
    production_responsible_id: int | None = None
    production_responsible_name: str | None = None
    deadline: dt.date | None = None
    notes: str | None = None
    created_at: dt.datetime
    updated_at: dt.datetime
