import datetime as dt
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

class LegacyProjectCreate(BaseModel):
    title: str = Field(..., min_length=1)
    client: str = ""
    responsible: str = ""
    total_value: float = Field(0.0, ge=0)
    paid_value: float = Field(0.0, ge=0)
    billing_type: Literal["single", "monthly", "pending"] = "single"
    status: Literal["backlog", "production", "review", "completed"] = "backlog"
    deadline: dt.date | None = None
    briefing: str | None = None

class PaymentIn(BaseModel):
    # omitted amount means "receive the whole outstanding balance"
    amount: float | None = Field(None, gt=0)

class LegacyProjectOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    client: str
    responsible: str
    total_value: float
    paid_value: float
    billing_type: str
    status: str
    deadline: dt.date | None = None
    briefing: str | None = None
    updated_at: dt.datetime
