import datetime as dt
from typing import Literal
from pydantic import BaseModel, ConfigDict, Field

class TransactionIn(BaseModel):
    type: Literal["income", "expense"]
    category: str = ""
    cost_center: str = ""
    description: str = ""
    value: float = Field(..., ge=0)
    received_value: float | None = Field(None, ge=0)
    pending_value: float = Field(0.0, ge=0)
    date: dt.date
    project_id: int | None = None

class TransactionUpdate(BaseModel):
    type: Literal["income", "expense"] | None = None
    category: str | None = None
    cost_center: str | None = None
    description: str | None = None
    value: float | None = Field(None, ge=0)
    received_value: float | None = Field(None, ge=0)
    pending_value: float | None = Field(None, ge=0)
    date: dt.date | None = None

class TransactionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str
    category: str
    cost_center: str
    description: str
    value: float
    received_value: float
    pending_value: float
    date: dt.date
    project_id: int | None = None
