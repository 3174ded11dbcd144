from pydantic import BaseModel, ConfigDict, Field

class AppSettingsIn(BaseModel):
    company_name: str = Field(..., min_length=1)
    currency: str = "BRL"
    tax_rate: float = Field(..., ge=0, le=100)
    signup_enabled: bool = False

class AppSettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_name: str
    currency: str
    tax_rate: float
    signup_enabled: bool
