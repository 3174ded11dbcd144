from pydantic import BaseModel, Field

from axion.db.models.user import Role

class UserCreateIn(BaseModel):
    login: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=6, max_length=128)
    roles: list[Role] = Field(..., min_length=1)
    name: str | None = None
    email: str | None = None
    commission_percent: float | None = Field(None, ge=0, le=100)
    commission_fixed: float | None = Field(None, ge=0)

class CollaboratorSettingsIn(BaseModel):
    username: str | None = None
    commission_percent: float | None = Field(None, ge=0, le=100)
    commission_fixed: float | None = Field(None, ge=0)

class CollaboratorOut(BaseModel):
    user_id: int
    login: str
    name: str | None = None
    email: str | None = None
    roles: list[str]
    username: str | None = None
    commission_percent: float | None = None
    commission_fixed: float | None = None
