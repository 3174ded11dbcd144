from pydantic import BaseModel

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"

class LoginIn(BaseModel):
    login: str
    password: str

class UserOut(BaseModel):
    id: int
    login: str
    name: str | None = None
    roles: list[str]
