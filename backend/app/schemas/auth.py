from pydantic import BaseModel, Field

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"

class LoginIn(BaseModel):
    login: str
    password: str

class UserCreateIn(BaseModel):
    login: str = Field(..., min_length=3, max_length=128)
    password: str = Field(..., min_length=6, max_length=128)
    role: str = Field(..., pattern="^(organization|developer|student)$")
    first_name: str | None = None
    last_name: str | None = None
    company_name: str | None = None

class UserOut(BaseModel):
    id: int
    login: str
    role: str
    display_name: str
