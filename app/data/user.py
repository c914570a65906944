from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from app.models.user import Role


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150, examples=["Jane Smith"])
    email: EmailStr = Field(..., examples=["janesmith@example.com"])
    password: str = Field(..., min_length=6, max_length=72, examples=["your_password"])


class UserLogin(BaseModel):
    # left unvalidated, a bad credential pair is a 401 from the login guard
    email: str = Field("", examples=["user@example.com"])
    password: str = Field("", examples=["your_password"])


class UserOut(BaseModel):
    id: UUID
    name: str
    email: EmailStr
    onboarding: bool = False
    role: Role = Role.USER

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str = Field(..., alias="accessToken")
    user: UserOut

    class Config:
        populate_by_name = True


class TokenPayload(BaseModel):
    sub: UUID
    email: str = ""
    name: str = ""
    role: Role = Role.USER
