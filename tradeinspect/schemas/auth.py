from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from tradeinspect.schemas.common import CamelModel, NonEmptyStr


class UserLogin(BaseModel):
    email: NonEmptyStr
    password: NonEmptyStr


class UserRegister(CamelModel):
    email: EmailStr
    password: NonEmptyStr
    first_name: NonEmptyStr
    last_name: NonEmptyStr


class AuthResponse(CamelModel):
    message: str
    token: str
    user_id: str
    email: str
    role: str
    first_name: str
    last_name: str


class TokenPayload(CamelModel):
    """Claims carried by a session token"""
    user_id: str
    email: str
    role: str
    exp: Optional[int] = Field(default=None)


class CompanyLogin(CamelModel):
    email_address: NonEmptyStr
    password: NonEmptyStr
