from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, EmailStr, Field


class MeResponse(BaseModel):
    user_id: UUID
    email: EmailStr
    claims: dict[str, Any]


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str
    user_id: UUID
    email: EmailStr


class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)


class SignupResponse(BaseModel):
    user_id: UUID
    email: EmailStr
