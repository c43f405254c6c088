from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.domain.value_objects.role import Role


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    full_name: str = Field(min_length=1, max_length=255)
    role: Role
    phone: str | None = None
    vet_license_id: str | None = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class LoginResponse(BaseModel):
    access_token: str
    token_type: str
    user_id: UUID
    email: EmailStr
    role: Role
    expires_at: datetime


class UserResponse(BaseModel):
    id: UUID
    email: EmailStr
    full_name: str
    role: Role
    phone: str | None = None
    vet_license_id: str | None = None
    is_vet_verified: bool
    reward_points: int
    is_active: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UsersListResponse(BaseModel):
    items: list[UserResponse]
    total: int
    limit: int
    offset: int


class VerifyVetRequest(BaseModel):
    verified: bool = True
