from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import ConflictError, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.auth.password import PasswordHasher

MIN_PASSWORD_LENGTH = 8


@dataclass(slots=True)
class RegisterAccountInput:
    email: str
    password: str
    full_name: str
    role: Role
    phone: str | None = None
    vet_license_id: str | None = None


@dataclass(slots=True)
class RegisterAccountResult:
    user: User


async def execute(
    *, uow: UnitOfWork, payload: RegisterAccountInput, password_hasher: PasswordHasher
) -> RegisterAccountResult:
    if payload.role is Role.ADMIN:
        raise ValidationError("Admin accounts cannot be self-registered")
    if len(payload.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not payload.full_name.strip():
        raise ValidationError("full_name is required")
    if payload.role is Role.VETERINARIAN and not (payload.vet_license_id or "").strip():
        raise ValidationError("vet_license_id is required for veterinarians")

    existing = await uow.users.get_by_email(payload.email)
    if existing:
        raise ConflictError("Email already registered")
    user = User.create(
        email=payload.email,
        hashed_password=password_hasher.hash(payload.password),
        full_name=payload.full_name.strip(),
        role=payload.role,
        phone=payload.phone,
        vet_license_id=payload.vet_license_id,
    )
    created = await uow.users.add(user)
    await uow.commit()
    return RegisterAccountResult(user=created)
