from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from src.domain.value_objects.role import Role


@dataclass(slots=True)
class User:
    id: UUID
    email: str
    hashed_password: str
    full_name: str
    role: Role
    phone: str | None = None
    vet_license_id: str | None = None
    is_vet_verified: bool = False
    reward_points: int = 0
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        email: str,
        hashed_password: str,
        full_name: str,
        role: Role,
        *,
        phone: str | None = None,
        vet_license_id: str | None = None,
        is_active: bool = True,
    ) -> User:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            email=email.lower(),
            hashed_password=hashed_password,
            full_name=full_name,
            role=role,
            phone=phone,
            vet_license_id=vet_license_id,
            is_active=is_active,
            created_at=now,
            updated_at=now,
        )
