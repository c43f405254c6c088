from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Farm:
    id: UUID
    owner_id: UUID
    farm_name: str
    address: str
    registration_number: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        farm_name: str,
        address: str,
        registration_number: str | None = None,
    ) -> Farm:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            owner_id=owner_id,
            farm_name=farm_name,
            address=address,
            registration_number=registration_number,
            created_at=now,
            updated_at=now,
        )
