from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4

from src.domain.services.withdrawal import WithdrawalWindows, evaluate_compliance
from src.domain.value_objects.animal_status import AnimalStatus
from src.domain.value_objects.compliance_status import ComplianceStatus


@dataclass(slots=True)
class Animal:
    id: UUID
    farm_id: UUID
    species: str
    tag: str
    name: str | None = None
    breed: str | None = None
    gender: str | None = None
    birth_date: date | None = None
    status: str = AnimalStatus.ACTIVE.value

    # Withdrawal fields
    withdrawal_until_milk: datetime | None = None
    withdrawal_until_meat: datetime | None = None

    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 1

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        species: str,
        tag: str,
        name: str | None = None,
        breed: str | None = None,
        gender: str | None = None,
        birth_date: date | None = None,
    ) -> Animal:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            species=species,
            tag=tag,
            name=name,
            breed=breed,
            gender=gender,
            birth_date=birth_date,
            status=AnimalStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
            version=1,
        )

    def compliance_status(self, now: datetime) -> ComplianceStatus:
        return evaluate_compliance(self.withdrawal_until_milk, self.withdrawal_until_meat, now)

    def apply_withdrawal(self, windows: WithdrawalWindows, now: datetime) -> None:
        """Overwrite both windows; a shorter new window replaces a longer old one."""
        self.withdrawal_until_milk = windows.milk_until
        self.withdrawal_until_meat = windows.meat_until
        if self.compliance_status(now).is_safe:
            self.status = AnimalStatus.ACTIVE.value
        else:
            self.status = AnimalStatus.WITHDRAWAL.value

    def bump_version(self) -> None:
        self.version += 1
        self.updated_at = datetime.now(timezone.utc)
