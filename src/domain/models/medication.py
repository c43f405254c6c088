from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True, frozen=True)
class Medication:
    id: UUID
    name: str
    active_ingredient: str
    withdrawal_period_milk_hours: int = 0
    withdrawal_period_meat_days: int = 0
    dosage_instructions: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        if self.withdrawal_period_milk_hours < 0 or self.withdrawal_period_meat_days < 0:
            raise ValueError("Withdrawal periods must be non-negative")

    @classmethod
    def create(
        cls,
        name: str,
        active_ingredient: str,
        withdrawal_period_milk_hours: int = 0,
        withdrawal_period_meat_days: int = 0,
        dosage_instructions: str | None = None,
    ) -> Medication:
        return cls(
            id=uuid4(),
            name=name,
            active_ingredient=active_ingredient,
            withdrawal_period_milk_hours=withdrawal_period_milk_hours,
            withdrawal_period_meat_days=withdrawal_period_meat_days,
            dosage_instructions=dosage_instructions,
        )
