from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.farms.scope import get_visible_animal
from src.domain.value_objects.compliance_status import ComplianceStatus
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class AnimalComplianceResult:
    animal_id: UUID
    status: ComplianceStatus
    withdrawal_until_milk: datetime | None
    withdrawal_until_meat: datetime | None
    evaluated_at: datetime

    @property
    def is_compliant(self) -> bool:
        return self.status.is_safe


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    animal_id: UUID,
    *,
    now: datetime,
) -> AnimalComplianceResult:
    animal = await get_visible_animal(uow, role, actor_user_id, animal_id)
    return AnimalComplianceResult(
        animal_id=animal.id,
        status=animal.compliance_status(now),
        withdrawal_until_milk=animal.withdrawal_until_milk,
        withdrawal_until_meat=animal.withdrawal_until_meat,
        evaluated_at=now,
    )
