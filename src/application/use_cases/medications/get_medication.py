from __future__ import annotations

from uuid import UUID

from src.application.errors import NotFound
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.medication import Medication


async def execute(uow: UnitOfWork, medication_id: UUID) -> Medication:
    medication = await uow.medications.get(medication_id)
    if not medication:
        raise NotFound("Medication not found")
    return medication
