from __future__ import annotations

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.medication import Medication


async def execute(uow: UnitOfWork, *, search: str | None = None) -> list[Medication]:
    return await uow.medications.list(search=search)
