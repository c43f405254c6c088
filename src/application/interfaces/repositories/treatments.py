from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.treatment import Treatment


class TreatmentRepository(Protocol):
    async def add(self, treatment: Treatment) -> Treatment: ...

    async def get(self, treatment_id: UUID) -> Treatment | None: ...

    async def list_by_animal(
        self, animal_id: UUID, limit: int = 50, offset: int = 0
    ) -> list[Treatment]: ...

    async def count_by_animal(self, animal_id: UUID) -> int: ...
