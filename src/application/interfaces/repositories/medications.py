from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.medication import Medication


class MedicationRepository(Protocol):
    async def add(self, medication: Medication) -> Medication: ...

    async def get(self, medication_id: UUID) -> Medication | None: ...

    async def get_by_name(self, name: str) -> Medication | None: ...

    async def list(self, *, search: str | None = None) -> list[Medication]: ...
