from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.animal import Animal


class AnimalRepository(Protocol):
    async def add(self, animal: Animal) -> Animal: ...

    async def get(self, animal_id: UUID) -> Animal | None: ...

    async def list(
        self,
        *,
        farm_ids: list[UUID] | None = None,
        status: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Animal]: ...

    async def count(
        self,
        *,
        farm_ids: list[UUID] | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> int: ...

    async def update(
        self,
        animal_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Animal | None: ...
