from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.farm import Farm


class FarmRepository(Protocol):
    async def add(self, farm: Farm) -> Farm: ...

    async def get(self, farm_id: UUID) -> Farm | None: ...

    async def list(self, *, owner_id: UUID | None = None) -> list[Farm]: ...

    async def list_ids_for_owner(self, owner_id: UUID) -> list[UUID]: ...
