from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.task import Task


class TaskRepository(Protocol):
    async def add_many(self, tasks: list[Task]) -> list[Task]: ...

    async def get(self, task_id: UUID) -> Task | None: ...

    async def list_for_farmer(
        self,
        farmer_id: UUID,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
        include_completed: bool = True,
    ) -> list[Task]: ...

    async def list_incomplete_before(self, before: date) -> list[Task]: ...

    async def list_by_ids(self, task_ids: list[UUID]) -> list[Task]: ...

    async def mark_completed(self, task: Task) -> bool: ...
