from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.tasks import TaskRepository
from src.domain.models.task import Task
from src.infrastructure.db.orm.task import TaskORM
from src.utils.datetime_tz import ensure_utc


class TasksSQLAlchemyRepository(TaskRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: TaskORM) -> Task:
        return Task(
            id=orm.id,
            treatment_id=orm.treatment_id,
            animal_id=orm.animal_id,
            farmer_id=orm.farmer_id,
            medication_name=orm.medication_name,
            dosage=orm.dosage,
            scheduled_date=orm.scheduled_date,
            scheduled_time=orm.scheduled_time,
            points_awarded=orm.points_awarded,
            is_completed=orm.is_completed,
            completed_at=ensure_utc(orm.completed_at),
            created_at=ensure_utc(orm.created_at),
        )

    def _to_orm(self, task: Task) -> TaskORM:
        return TaskORM(
            id=task.id,
            treatment_id=task.treatment_id,
            animal_id=task.animal_id,
            farmer_id=task.farmer_id,
            medication_name=task.medication_name,
            dosage=task.dosage,
            scheduled_date=task.scheduled_date,
            scheduled_time=task.scheduled_time,
            points_awarded=task.points_awarded,
            is_completed=task.is_completed,
            completed_at=task.completed_at,
            created_at=task.created_at,
        )

    async def add_many(self, tasks: list[Task]) -> list[Task]:
        orms = [self._to_orm(task) for task in tasks]
        self.session.add_all(orms)
        await self.session.flush()
        return [self._to_domain(orm) for orm in orms]

    async def get(self, task_id: UUID) -> Task | None:
        orm = await self.session.get(TaskORM, task_id)
        return self._to_domain(orm) if orm else None

    async def list_for_farmer(
        self,
        farmer_id: UUID,
        *,
        date_from: date | None = None,
        date_to: date | None = None,
        include_completed: bool = True,
    ) -> list[Task]:
        stmt = select(TaskORM).where(TaskORM.farmer_id == farmer_id)
        if date_from is not None:
            stmt = stmt.where(TaskORM.scheduled_date >= date_from)
        if date_to is not None:
            stmt = stmt.where(TaskORM.scheduled_date <= date_to)
        if not include_completed:
            stmt = stmt.where(TaskORM.is_completed.is_(False))
        stmt = stmt.order_by(TaskORM.scheduled_date, TaskORM.scheduled_time)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_incomplete_before(self, before: date) -> list[Task]:
        stmt = (
            select(TaskORM)
            .where(TaskORM.is_completed.is_(False))
            .where(TaskORM.scheduled_date < before)
            .order_by(TaskORM.scheduled_date)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def list_by_ids(self, task_ids: list[UUID]) -> list[Task]:
        if not task_ids:
            return []
        stmt = select(TaskORM).where(TaskORM.id.in_(task_ids))
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def mark_completed(self, task: Task) -> bool:
        # Guarded on is_completed so two concurrent completions cannot both succeed
        stmt = (
            update(TaskORM)
            .where(TaskORM.id == task.id)
            .where(TaskORM.is_completed.is_(False))
            .values(is_completed=True, completed_at=task.completed_at)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1
