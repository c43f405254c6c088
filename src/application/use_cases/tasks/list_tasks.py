from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.task import Task, TaskState
from src.domain.value_objects.role import Role

DEFAULT_LOOKBACK_DAYS = 7


@dataclass(slots=True)
class TaskView:
    task: Task
    state: TaskState
    days_overdue: int


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    *,
    now: datetime,
    date_from: date | None = None,
    date_to: date | None = None,
    include_completed: bool = True,
) -> list[TaskView]:
    if role is not Role.FARMER:
        raise PermissionDenied("Only farmers have prescription tasks")
    today = now.date()
    if date_from is None:
        date_from = today - timedelta(days=DEFAULT_LOOKBACK_DAYS)
    if date_to is not None and date_to < date_from:
        raise ValidationError("date_to must not precede date_from")
    tasks = await uow.tasks.list_for_farmer(
        actor_user_id,
        date_from=date_from,
        date_to=date_to,
        include_completed=include_completed,
    )
    return [
        TaskView(task=task, state=task.state(today), days_overdue=task.days_overdue(today))
        for task in tasks
    ]
