"""Complete a prescription task and credit the farmer's reward points.

Completion is the primary effect and is committed on its own. Crediting
points is a second step: if it fails the completion stands, the failure is
logged, and the caller gets a partial-success result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.application.errors import (
    DependencyError,
    InvalidStateError,
    NotFound,
    PermissionDenied,
)
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.task import Task
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CompleteTaskResult:
    task: Task
    points_credited: bool
    reward_points: int | None = None
    warnings: list[str] = field(default_factory=list)


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    task_id: UUID,
    *,
    now: datetime,
) -> CompleteTaskResult:
    task = await uow.tasks.get(task_id)
    if not task:
        raise NotFound("Task not found")
    if role is not Role.FARMER or task.farmer_id != actor_user_id:
        raise PermissionDenied("Task belongs to another farmer")
    if task.is_completed:
        raise InvalidStateError("Task already completed")
    if task.scheduled_date > now.date():
        raise InvalidStateError(
            "Task is not due yet", details={"scheduled_date": task.scheduled_date.isoformat()}
        )

    task.complete(now)
    if not await uow.tasks.mark_completed(task):
        raise InvalidStateError("Task already completed")
    await uow.commit()

    if task.points_awarded <= 0:
        return CompleteTaskResult(task=task, points_credited=True)

    try:
        balance = await uow.users.increment_reward_points(task.farmer_id, task.points_awarded)
        await uow.commit()
    except (DependencyError, NotFound) as exc:
        await uow.rollback()
        logger.warning(
            "Task %s completed but crediting %d points to %s failed: %s",
            task.id,
            task.points_awarded,
            task.farmer_id,
            exc.message,
        )
        return CompleteTaskResult(
            task=task,
            points_credited=False,
            warnings=["Task completed but reward points could not be credited"],
        )
    return CompleteTaskResult(task=task, points_credited=True, reward_points=balance)
