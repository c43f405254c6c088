from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.tasks import complete_task, list_tasks
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_now, get_uow
from src.interfaces.http.schemas.tasks import (
    CompleteTaskResponse,
    TaskResponse,
    TaskWithStateResponse,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/", response_model=list[TaskWithStateResponse])
async def list_my_tasks(
    date_from: date | None = Query(None, description="Defaults to seven days ago"),
    date_to: date | None = Query(None),
    include_completed: bool = Query(True),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> list[TaskWithStateResponse]:
    views = await list_tasks.execute(
        uow,
        context.role,
        context.user_id,
        now=now,
        date_from=date_from,
        date_to=date_to,
        include_completed=include_completed,
    )
    return [
        TaskWithStateResponse(
            **TaskResponse.model_validate(view.task).model_dump(),
            state=view.state,
            days_overdue=view.days_overdue,
        )
        for view in views
    ]


@router.post("/{task_id}/complete", response_model=CompleteTaskResponse)
async def complete_task_endpoint(
    task_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> CompleteTaskResponse:
    result = await complete_task.execute(uow, context.role, context.user_id, task_id, now=now)
    return CompleteTaskResponse(
        task=TaskResponse.model_validate(result.task),
        points_credited=result.points_credited,
        reward_points=result.reward_points,
        warnings=result.warnings,
    )
