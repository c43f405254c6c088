from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.compliance_alert import ComplianceAlert
from src.domain.models.task import Task
from src.domain.services.compliance_summary import ComplianceSummary, summarize_compliance
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class FarmerDashboard:
    summary: ComplianceSummary
    todays_tasks: list[Task]
    overdue_tasks: int
    active_alerts: list[ComplianceAlert]
    reward_points: int


async def execute(
    uow: UnitOfWork, role: Role, actor_user_id: UUID, *, now: datetime
) -> FarmerDashboard:
    if role is not Role.FARMER:
        raise PermissionDenied("Farmer dashboard is only available to farmers")
    user = await uow.users.get(actor_user_id)
    if not user:
        raise NotFound("User not found")

    farm_ids = await uow.farms.list_ids_for_owner(actor_user_id)
    if farm_ids:
        animals = await uow.compliance.animal_snapshots(farm_ids)
        alerts = await uow.compliance.active_alerts(farm_ids)
    else:
        animals, alerts = [], []

    today = now.date()
    open_tasks = await uow.tasks.list_for_farmer(
        actor_user_id, date_to=today, include_completed=False
    )
    todays = await uow.tasks.list_for_farmer(actor_user_id, date_from=today, date_to=today)
    return FarmerDashboard(
        summary=summarize_compliance(animals, alerts, now),
        todays_tasks=todays,
        overdue_tasks=sum(1 for task in open_tasks if task.scheduled_date < today),
        active_alerts=alerts,
        reward_points=user.reward_points,
    )
