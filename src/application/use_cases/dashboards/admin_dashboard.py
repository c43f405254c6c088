from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.compliance_alert import ComplianceAlert
from src.domain.services.compliance_summary import ComplianceSummary, summarize_compliance
from src.domain.value_objects.role import Role

RECENT_ALERTS_LIMIT = 20


@dataclass(slots=True)
class AdminDashboard:
    users_by_role: dict[str, int]
    total_users: int
    total_farms: int
    summary: ComplianceSummary
    recent_alerts: list[ComplianceAlert]


async def execute(uow: UnitOfWork, role: Role, *, now: datetime) -> AdminDashboard:
    if role is not Role.ADMIN:
        raise PermissionDenied("Admin dashboard is only available to admins")
    users_by_role = await uow.users.count_by_role()
    farms = await uow.farms.list()
    animals = await uow.compliance.animal_snapshots()
    alerts = await uow.compliance.active_alerts()
    return AdminDashboard(
        users_by_role=users_by_role,
        total_users=sum(users_by_role.values()),
        total_farms=len(farms),
        summary=summarize_compliance(animals, alerts, now),
        recent_alerts=alerts[:RECENT_ALERTS_LIMIT],
    )
