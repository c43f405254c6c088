from __future__ import annotations

from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.problem_report import ProblemReport, ProblemReportStatus
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    *,
    status: str | None = None,
) -> list[ProblemReport]:
    if status is not None and status not in {s.value for s in ProblemReportStatus}:
        raise ValidationError("Unknown problem report status")
    if role is Role.FARMER:
        return await uow.problem_reports.list(farmer_id=actor_user_id, status=status)
    if role in {Role.VETERINARIAN, Role.ADMIN}:
        return await uow.problem_reports.list(status=status)
    raise PermissionDenied("Role not allowed to list problem reports")
