from __future__ import annotations

from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models import testing_report
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    *,
    status: str | None = None,
) -> list[testing_report.TestingReport]:
    if status is not None and status not in {s.value for s in testing_report.TestingReportStatus}:
        raise ValidationError("Unknown testing report status")
    if role is Role.VETERINARIAN:
        return await uow.testing_reports.list(vet_id=actor_user_id, status=status)
    if role in {Role.LAB, Role.ADMIN}:
        return await uow.testing_reports.list(status=status)
    raise PermissionDenied("Role not allowed to list testing reports")
