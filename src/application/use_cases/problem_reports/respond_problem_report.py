from __future__ import annotations

from datetime import datetime
from uuid import UUID

from src.application.errors import InvalidStateError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.problem_report import ProblemReport, ProblemReportStatus
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    report_id: UUID,
    *,
    response: str,
    now: datetime,
) -> ProblemReport:
    if role is not Role.VETERINARIAN:
        raise PermissionDenied("Only veterinarians can respond to problem reports")
    if not response.strip():
        raise ValidationError("response is required")
    report = await uow.problem_reports.get(report_id)
    if not report:
        raise NotFound("Problem report not found")
    if report.status != ProblemReportStatus.PENDING.value:
        raise InvalidStateError(f"Problem report is already {report.status}")
    report.respond(actor_user_id, response.strip(), now)
    updated = await uow.problem_reports.update(report)
    await uow.commit()
    return updated
