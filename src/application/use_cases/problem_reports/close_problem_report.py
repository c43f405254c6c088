from __future__ import annotations

from datetime import datetime
from uuid import UUID

from src.application.errors import InvalidStateError, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.problem_report import ProblemReport, ProblemReportStatus
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    report_id: UUID,
    *,
    now: datetime,
) -> ProblemReport:
    if role is not Role.FARMER:
        raise PermissionDenied("Only the reporting farmer can close a problem report")
    report = await uow.problem_reports.get(report_id)
    if not report or report.farmer_id != actor_user_id:
        raise NotFound("Problem report not found")
    if report.status == ProblemReportStatus.CLOSED.value:
        raise InvalidStateError("Problem report is already closed")
    report.status = ProblemReportStatus.CLOSED.value
    report.updated_at = now
    updated = await uow.problem_reports.update(report)
    await uow.commit()
    return updated
