from __future__ import annotations

from datetime import datetime
from uuid import UUID

from src.application.errors import InvalidStateError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models import testing_report
from src.domain.value_objects.role import Role

Status = testing_report.TestingReportStatus


async def _load_for_lab(
    uow: UnitOfWork, role: Role, report_id: UUID
) -> testing_report.TestingReport:
    if role is not Role.LAB:
        raise PermissionDenied("Only lab users can process samples")
    report = await uow.testing_reports.get(report_id)
    if not report:
        raise NotFound("Testing report not found")
    return report


async def mark_received(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    report_id: UUID,
    *,
    now: datetime,
) -> testing_report.TestingReport:
    report = await _load_for_lab(uow, role, report_id)
    if report.status != Status.PENDING.value:
        raise InvalidStateError(f"Cannot receive a sample that is {report.status}")
    report.mark_received(actor_user_id, now)
    updated = await uow.testing_reports.update(report)
    await uow.commit()
    return updated


async def mark_completed(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    report_id: UUID,
    *,
    results: str,
    notes: str | None = None,
    now: datetime,
) -> testing_report.TestingReport:
    report = await _load_for_lab(uow, role, report_id)
    if report.status != Status.RECEIVED.value:
        raise InvalidStateError(f"Cannot complete a sample that is {report.status}")
    if report.lab_id != actor_user_id:
        raise PermissionDenied("Sample was received by another lab")
    if not results.strip():
        raise ValidationError("results are required")
    report.mark_completed(results.strip(), notes, now)
    updated = await uow.testing_reports.update(report)
    await uow.commit()
    return updated
