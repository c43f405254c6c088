from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models import testing_report
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class LabDashboard:
    counts_by_status: dict[str, int]
    queue: list[testing_report.TestingReport]


async def execute(uow: UnitOfWork, role: Role) -> LabDashboard:
    if role is not Role.LAB:
        raise PermissionDenied("Lab dashboard is only available to lab users")
    counts = await uow.testing_reports.count_by_status()
    pending = await uow.testing_reports.list(
        status=testing_report.TestingReportStatus.PENDING.value
    )
    received = await uow.testing_reports.list(
        status=testing_report.TestingReportStatus.RECEIVED.value
    )
    return LabDashboard(counts_by_status=counts, queue=received + pending)
