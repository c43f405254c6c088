from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.consultation_request import ConsultationRequest, ConsultationStatus
from src.domain.models.problem_report import ProblemReport, ProblemReportStatus
from src.domain.services.compliance_summary import AnimalSnapshot
from src.domain.services.withdrawal import evaluate_compliance
from src.domain.value_objects.compliance_status import ComplianceStatus
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class HighRiskAnimal:
    animal: AnimalSnapshot
    status: ComplianceStatus


@dataclass(slots=True)
class VetDashboard:
    pending_consultations: list[ConsultationRequest]
    my_consultations: list[ConsultationRequest]
    pending_problem_reports: list[ProblemReport]
    high_risk_animals: list[HighRiskAnimal]


async def execute(
    uow: UnitOfWork, role: Role, actor_user_id: UUID, *, now: datetime
) -> VetDashboard:
    if role is not Role.VETERINARIAN:
        raise PermissionDenied("Veterinarian dashboard is only available to veterinarians")
    pending = await uow.consultations.list(status=ConsultationStatus.PENDING.value)
    mine = [
        request
        for request in await uow.consultations.list(vet_id=actor_user_id)
        if request.status
        in {ConsultationStatus.ACCEPTED.value, ConsultationStatus.SCHEDULED.value}
    ]
    reports = await uow.problem_reports.list(status=ProblemReportStatus.PENDING.value)

    high_risk = []
    for animal in await uow.compliance.animal_snapshots():
        status = evaluate_compliance(
            animal.withdrawal_until_milk, animal.withdrawal_until_meat, now
        )
        if not status.is_safe:
            high_risk.append(HighRiskAnimal(animal=animal, status=status))
    # Fully restricted first
    high_risk.sort(key=lambda item: item.status is not ComplianceStatus.FULLY_RESTRICTED)
    return VetDashboard(
        pending_consultations=pending,
        my_consultations=mine,
        pending_problem_reports=reports,
        high_risk_animals=high_risk,
    )
