from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.farms.scope import get_visible_animal
from src.domain.models.problem_report import ProblemReport
from src.domain.value_objects.role import Role
from src.domain.value_objects.severity import Severity


@dataclass(slots=True)
class CreateProblemReportInput:
    problem_type: str
    symptoms: str
    severity: str = Severity.MEDIUM.value
    description: str | None = None
    animal_id: UUID | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: CreateProblemReportInput,
) -> ProblemReport:
    if role is not Role.FARMER:
        raise PermissionDenied("Only farmers can report problems")
    if not payload.problem_type.strip():
        raise ValidationError("problem_type is required")
    if not payload.symptoms.strip():
        raise ValidationError("symptoms are required")
    if payload.severity not in {s.value for s in Severity}:
        raise ValidationError("Unknown severity")
    if payload.animal_id is not None:
        await get_visible_animal(uow, role, actor_user_id, payload.animal_id)

    report = ProblemReport.create(
        farmer_id=actor_user_id,
        problem_type=payload.problem_type.strip(),
        symptoms=payload.symptoms.strip(),
        severity=payload.severity,
        description=payload.description,
        animal_id=payload.animal_id,
    )
    created = await uow.problem_reports.add(report)
    await uow.commit()
    return created
