from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models import testing_report
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class RequestTestInput:
    animal_id: UUID
    test_type: str
    sample_type: str
    test_description: str | None = None
    priority: str = testing_report.TestingPriority.ROUTINE.value
    notes: str | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: RequestTestInput,
) -> testing_report.TestingReport:
    if role is not Role.VETERINARIAN:
        raise PermissionDenied("Only veterinarians can request lab tests")
    if not payload.test_type.strip():
        raise ValidationError("test_type is required")
    if not payload.sample_type.strip():
        raise ValidationError("sample_type is required")
    if payload.priority not in {p.value for p in testing_report.TestingPriority}:
        raise ValidationError("Unknown testing priority")
    if not await uow.animals.get(payload.animal_id):
        raise NotFound("Animal not found")

    report = testing_report.TestingReport.create(
        animal_id=payload.animal_id,
        vet_id=actor_user_id,
        test_type=payload.test_type.strip(),
        sample_type=payload.sample_type.strip(),
        test_description=payload.test_description,
        priority=payload.priority,
        notes=payload.notes,
    )
    created = await uow.testing_reports.add(report)
    await uow.commit()
    return created
