"""Record a veterinary treatment.

One transaction covers the treatment row, the animal's new withdrawal
windows and the farmer's dosing tasks; nothing is visible until the single
commit at the end. The animal update is conditional on the version that was
read, so two vets treating the same animal concurrently cannot silently
overwrite each other's windows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, time
from uuid import UUID

from src.application.errors import ConflictError, NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.animal import Animal
from src.domain.models.task import Task
from src.domain.models.treatment import Treatment
from src.domain.services.task_schedule import (
    CadenceStrategy,
    TaskSchedulePolicy,
    build_task_dates,
)
from src.domain.services.withdrawal import compute_withdrawal_windows
from src.domain.value_objects.role import Role

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TaskPolicyOverride:
    strategy: CadenceStrategy | None = None
    count: int | None = None
    interval_days: int | None = None
    dates: list[date] | None = None
    scheduled_time: time | None = None
    points_per_task: int | None = None


@dataclass(slots=True)
class RecordTreatmentInput:
    animal_id: UUID
    medication_id: UUID
    diagnosis: str
    dosage: str
    route_of_administration: str | None = None
    notes: str | None = None
    treatment_start_date: date | None = None
    treatment_end_date: date | None = None
    animal_version: int | None = None
    schedule: TaskPolicyOverride | None = None


@dataclass(slots=True)
class RecordTreatmentOutput:
    treatment: Treatment
    animal: Animal
    tasks: list[Task]


def resolve_policy(
    default: TaskSchedulePolicy, override: TaskPolicyOverride | None
) -> TaskSchedulePolicy:
    if override is None:
        return default
    changes: dict = {}
    if override.strategy is not None:
        changes["strategy"] = override.strategy
    if override.count is not None:
        changes["count"] = override.count
    if override.interval_days is not None:
        changes["interval_days"] = override.interval_days
    if override.dates is not None:
        changes["dates"] = tuple(override.dates)
    if override.scheduled_time is not None:
        changes["scheduled_time"] = override.scheduled_time
    if override.points_per_task is not None:
        changes["points_per_task"] = override.points_per_task
    return replace(default, **changes)


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    payload: RecordTreatmentInput,
    *,
    task_policy: TaskSchedulePolicy,
    now: datetime,
) -> RecordTreatmentOutput:
    if not role.can_prescribe():
        raise PermissionDenied("Only veterinarians can record treatments")

    diagnosis = payload.diagnosis.strip()
    dosage = payload.dosage.strip()
    if not diagnosis:
        raise ValidationError("diagnosis is required")
    if not dosage:
        raise ValidationError("dosage is required")
    if (
        payload.treatment_start_date
        and payload.treatment_end_date
        and payload.treatment_end_date < payload.treatment_start_date
    ):
        raise ValidationError("treatment_end_date must not precede treatment_start_date")

    policy = resolve_policy(task_policy, payload.schedule)
    start_date = payload.treatment_start_date or now.date()
    problems = policy.validate(start_date)
    if problems:
        raise ValidationError("Invalid task schedule", details={"errors": problems})

    medication = await uow.medications.get(payload.medication_id)
    if not medication:
        raise ValidationError(
            "Unknown medication", details={"medication_id": str(payload.medication_id)}
        )

    animal = await uow.animals.get(payload.animal_id)
    if not animal:
        raise NotFound("Animal not found")
    if payload.animal_version is not None and payload.animal_version != animal.version:
        raise ConflictError("Animal was modified by another request")
    farm = await uow.farms.get(animal.farm_id)
    if not farm:
        raise NotFound("Farm not found")

    treatment = Treatment.create(
        animal_id=animal.id,
        vet_id=actor_user_id,
        medication_id=medication.id,
        diagnosis=diagnosis,
        dosage=dosage,
        route_of_administration=payload.route_of_administration,
        notes=payload.notes,
        treatment_start_date=payload.treatment_start_date,
        treatment_end_date=payload.treatment_end_date,
        created_at=now,
    )
    treatment = await uow.treatments.add(treatment)

    windows = compute_withdrawal_windows(treatment.created_at, medication)
    expected_version = animal.version
    animal.apply_withdrawal(windows, now)
    updated = await uow.animals.update(
        animal.id,
        data={
            "withdrawal_until_milk": animal.withdrawal_until_milk,
            "withdrawal_until_meat": animal.withdrawal_until_meat,
            "status": animal.status,
        },
        expected_version=expected_version,
    )
    if not updated:
        raise ConflictError("Animal was modified by another request")

    task_dates = build_task_dates(
        policy, treatment.treatment_start_date, treatment.treatment_end_date
    )
    tasks = [
        Task.create(
            treatment_id=treatment.id,
            animal_id=animal.id,
            farmer_id=farm.owner_id,
            medication_name=medication.name,
            dosage=dosage,
            scheduled_date=scheduled_date,
            scheduled_time=policy.scheduled_time,
            points_awarded=policy.points_per_task,
        )
        for scheduled_date in task_dates
    ]
    if tasks:
        tasks = await uow.tasks.add_many(tasks)

    await uow.commit()
    logger.info(
        "Treatment %s recorded for animal %s: milk until %s, meat until %s, %d tasks",
        treatment.id,
        animal.id,
        windows.milk_until.isoformat(),
        windows.meat_until.isoformat(),
        len(tasks),
    )
    return RecordTreatmentOutput(treatment=treatment, animal=updated, tasks=tasks)
