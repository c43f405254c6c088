"""Periodic compliance maintenance.

Resets animals whose withdrawal windows have all elapsed back to
``active``, raises one ``missed_task`` alert per overdue task and resolves
those alerts once the task is completed. Safe to run repeatedly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.compliance_alert import (
    AlertStatus,
    AlertType,
    ComplianceAlert,
    missed_task_severity,
)
from src.domain.value_objects.animal_status import AnimalStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SweepResult:
    animals_released: int = 0
    alerts_created: int = 0
    alerts_escalated: int = 0
    alerts_resolved: int = 0


async def _release_animals(uow: UnitOfWork, now: datetime) -> int:
    released = 0
    for animal in await uow.animals.list(status=AnimalStatus.WITHDRAWAL.value):
        if not animal.compliance_status(now).is_safe:
            continue
        updated = await uow.animals.update(
            animal.id,
            data={"status": AnimalStatus.ACTIVE.value},
            expected_version=animal.version,
        )
        if updated is None:
            # Changed underneath us (likely a new treatment); next run will re-evaluate
            logger.info("Skipping release of animal %s: version changed", animal.id)
            continue
        released += 1
    return released


async def _raise_missed_task_alerts(
    uow: UnitOfWork, now: datetime, grace_days: int, result: SweepResult
) -> None:
    today = now.date()
    overdue = await uow.tasks.list_incomplete_before(today - timedelta(days=grace_days))
    if not overdue:
        return
    # Resolved alerts count too: a task is alerted at most once
    existing: dict[UUID, ComplianceAlert] = {}
    for alert in await uow.compliance_alerts.list(alert_type=AlertType.MISSED_TASK.value):
        if alert.task_id is None:
            continue
        if alert.task_id not in existing or alert.is_active:
            existing[alert.task_id] = alert
    farm_by_animal: dict[UUID, UUID | None] = {}
    for task in overdue:
        days = task.days_overdue(today)
        severity = missed_task_severity(days).value
        alert = existing.get(task.id)
        if alert is not None:
            if alert.is_active and alert.severity != severity:
                alert.severity = severity
                await uow.compliance_alerts.update(alert)
                result.alerts_escalated += 1
            continue
        if task.animal_id not in farm_by_animal:
            animal = await uow.animals.get(task.animal_id)
            farm_by_animal[task.animal_id] = animal.farm_id if animal else None
        farm_id = farm_by_animal[task.animal_id]
        if farm_id is None:
            logger.warning("Task %s references missing animal %s", task.id, task.animal_id)
            continue
        await uow.compliance_alerts.add(
            ComplianceAlert.create(
                farm_id=farm_id,
                alert_type=AlertType.MISSED_TASK.value,
                severity=severity,
                description=(
                    f"{task.medication_name} dose scheduled for "
                    f"{task.scheduled_date.isoformat()} is {days} day(s) overdue"
                ),
                animal_id=task.animal_id,
                task_id=task.id,
                created_at=now,
            )
        )
        result.alerts_created += 1


async def _resolve_completed(uow: UnitOfWork, now: datetime) -> int:
    active = [
        alert
        for alert in await uow.compliance_alerts.list(
            status=AlertStatus.ACTIVE.value, alert_type=AlertType.MISSED_TASK.value
        )
        if alert.task_id is not None
    ]
    if not active:
        return 0
    tasks = {task.id: task for task in await uow.tasks.list_by_ids([a.task_id for a in active])}
    resolved = 0
    for alert in active:
        task = tasks.get(alert.task_id)
        if task is not None and task.is_completed:
            alert.resolve(now)
            await uow.compliance_alerts.update(alert)
            resolved += 1
    return resolved


async def execute(uow: UnitOfWork, *, now: datetime, grace_days: int = 0) -> SweepResult:
    result = SweepResult()
    result.animals_released = await _release_animals(uow, now)
    result.alerts_resolved = await _resolve_completed(uow, now)
    await _raise_missed_task_alerts(uow, now, grace_days, result)
    await uow.commit()
    logger.info(
        "Compliance sweep: %d animals released, %d alerts created, %d escalated, %d resolved",
        result.animals_released,
        result.alerts_created,
        result.alerts_escalated,
        result.alerts_resolved,
    )
    return result
