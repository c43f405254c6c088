from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import NotFound, PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.compliance_alert import AlertType, ComplianceAlert
from src.domain.value_objects.role import Role
from src.domain.value_objects.severity import Severity


@dataclass(slots=True)
class CreateAlertInput:
    alert_type: str
    severity: str
    description: str
    farm_id: UUID | None = None
    animal_id: UUID | None = None


async def execute(
    uow: UnitOfWork,
    role: Role,
    payload: CreateAlertInput,
    *,
    now: datetime,
) -> ComplianceAlert:
    if not role.can_raise_alerts():
        raise PermissionDenied("Role not allowed to raise compliance alerts")
    if payload.alert_type not in {t.value for t in AlertType}:
        raise ValidationError("Unknown alert type")
    if payload.severity not in {s.value for s in Severity}:
        raise ValidationError("Unknown severity")
    if not payload.description.strip():
        raise ValidationError("description is required")

    farm_id = payload.farm_id
    if payload.animal_id is not None:
        animal = await uow.animals.get(payload.animal_id)
        if not animal:
            raise NotFound("Animal not found")
        if farm_id is not None and farm_id != animal.farm_id:
            raise ValidationError("Animal does not belong to the given farm")
        farm_id = animal.farm_id
    if farm_id is None:
        raise ValidationError("farm_id or animal_id is required")
    if not await uow.farms.get(farm_id):
        raise NotFound("Farm not found")

    alert = ComplianceAlert.create(
        farm_id=farm_id,
        alert_type=payload.alert_type,
        severity=payload.severity,
        description=payload.description.strip(),
        animal_id=payload.animal_id,
        created_at=now,
    )
    created = await uow.compliance_alerts.add(alert)
    await uow.commit()
    return created
