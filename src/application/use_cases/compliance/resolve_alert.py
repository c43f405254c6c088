from __future__ import annotations

from datetime import datetime
from uuid import UUID

from src.application.errors import InvalidStateError, NotFound, PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.compliance_alert import ComplianceAlert
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    alert_id: UUID,
    *,
    now: datetime,
) -> ComplianceAlert:
    alert = await uow.compliance_alerts.get(alert_id)
    if not alert:
        raise NotFound("Compliance alert not found")
    if role is Role.FARMER:
        farm = await uow.farms.get(alert.farm_id)
        if not farm or farm.owner_id != actor_user_id:
            raise NotFound("Compliance alert not found")
    elif role not in {Role.ADMIN, Role.VETERINARIAN}:
        raise PermissionDenied("Role not allowed to resolve alerts")
    if not alert.is_active:
        raise InvalidStateError("Alert already resolved")
    alert.resolve(now)
    updated = await uow.compliance_alerts.update(alert)
    await uow.commit()
    return updated
