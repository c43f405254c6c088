from __future__ import annotations

from uuid import UUID

from src.application.errors import ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.farms.scope import farm_scope
from src.domain.models.compliance_alert import AlertStatus, AlertType, ComplianceAlert
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    *,
    status: str | None = AlertStatus.ACTIVE.value,
    alert_type: str | None = None,
    limit: int = 100,
) -> list[ComplianceAlert]:
    if status is not None and status not in {s.value for s in AlertStatus}:
        raise ValidationError("Unknown alert status")
    if alert_type is not None and alert_type not in {t.value for t in AlertType}:
        raise ValidationError("Unknown alert type")
    if limit <= 0 or limit > 500:
        raise ValidationError("limit must be between 1 and 500")
    farm_ids = await farm_scope(uow, role, actor_user_id)
    if farm_ids == []:
        return []
    return await uow.compliance_alerts.list(
        farm_ids=farm_ids, status=status, alert_type=alert_type, limit=limit
    )
