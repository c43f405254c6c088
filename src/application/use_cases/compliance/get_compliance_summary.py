from __future__ import annotations

from datetime import datetime
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.farms.scope import farm_scope
from src.domain.services.compliance_summary import ComplianceSummary, summarize_compliance
from src.domain.value_objects.role import Role


async def execute(
    uow: UnitOfWork,
    role: Role,
    actor_user_id: UUID,
    *,
    now: datetime,
) -> ComplianceSummary:
    """Recompute the compliance summary for every farm the caller can see."""
    farm_ids = await farm_scope(uow, role, actor_user_id)
    if farm_ids == []:
        return summarize_compliance([], [], now)
    animals = await uow.compliance.animal_snapshots(farm_ids)
    alerts = await uow.compliance.active_alerts(farm_ids)
    return summarize_compliance(animals, alerts, now)
