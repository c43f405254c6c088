from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.compliance_read_model import ComplianceReadModel
from src.domain.models.compliance_alert import AlertStatus, ComplianceAlert
from src.domain.services.compliance_summary import AnimalSnapshot
from src.infrastructure.db.orm.animal import AnimalORM
from src.infrastructure.db.orm.compliance_alert import ComplianceAlertORM
from src.utils.datetime_tz import ensure_utc


class ComplianceReadModelSQLAlchemy(ComplianceReadModel):
    """Column-level projections for the dashboards; never loads full rows."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def animal_snapshots(self, farm_ids: list[UUID] | None = None) -> list[AnimalSnapshot]:
        stmt = select(
            AnimalORM.id,
            AnimalORM.farm_id,
            AnimalORM.tag,
            AnimalORM.name,
            AnimalORM.status,
            AnimalORM.withdrawal_until_milk,
            AnimalORM.withdrawal_until_meat,
        )
        if farm_ids is not None:
            stmt = stmt.where(AnimalORM.farm_id.in_(farm_ids))
        stmt = stmt.order_by(AnimalORM.tag)
        result = await self.session.execute(stmt)
        return [
            AnimalSnapshot(
                id=row.id,
                farm_id=row.farm_id,
                tag=row.tag,
                name=row.name,
                status=row.status,
                withdrawal_until_milk=ensure_utc(row.withdrawal_until_milk),
                withdrawal_until_meat=ensure_utc(row.withdrawal_until_meat),
            )
            for row in result.all()
        ]

    async def active_alerts(self, farm_ids: list[UUID] | None = None) -> list[ComplianceAlert]:
        stmt = select(ComplianceAlertORM).where(
            ComplianceAlertORM.status == AlertStatus.ACTIVE.value
        )
        if farm_ids is not None:
            stmt = stmt.where(ComplianceAlertORM.farm_id.in_(farm_ids))
        stmt = stmt.order_by(ComplianceAlertORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [
            ComplianceAlert(
                id=orm.id,
                farm_id=orm.farm_id,
                alert_type=orm.alert_type,
                severity=orm.severity,
                description=orm.description,
                animal_id=orm.animal_id,
                task_id=orm.task_id,
                status=orm.status,
                created_at=ensure_utc(orm.created_at),
                resolved_at=ensure_utc(orm.resolved_at),
            )
            for orm in result.scalars().all()
        ]
