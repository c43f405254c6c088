from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, NotFound
from src.application.interfaces.repositories.compliance_alerts import ComplianceAlertRepository
from src.domain.models.compliance_alert import ComplianceAlert
from src.infrastructure.db.orm.compliance_alert import ComplianceAlertORM
from src.utils.datetime_tz import ensure_utc


class ComplianceAlertsSQLAlchemyRepository(ComplianceAlertRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ComplianceAlertORM) -> ComplianceAlert:
        return ComplianceAlert(
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

    async def add(self, alert: ComplianceAlert) -> ComplianceAlert:
        orm = ComplianceAlertORM(
            id=alert.id,
            farm_id=alert.farm_id,
            alert_type=alert.alert_type,
            severity=alert.severity,
            description=alert.description,
            animal_id=alert.animal_id,
            task_id=alert.task_id,
            status=alert.status,
            created_at=alert.created_at,
            resolved_at=alert.resolved_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("An active alert already exists for this task") from exc
        return self._to_domain(orm)

    async def get(self, alert_id: UUID) -> ComplianceAlert | None:
        orm = await self.session.get(ComplianceAlertORM, alert_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        farm_ids: list[UUID] | None = None,
        status: str | None = None,
        alert_type: str | None = None,
        limit: int | None = None,
    ) -> list[ComplianceAlert]:
        stmt = select(ComplianceAlertORM)
        if farm_ids is not None:
            stmt = stmt.where(ComplianceAlertORM.farm_id.in_(farm_ids))
        if status is not None:
            stmt = stmt.where(ComplianceAlertORM.status == status)
        if alert_type is not None:
            stmt = stmt.where(ComplianceAlertORM.alert_type == alert_type)
        stmt = stmt.order_by(ComplianceAlertORM.created_at.desc())
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, alert: ComplianceAlert) -> ComplianceAlert:
        orm = await self.session.get(ComplianceAlertORM, alert.id)
        if orm is None:
            raise NotFound("Compliance alert not found")
        orm.severity = alert.severity
        orm.description = alert.description
        orm.status = alert.status
        orm.resolved_at = alert.resolved_at
        await self.session.flush()
        return self._to_domain(orm)
