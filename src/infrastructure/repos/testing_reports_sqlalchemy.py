from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import NotFound
from src.application.interfaces.repositories.testing_reports import TestingReportRepository
from src.domain.models.testing_report import TestingReport, TestingReportStatus
from src.infrastructure.db.orm.testing_report import TestingReportORM
from src.utils.datetime_tz import ensure_utc


class TestingReportsSQLAlchemyRepository(TestingReportRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: TestingReportORM) -> TestingReport:
        return TestingReport(
            id=orm.id,
            animal_id=orm.animal_id,
            vet_id=orm.vet_id,
            test_type=orm.test_type,
            sample_type=orm.sample_type,
            test_description=orm.test_description,
            priority=orm.priority,
            status=orm.status,
            lab_id=orm.lab_id,
            results=orm.results,
            notes=orm.notes,
            requested_at=ensure_utc(orm.requested_at),
            received_at=ensure_utc(orm.received_at),
            completed_at=ensure_utc(orm.completed_at),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def add(self, report: TestingReport) -> TestingReport:
        orm = TestingReportORM(
            id=report.id,
            animal_id=report.animal_id,
            vet_id=report.vet_id,
            lab_id=report.lab_id,
            test_type=report.test_type,
            test_description=report.test_description,
            sample_type=report.sample_type,
            priority=report.priority,
            status=report.status,
            notes=report.notes,
            requested_at=report.requested_at,
            created_at=report.created_at,
            updated_at=report.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, report_id: UUID) -> TestingReport | None:
        orm = await self.session.get(TestingReportORM, report_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        vet_id: UUID | None = None,
        status: str | None = None,
    ) -> list[TestingReport]:
        stmt = select(TestingReportORM)
        if vet_id is not None:
            stmt = stmt.where(TestingReportORM.vet_id == vet_id)
        if status is not None:
            stmt = stmt.where(TestingReportORM.status == status)
        stmt = stmt.order_by(TestingReportORM.requested_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_status(self) -> dict[str, int]:
        stmt = select(TestingReportORM.status, func.count(TestingReportORM.id)).group_by(
            TestingReportORM.status
        )
        result = await self.session.execute(stmt)
        counts = {status.value: 0 for status in TestingReportStatus}
        for status, count in result.all():
            counts[status] = count
        return counts

    async def update(self, report: TestingReport) -> TestingReport:
        orm = await self.session.get(TestingReportORM, report.id)
        if orm is None:
            raise NotFound("Testing report not found")
        orm.status = report.status
        orm.lab_id = report.lab_id
        orm.results = report.results
        orm.notes = report.notes
        orm.received_at = report.received_at
        orm.completed_at = report.completed_at
        orm.updated_at = report.updated_at
        await self.session.flush()
        return self._to_domain(orm)
