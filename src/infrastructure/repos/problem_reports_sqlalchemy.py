from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import NotFound
from src.application.interfaces.repositories.problem_reports import ProblemReportRepository
from src.domain.models.problem_report import ProblemReport
from src.infrastructure.db.orm.problem_report import ProblemReportORM
from src.utils.datetime_tz import ensure_utc


class ProblemReportsSQLAlchemyRepository(ProblemReportRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ProblemReportORM) -> ProblemReport:
        return ProblemReport(
            id=orm.id,
            farmer_id=orm.farmer_id,
            problem_type=orm.problem_type,
            symptoms=orm.symptoms,
            severity=orm.severity,
            description=orm.description,
            animal_id=orm.animal_id,
            status=orm.status,
            vet_id=orm.vet_id,
            vet_response=orm.vet_response,
            responded_at=ensure_utc(orm.responded_at),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def add(self, report: ProblemReport) -> ProblemReport:
        orm = ProblemReportORM(
            id=report.id,
            farmer_id=report.farmer_id,
            animal_id=report.animal_id,
            problem_type=report.problem_type,
            symptoms=report.symptoms,
            severity=report.severity,
            description=report.description,
            status=report.status,
            created_at=report.created_at,
            updated_at=report.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, report_id: UUID) -> ProblemReport | None:
        orm = await self.session.get(ProblemReportORM, report_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self, *, farmer_id: UUID | None = None, status: str | None = None
    ) -> list[ProblemReport]:
        stmt = select(ProblemReportORM)
        if farmer_id is not None:
            stmt = stmt.where(ProblemReportORM.farmer_id == farmer_id)
        if status is not None:
            stmt = stmt.where(ProblemReportORM.status == status)
        stmt = stmt.order_by(ProblemReportORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, report: ProblemReport) -> ProblemReport:
        orm = await self.session.get(ProblemReportORM, report.id)
        if orm is None:
            raise NotFound("Problem report not found")
        orm.status = report.status
        orm.vet_id = report.vet_id
        orm.vet_response = report.vet_response
        orm.responded_at = report.responded_at
        orm.updated_at = report.updated_at
        await self.session.flush()
        return self._to_domain(orm)
