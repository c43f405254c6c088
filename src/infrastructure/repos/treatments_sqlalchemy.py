from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.treatments import TreatmentRepository
from src.domain.models.treatment import Treatment
from src.infrastructure.db.orm.treatment import TreatmentORM
from src.utils.datetime_tz import ensure_utc


class TreatmentsSQLAlchemyRepository(TreatmentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: TreatmentORM) -> Treatment:
        return Treatment(
            id=orm.id,
            animal_id=orm.animal_id,
            vet_id=orm.vet_id,
            medication_id=orm.medication_id,
            diagnosis=orm.diagnosis,
            dosage=orm.dosage,
            route_of_administration=orm.route_of_administration,
            notes=orm.notes,
            treatment_start_date=orm.treatment_start_date,
            treatment_end_date=orm.treatment_end_date,
            created_at=ensure_utc(orm.created_at),
        )

    def _to_orm(self, treatment: Treatment) -> TreatmentORM:
        return TreatmentORM(
            id=treatment.id,
            animal_id=treatment.animal_id,
            vet_id=treatment.vet_id,
            medication_id=treatment.medication_id,
            diagnosis=treatment.diagnosis,
            dosage=treatment.dosage,
            route_of_administration=treatment.route_of_administration,
            notes=treatment.notes,
            treatment_start_date=treatment.treatment_start_date,
            treatment_end_date=treatment.treatment_end_date,
            created_at=treatment.created_at,
        )

    async def add(self, treatment: Treatment) -> Treatment:
        orm = self._to_orm(treatment)
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, treatment_id: UUID) -> Treatment | None:
        orm = await self.session.get(TreatmentORM, treatment_id)
        return self._to_domain(orm) if orm else None

    async def list_by_animal(
        self, animal_id: UUID, limit: int = 50, offset: int = 0
    ) -> list[Treatment]:
        stmt = (
            select(TreatmentORM)
            .where(TreatmentORM.animal_id == animal_id)
            .order_by(TreatmentORM.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def count_by_animal(self, animal_id: UUID) -> int:
        stmt = select(func.count(TreatmentORM.id)).where(TreatmentORM.animal_id == animal_id)
        result = await self.session.execute(stmt)
        return result.scalar() or 0
