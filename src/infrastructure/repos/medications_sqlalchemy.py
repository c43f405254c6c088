from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.medications import MedicationRepository
from src.domain.models.medication import Medication
from src.infrastructure.db.orm.medication import MedicationORM
from src.utils.datetime_tz import ensure_utc


class MedicationsSQLAlchemyRepository(MedicationRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: MedicationORM) -> Medication:
        return Medication(
            id=orm.id,
            name=orm.med_name,
            active_ingredient=orm.active_ingredient,
            withdrawal_period_milk_hours=orm.withdrawal_period_milk_hours,
            withdrawal_period_meat_days=orm.withdrawal_period_meat_days,
            dosage_instructions=orm.dosage_instructions,
            created_at=ensure_utc(orm.created_at),
        )

    async def add(self, medication: Medication) -> Medication:
        orm = MedicationORM(
            id=medication.id,
            med_name=medication.name,
            active_ingredient=medication.active_ingredient,
            withdrawal_period_milk_hours=medication.withdrawal_period_milk_hours,
            withdrawal_period_meat_days=medication.withdrawal_period_meat_days,
            dosage_instructions=medication.dosage_instructions,
            created_at=medication.created_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Medication already exists") from exc
        return self._to_domain(orm)

    async def get(self, medication_id: UUID) -> Medication | None:
        orm = await self.session.get(MedicationORM, medication_id)
        return self._to_domain(orm) if orm else None

    async def get_by_name(self, name: str) -> Medication | None:
        stmt = select(MedicationORM).where(func.lower(MedicationORM.med_name) == name.lower())
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(self, *, search: str | None = None) -> list[Medication]:
        stmt = select(MedicationORM)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(MedicationORM.med_name).like(pattern),
                    func.lower(MedicationORM.active_ingredient).like(pattern),
                )
            )
        stmt = stmt.order_by(MedicationORM.med_name)
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]
