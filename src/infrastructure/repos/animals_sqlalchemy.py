from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError
from src.application.interfaces.repositories.animals import AnimalRepository
from src.domain.models.animal import Animal
from src.infrastructure.db.orm.animal import AnimalORM
from src.utils.datetime_tz import ensure_utc


class AnimalsSQLAlchemyRepository(AnimalRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: AnimalORM) -> Animal:
        return Animal(
            id=orm.id,
            farm_id=orm.farm_id,
            species=orm.species,
            tag=orm.tag,
            name=orm.name,
            breed=orm.breed,
            gender=orm.gender,
            birth_date=orm.birth_date,
            status=orm.status,
            withdrawal_until_milk=ensure_utc(orm.withdrawal_until_milk),
            withdrawal_until_meat=ensure_utc(orm.withdrawal_until_meat),
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
            version=orm.version,
        )

    def _filtered(self, stmt, *, farm_ids, status, search):
        if farm_ids is not None:
            stmt = stmt.where(AnimalORM.farm_id.in_(farm_ids))
        if status is not None:
            stmt = stmt.where(AnimalORM.status == status)
        if search:
            pattern = f"%{search.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(AnimalORM.tag).like(pattern),
                    func.lower(AnimalORM.name).like(pattern),
                    func.lower(AnimalORM.species).like(pattern),
                    func.lower(AnimalORM.breed).like(pattern),
                )
            )
        return stmt

    async def add(self, animal: Animal) -> Animal:
        orm = AnimalORM(
            id=animal.id,
            farm_id=animal.farm_id,
            species=animal.species,
            tag=animal.tag,
            name=animal.name,
            breed=animal.breed,
            gender=animal.gender,
            birth_date=animal.birth_date,
            status=animal.status,
            withdrawal_until_milk=animal.withdrawal_until_milk,
            withdrawal_until_meat=animal.withdrawal_until_meat,
            created_at=animal.created_at,
            updated_at=animal.updated_at,
            version=animal.version,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Animal tag already exists for farm") from exc
        return self._to_domain(orm)

    async def get(self, animal_id: UUID) -> Animal | None:
        stmt = select(AnimalORM).where(AnimalORM.id == animal_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        farm_ids: list[UUID] | None = None,
        status: str | None = None,
        search: str | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Animal]:
        stmt = self._filtered(select(AnimalORM), farm_ids=farm_ids, status=status, search=search)
        stmt = stmt.order_by(AnimalORM.created_at.desc(), AnimalORM.id).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self.session.execute(stmt)
        return [self._to_domain(item) for item in result.scalars().all()]

    async def count(
        self,
        *,
        farm_ids: list[UUID] | None = None,
        status: str | None = None,
        search: str | None = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count(AnimalORM.id)), farm_ids=farm_ids, status=status, search=search
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update(
        self,
        animal_id: UUID,
        data: dict,
        expected_version: int,
    ) -> Animal | None:
        values = {**data, "version": expected_version + 1}
        stmt = (
            update(AnimalORM)
            .where(AnimalORM.id == animal_id)
            .where(AnimalORM.version == expected_version)
            .values(**values)
            .returning(AnimalORM)
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as exc:
            raise ConflictError("Failed to update animal due to constraint violation") from exc
        orm = result.scalar_one_or_none()
        if not orm:
            return None
        return self._to_domain(orm)
