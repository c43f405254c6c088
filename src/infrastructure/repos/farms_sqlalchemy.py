from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.interfaces.repositories.farms import FarmRepository
from src.domain.models.farm import Farm
from src.infrastructure.db.orm.farm import FarmORM
from src.utils.datetime_tz import ensure_utc


class FarmsSQLAlchemyRepository(FarmRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: FarmORM) -> Farm:
        return Farm(
            id=orm.id,
            owner_id=orm.owner_id,
            farm_name=orm.farm_name,
            address=orm.address,
            registration_number=orm.registration_number,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def add(self, farm: Farm) -> Farm:
        orm = FarmORM(
            id=farm.id,
            owner_id=farm.owner_id,
            farm_name=farm.farm_name,
            address=farm.address,
            registration_number=farm.registration_number,
            created_at=farm.created_at,
            updated_at=farm.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, farm_id: UUID) -> Farm | None:
        orm = await self.session.get(FarmORM, farm_id)
        return self._to_domain(orm) if orm else None

    async def list(self, *, owner_id: UUID | None = None) -> list[Farm]:
        stmt = select(FarmORM)
        if owner_id is not None:
            stmt = stmt.where(FarmORM.owner_id == owner_id)
        stmt = stmt.order_by(FarmORM.farm_name)
        result = await self.session.execute(stmt)
        return [self._to_domain(row) for row in result.scalars().all()]

    async def list_ids_for_owner(self, owner_id: UUID) -> list[UUID]:
        stmt = select(FarmORM.id).where(FarmORM.owner_id == owner_id)
        result = await self.session.execute(stmt)
        return [row[0] for row in result.all()]
