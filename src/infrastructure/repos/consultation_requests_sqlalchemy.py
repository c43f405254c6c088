from __future__ import annotations

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import NotFound
from src.application.interfaces.repositories.consultation_requests import (
    ConsultationRequestRepository,
)
from src.domain.models.consultation_request import ConsultationRequest
from src.infrastructure.db.orm.consultation_request import ConsultationRequestORM
from src.utils.datetime_tz import ensure_utc


class ConsultationRequestsSQLAlchemyRepository(ConsultationRequestRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: ConsultationRequestORM) -> ConsultationRequest:
        return ConsultationRequest(
            id=orm.id,
            farmer_id=orm.farmer_id,
            symptoms=orm.symptoms,
            consultation_type=orm.consultation_type,
            priority=orm.priority,
            status=orm.status,
            vet_id=orm.vet_id,
            animal_id=orm.animal_id,
            notes=orm.notes,
            scheduled_at=ensure_utc(orm.scheduled_at),
            feedback=orm.feedback,
            rating=orm.rating,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def add(self, request: ConsultationRequest) -> ConsultationRequest:
        orm = ConsultationRequestORM(
            id=request.id,
            farmer_id=request.farmer_id,
            vet_id=request.vet_id,
            animal_id=request.animal_id,
            consultation_type=request.consultation_type,
            priority=request.priority,
            symptoms=request.symptoms,
            notes=request.notes,
            scheduled_at=request.scheduled_at,
            status=request.status,
            created_at=request.created_at,
            updated_at=request.updated_at,
        )
        self.session.add(orm)
        await self.session.flush()
        return self._to_domain(orm)

    async def get(self, request_id: UUID) -> ConsultationRequest | None:
        orm = await self.session.get(ConsultationRequestORM, request_id)
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        farmer_id: UUID | None = None,
        vet_id: UUID | None = None,
        status: str | None = None,
    ) -> list[ConsultationRequest]:
        stmt = select(ConsultationRequestORM)
        if farmer_id is not None:
            stmt = stmt.where(ConsultationRequestORM.farmer_id == farmer_id)
        if vet_id is not None:
            stmt = stmt.where(ConsultationRequestORM.vet_id == vet_id)
        if status is not None:
            stmt = stmt.where(ConsultationRequestORM.status == status)
        stmt = stmt.order_by(ConsultationRequestORM.created_at.desc())
        result = await self.session.execute(stmt)
        return [self._to_domain(orm) for orm in result.scalars().all()]

    async def update(self, request: ConsultationRequest) -> ConsultationRequest:
        orm = await self.session.get(ConsultationRequestORM, request.id)
        if orm is None:
            raise NotFound("Consultation request not found")
        orm.vet_id = request.vet_id
        orm.status = request.status
        orm.scheduled_at = request.scheduled_at
        orm.notes = request.notes
        orm.feedback = request.feedback
        orm.rating = request.rating
        orm.updated_at = request.updated_at
        await self.session.flush()
        return self._to_domain(orm)
