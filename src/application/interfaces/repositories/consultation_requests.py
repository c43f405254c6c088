from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.consultation_request import ConsultationRequest


class ConsultationRequestRepository(Protocol):
    async def add(self, request: ConsultationRequest) -> ConsultationRequest: ...

    async def get(self, request_id: UUID) -> ConsultationRequest | None: ...

    async def list(
        self,
        *,
        farmer_id: UUID | None = None,
        vet_id: UUID | None = None,
        status: str | None = None,
    ) -> list[ConsultationRequest]: ...

    async def update(self, request: ConsultationRequest) -> ConsultationRequest: ...
