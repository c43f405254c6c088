from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.compliance_alert import ComplianceAlert


class ComplianceAlertRepository(Protocol):
    async def add(self, alert: ComplianceAlert) -> ComplianceAlert: ...

    async def get(self, alert_id: UUID) -> ComplianceAlert | None: ...

    async def list(
        self,
        *,
        farm_ids: list[UUID] | None = None,
        status: str | None = None,
        alert_type: str | None = None,
        limit: int | None = None,
    ) -> list[ComplianceAlert]: ...

    async def update(self, alert: ComplianceAlert) -> ComplianceAlert: ...
