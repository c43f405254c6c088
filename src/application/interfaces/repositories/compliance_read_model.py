from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.compliance_alert import ComplianceAlert
from src.domain.services.compliance_summary import AnimalSnapshot


class ComplianceReadModel(Protocol):
    """Joins needed by the dashboards, decoupled from any presentation."""

    async def animal_snapshots(self, farm_ids: list[UUID] | None = None) -> list[AnimalSnapshot]: ...

    async def active_alerts(self, farm_ids: list[UUID] | None = None) -> list[ComplianceAlert]: ...
