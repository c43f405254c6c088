from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.testing_report import TestingReport


class TestingReportRepository(Protocol):
    async def add(self, report: TestingReport) -> TestingReport: ...

    async def get(self, report_id: UUID) -> TestingReport | None: ...

    async def list(
        self,
        *,
        vet_id: UUID | None = None,
        status: str | None = None,
    ) -> list[TestingReport]: ...

    async def count_by_status(self) -> dict[str, int]: ...

    async def update(self, report: TestingReport) -> TestingReport: ...
