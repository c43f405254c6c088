from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.problem_report import ProblemReport


class ProblemReportRepository(Protocol):
    async def add(self, report: ProblemReport) -> ProblemReport: ...

    async def get(self, report_id: UUID) -> ProblemReport | None: ...

    async def list(
        self, *, farmer_id: UUID | None = None, status: str | None = None
    ) -> list[ProblemReport]: ...

    async def update(self, report: ProblemReport) -> ProblemReport: ...
