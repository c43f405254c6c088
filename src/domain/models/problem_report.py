from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from src.domain.value_objects.severity import Severity


class ProblemReportStatus(str, Enum):
    PENDING = "pending"
    RESPONDED = "responded"
    CLOSED = "closed"


@dataclass(slots=True)
class ProblemReport:
    id: UUID
    farmer_id: UUID
    problem_type: str
    symptoms: str
    severity: str = Severity.MEDIUM.value
    description: str | None = None
    animal_id: UUID | None = None
    status: str = ProblemReportStatus.PENDING.value
    vet_id: UUID | None = None
    vet_response: str | None = None
    responded_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farmer_id: UUID,
        problem_type: str,
        symptoms: str,
        severity: str = Severity.MEDIUM.value,
        description: str | None = None,
        animal_id: UUID | None = None,
    ) -> ProblemReport:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farmer_id=farmer_id,
            problem_type=problem_type,
            symptoms=symptoms,
            severity=Severity(severity).value,
            description=description,
            animal_id=animal_id,
            created_at=now,
            updated_at=now,
        )

    def respond(self, vet_id: UUID, response: str, now: datetime) -> None:
        self.vet_id = vet_id
        self.vet_response = response
        self.responded_at = now
        self.status = ProblemReportStatus.RESPONDED.value
        self.updated_at = now
