from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class TestingReportStatus(str, Enum):
    PENDING = "pending"
    RECEIVED = "received"
    COMPLETED = "completed"


class TestingPriority(str, Enum):
    ROUTINE = "routine"
    URGENT = "urgent"
    EMERGENCY = "emergency"


@dataclass(slots=True)
class TestingReport:
    id: UUID
    animal_id: UUID
    vet_id: UUID
    test_type: str
    sample_type: str
    test_description: str | None = None
    priority: str = TestingPriority.ROUTINE.value
    status: str = TestingReportStatus.PENDING.value
    lab_id: UUID | None = None
    results: str | None = None
    notes: str | None = None
    requested_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    received_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        animal_id: UUID,
        vet_id: UUID,
        test_type: str,
        sample_type: str,
        test_description: str | None = None,
        priority: str = TestingPriority.ROUTINE.value,
        notes: str | None = None,
    ) -> TestingReport:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            animal_id=animal_id,
            vet_id=vet_id,
            test_type=test_type,
            sample_type=sample_type,
            test_description=test_description,
            priority=TestingPriority(priority).value,
            notes=notes,
            requested_at=now,
            created_at=now,
            updated_at=now,
        )

    def mark_received(self, lab_id: UUID, now: datetime) -> None:
        self.status = TestingReportStatus.RECEIVED.value
        self.lab_id = lab_id
        self.received_at = now
        self.updated_at = now

    def mark_completed(self, results: str, notes: str | None, now: datetime) -> None:
        self.status = TestingReportStatus.COMPLETED.value
        self.results = results
        if notes is not None:
            self.notes = notes
        self.completed_at = now
        self.updated_at = now
