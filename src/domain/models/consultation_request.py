from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4


class ConsultationType(str, Enum):
    VISIT = "visit"
    VIDEO = "video"
    PHONE = "phone"


class ConsultationPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class ConsultationStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


# Allowed status transitions; completed and cancelled are terminal
CONSULTATION_TRANSITIONS: dict[str, set[str]] = {
    ConsultationStatus.PENDING.value: {
        ConsultationStatus.ACCEPTED.value,
        ConsultationStatus.CANCELLED.value,
    },
    ConsultationStatus.ACCEPTED.value: {
        ConsultationStatus.SCHEDULED.value,
        ConsultationStatus.COMPLETED.value,
        ConsultationStatus.CANCELLED.value,
    },
    ConsultationStatus.SCHEDULED.value: {
        ConsultationStatus.COMPLETED.value,
        ConsultationStatus.CANCELLED.value,
    },
    ConsultationStatus.COMPLETED.value: set(),
    ConsultationStatus.CANCELLED.value: set(),
}


@dataclass(slots=True)
class ConsultationRequest:
    id: UUID
    farmer_id: UUID
    symptoms: str
    consultation_type: str = ConsultationType.VISIT.value
    priority: str = ConsultationPriority.MEDIUM.value
    status: str = ConsultationStatus.PENDING.value
    vet_id: UUID | None = None
    animal_id: UUID | None = None
    notes: str | None = None
    scheduled_at: datetime | None = None
    feedback: str | None = None
    rating: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        farmer_id: UUID,
        symptoms: str,
        consultation_type: str = ConsultationType.VISIT.value,
        priority: str = ConsultationPriority.MEDIUM.value,
        status: str = ConsultationStatus.PENDING.value,
        vet_id: UUID | None = None,
        animal_id: UUID | None = None,
        notes: str | None = None,
        scheduled_at: datetime | None = None,
    ) -> ConsultationRequest:
        now = datetime.now(timezone.utc)
        return cls(
            id=uuid4(),
            farmer_id=farmer_id,
            symptoms=symptoms,
            consultation_type=ConsultationType(consultation_type).value,
            priority=ConsultationPriority(priority).value,
            status=ConsultationStatus(status).value,
            vet_id=vet_id,
            animal_id=animal_id,
            notes=notes,
            scheduled_at=scheduled_at,
            created_at=now,
            updated_at=now,
        )

    def can_transition_to(self, status: str) -> bool:
        return status in CONSULTATION_TRANSITIONS.get(self.status, set())

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
