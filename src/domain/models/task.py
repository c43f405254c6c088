from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from enum import Enum
from uuid import UUID, uuid4


class TaskState(str, Enum):
    SCHEDULED = "scheduled"
    DUE_TODAY = "due_today"
    OVERDUE = "overdue"
    COMPLETED = "completed"


@dataclass(slots=True)
class Task:
    id: UUID
    treatment_id: UUID
    animal_id: UUID
    farmer_id: UUID
    medication_name: str
    dosage: str
    scheduled_date: date
    scheduled_time: time
    points_awarded: int = 0
    is_completed: bool = False
    completed_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        treatment_id: UUID,
        animal_id: UUID,
        farmer_id: UUID,
        medication_name: str,
        dosage: str,
        scheduled_date: date,
        scheduled_time: time,
        points_awarded: int = 0,
    ) -> Task:
        return cls(
            id=uuid4(),
            treatment_id=treatment_id,
            animal_id=animal_id,
            farmer_id=farmer_id,
            medication_name=medication_name,
            dosage=dosage,
            scheduled_date=scheduled_date,
            scheduled_time=scheduled_time,
            points_awarded=points_awarded,
        )

    def state(self, today: date) -> TaskState:
        # overdue and due_today are derived from the calendar, never stored
        if self.is_completed:
            return TaskState.COMPLETED
        if self.scheduled_date < today:
            return TaskState.OVERDUE
        if self.scheduled_date == today:
            return TaskState.DUE_TODAY
        return TaskState.SCHEDULED

    def days_overdue(self, today: date) -> int:
        if self.is_completed or self.scheduled_date >= today:
            return 0
        return (today - self.scheduled_date).days

    def complete(self, now: datetime) -> None:
        self.is_completed = True
        self.completed_at = now
