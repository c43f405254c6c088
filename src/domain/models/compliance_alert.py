from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from src.domain.value_objects.severity import Severity


class AlertType(str, Enum):
    MISSED_TASK = "missed_task"
    WITHDRAWAL_VIOLATION = "withdrawal_violation"
    RESIDUE_DETECTED = "residue_detected"
    OTHER = "other"


class AlertStatus(str, Enum):
    ACTIVE = "active"
    RESOLVED = "resolved"


@dataclass(slots=True)
class ComplianceAlert:
    id: UUID
    farm_id: UUID
    alert_type: str  # AlertType
    severity: str  # Severity
    description: str
    animal_id: UUID | None = None
    task_id: UUID | None = None
    status: str = AlertStatus.ACTIVE.value
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resolved_at: datetime | None = None

    @classmethod
    def create(
        cls,
        farm_id: UUID,
        alert_type: str,
        severity: str,
        description: str,
        animal_id: UUID | None = None,
        task_id: UUID | None = None,
        created_at: datetime | None = None,
    ) -> ComplianceAlert:
        return cls(
            id=uuid4(),
            farm_id=farm_id,
            alert_type=AlertType(alert_type).value,
            severity=Severity(severity).value,
            description=description,
            animal_id=animal_id,
            task_id=task_id,
            status=AlertStatus.ACTIVE.value,
            created_at=created_at or datetime.now(timezone.utc),
        )

    @property
    def is_active(self) -> bool:
        return self.status == AlertStatus.ACTIVE.value

    def resolve(self, now: datetime) -> None:
        self.status = AlertStatus.RESOLVED.value
        self.resolved_at = now


def missed_task_severity(days_overdue: int) -> Severity:
    if days_overdue <= 1:
        return Severity.LOW
    if days_overdue <= 3:
        return Severity.MEDIUM
    return Severity.HIGH
