from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from uuid import UUID, uuid4


@dataclass(slots=True)
class Treatment:
    id: UUID
    animal_id: UUID
    vet_id: UUID
    medication_id: UUID
    diagnosis: str
    dosage: str
    route_of_administration: str | None = None
    notes: str | None = None
    treatment_start_date: date | None = None
    treatment_end_date: date | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(
        cls,
        animal_id: UUID,
        vet_id: UUID,
        medication_id: UUID,
        diagnosis: str,
        dosage: str,
        route_of_administration: str | None = None,
        notes: str | None = None,
        treatment_start_date: date | None = None,
        treatment_end_date: date | None = None,
        created_at: datetime | None = None,
    ) -> Treatment:
        created_at = created_at or datetime.now(timezone.utc)

        # Ensure created_at is timezone-aware and in UTC
        if created_at.tzinfo is None or created_at.tzinfo.utcoffset(created_at) is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        else:
            created_at = created_at.astimezone(timezone.utc)

        return cls(
            id=uuid4(),
            animal_id=animal_id,
            vet_id=vet_id,
            medication_id=medication_id,
            diagnosis=diagnosis,
            dosage=dosage,
            route_of_administration=route_of_administration,
            notes=notes,
            treatment_start_date=treatment_start_date or created_at.date(),
            treatment_end_date=treatment_end_date,
            created_at=created_at,
        )
