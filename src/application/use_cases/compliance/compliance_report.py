from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.application.errors import PermissionDenied
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.services.compliance_summary import (
    AnimalSnapshot,
    ComplianceSummary,
    summarize_compliance,
)
from src.domain.services.withdrawal import evaluate_compliance
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class FarmCompliance:
    farm_id: UUID
    farm_name: str
    summary: ComplianceSummary


@dataclass(slots=True)
class RestrictedAnimal:
    animal: AnimalSnapshot
    farm_name: str
    status: str


@dataclass(slots=True)
class ComplianceReport:
    generated_at: datetime
    overall: ComplianceSummary
    farms: list[FarmCompliance]
    restricted_animals: list[RestrictedAnimal]


async def execute(uow: UnitOfWork, role: Role, *, now: datetime) -> ComplianceReport:
    if role not in {Role.ADMIN, Role.VETERINARIAN}:
        raise PermissionDenied("Role not allowed to generate compliance reports")

    farms = await uow.farms.list()
    animals = await uow.compliance.animal_snapshots()
    alerts = await uow.compliance.active_alerts()

    animals_by_farm: dict[UUID, list[AnimalSnapshot]] = defaultdict(list)
    for animal in animals:
        animals_by_farm[animal.farm_id].append(animal)
    alerts_by_farm: dict[UUID, list] = defaultdict(list)
    for alert in alerts:
        alerts_by_farm[alert.farm_id].append(alert)

    farm_names = {farm.id: farm.farm_name for farm in farms}
    rows = [
        FarmCompliance(
            farm_id=farm.id,
            farm_name=farm.farm_name,
            summary=summarize_compliance(animals_by_farm[farm.id], alerts_by_farm[farm.id], now),
        )
        for farm in farms
    ]
    restricted = []
    for animal in animals:
        status = evaluate_compliance(
            animal.withdrawal_until_milk, animal.withdrawal_until_meat, now
        )
        if not status.is_safe:
            restricted.append(
                RestrictedAnimal(
                    animal=animal,
                    farm_name=farm_names.get(animal.farm_id, ""),
                    status=status.value,
                )
            )
    return ComplianceReport(
        generated_at=now,
        overall=summarize_compliance(animals, alerts, now),
        farms=rows,
        restricted_animals=restricted,
    )
