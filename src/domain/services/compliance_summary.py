from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.services.withdrawal import evaluate_compliance
from src.domain.value_objects.compliance_status import ComplianceStatus
from src.domain.value_objects.severity import Severity


class AnimalWindowsRow(Protocol):
    withdrawal_until_milk: datetime | None
    withdrawal_until_meat: datetime | None


class AlertRow(Protocol):
    severity: str


@dataclass(slots=True, frozen=True)
class AnimalSnapshot:
    """Read-model row: the columns of an animal the aggregator needs."""

    id: UUID
    farm_id: UUID
    tag: str
    name: str | None
    status: str
    withdrawal_until_milk: datetime | None
    withdrawal_until_meat: datetime | None


@dataclass(slots=True)
class ComplianceSummary:
    total_animals: int = 0
    compliant_animals: int = 0
    restricted_animals: int = 0
    by_status: dict[str, int] = field(default_factory=dict)
    active_alerts: int = 0
    alerts_by_severity: dict[str, int] = field(default_factory=dict)
    compliance_rate: float = 100.0


def compliance_rate(compliant: int, total: int) -> float:
    if total == 0:
        return 100.0
    return round(compliant / total * 100, 2)


def summarize_compliance(
    animals: Iterable[AnimalWindowsRow],
    alerts: Iterable[AlertRow],
    now: datetime,
) -> ComplianceSummary:
    by_status = {status.value: 0 for status in ComplianceStatus}
    total = 0
    for animal in animals:
        total += 1
        status = evaluate_compliance(
            animal.withdrawal_until_milk, animal.withdrawal_until_meat, now
        )
        by_status[status.value] += 1

    by_severity = {severity.value: 0 for severity in Severity}
    active_alerts = 0
    for alert in alerts:
        active_alerts += 1
        by_severity[alert.severity] = by_severity.get(alert.severity, 0) + 1

    compliant = by_status[ComplianceStatus.SAFE.value]
    return ComplianceSummary(
        total_animals=total,
        compliant_animals=compliant,
        restricted_animals=total - compliant,
        by_status=by_status,
        active_alerts=active_alerts,
        alerts_by_severity=by_severity,
        compliance_rate=compliance_rate(compliant, total),
    )
