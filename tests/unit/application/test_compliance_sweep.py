from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, time, timedelta, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest

from src.application.use_cases.compliance import run_compliance_sweep
from src.domain.models.animal import Animal
from src.domain.models.compliance_alert import ComplianceAlert
from src.domain.models.task import Task

NOW = datetime(2024, 1, 7, 12, 0, tzinfo=timezone.utc)


class StubAnimals:
    def __init__(self, animals: list[Animal]) -> None:
        self.items = {animal.id: animal for animal in animals}
        self.stale: set = set()

    async def list(self, *, status=None):
        return [replace(a) for a in self.items.values() if status is None or a.status == status]

    async def get(self, animal_id):
        return self.items.get(animal_id)

    async def update(self, animal_id, data, expected_version):
        animal = self.items[animal_id]
        if animal_id in self.stale or animal.version != expected_version:
            return None
        for key, value in data.items():
            setattr(animal, key, value)
        animal.version += 1
        return animal


class StubTasks:
    def __init__(self, tasks: list[Task]) -> None:
        self.items = {task.id: task for task in tasks}

    async def list_incomplete_before(self, before):
        return [t for t in self.items.values() if not t.is_completed and t.scheduled_date < before]

    async def list_by_ids(self, ids):
        return [self.items[i] for i in ids if i in self.items]


class StubAlerts:
    def __init__(self) -> None:
        self.items: dict = {}
        self.updated: list = []

    async def list(self, *, status=None, alert_type=None):
        return [
            a
            for a in self.items.values()
            if (status is None or a.status == status)
            and (alert_type is None or a.alert_type == alert_type)
        ]

    async def add(self, alert):
        self.items[alert.id] = alert
        return alert

    async def update(self, alert):
        self.updated.append(alert)
        self.items[alert.id] = alert
        return alert


def make_uow(animals: list[Animal], tasks: list[Task]):
    async def commit():
        return None

    async def rollback():
        return None

    return SimpleNamespace(
        animals=StubAnimals(animals),
        tasks=StubTasks(tasks),
        compliance_alerts=StubAlerts(),
        commit=commit,
        rollback=rollback,
    )


def _animal(milk_until: datetime, meat_until: datetime) -> Animal:
    animal = Animal.create(farm_id=uuid4(), species="cattle", tag=f"T-{uuid4().hex[:4]}")
    animal.withdrawal_until_milk = milk_until
    animal.withdrawal_until_meat = meat_until
    animal.status = "withdrawal"
    return animal


def _task(animal: Animal, scheduled: date) -> Task:
    return Task.create(
        treatment_id=uuid4(),
        animal_id=animal.id,
        farmer_id=uuid4(),
        medication_name="Penicillin",
        dosage="5 ml",
        scheduled_date=scheduled,
        scheduled_time=time(8, 0),
        points_awarded=5,
    )


@pytest.mark.asyncio
async def test_releases_only_fully_elapsed_animals():
    elapsed = _animal(NOW - timedelta(days=2), NOW - timedelta(hours=1))
    milk_clear = _animal(NOW - timedelta(days=2), NOW + timedelta(days=1))
    uow = make_uow([elapsed, milk_clear], [])

    result = await run_compliance_sweep.execute(uow, now=NOW)

    assert result.animals_released == 1
    assert uow.animals.items[elapsed.id].status == "active"
    assert uow.animals.items[milk_clear.id].status == "withdrawal"


@pytest.mark.asyncio
async def test_release_skips_changed_animal():
    elapsed = _animal(NOW - timedelta(days=2), NOW - timedelta(hours=1))
    uow = make_uow([elapsed], [])
    uow.animals.stale.add(elapsed.id)

    result = await run_compliance_sweep.execute(uow, now=NOW)

    assert result.animals_released == 0
    assert uow.animals.items[elapsed.id].status == "withdrawal"


@pytest.mark.asyncio
async def test_missed_tasks_raise_one_alert_each_with_banded_severity():
    animal = _animal(NOW + timedelta(days=1), NOW + timedelta(days=1))
    tasks = [
        _task(animal, date(2024, 1, 6)),
        _task(animal, date(2024, 1, 4)),
        _task(animal, date(2024, 1, 1)),
        _task(animal, date(2024, 1, 7)),
    ]
    uow = make_uow([animal], tasks)

    first = await run_compliance_sweep.execute(uow, now=NOW)
    second = await run_compliance_sweep.execute(uow, now=NOW)

    assert first.alerts_created == 3
    assert second.alerts_created == 0
    severities = sorted(a.severity for a in uow.compliance_alerts.items.values())
    assert severities == ["high", "low", "medium"]
    assert {a.farm_id for a in uow.compliance_alerts.items.values()} == {animal.farm_id}


@pytest.mark.asyncio
async def test_grace_days_defer_alerts():
    animal = _animal(NOW + timedelta(days=1), NOW + timedelta(days=1))
    uow = make_uow([animal], [_task(animal, date(2024, 1, 6))])

    result = await run_compliance_sweep.execute(uow, now=NOW, grace_days=1)

    assert result.alerts_created == 0


@pytest.mark.asyncio
async def test_existing_alert_escalates_as_task_ages():
    animal = _animal(NOW + timedelta(days=10), NOW + timedelta(days=10))
    task = _task(animal, date(2024, 1, 6))
    uow = make_uow([animal], [task])
    await run_compliance_sweep.execute(uow, now=NOW)

    later = await run_compliance_sweep.execute(uow, now=NOW + timedelta(days=4))

    assert later.alerts_escalated == 1
    assert later.alerts_created == 0
    (alert,) = uow.compliance_alerts.items.values()
    assert alert.severity == "high"


@pytest.mark.asyncio
async def test_completed_task_resolves_alert():
    animal = _animal(NOW + timedelta(days=1), NOW + timedelta(days=1))
    task = _task(animal, date(2024, 1, 5))
    uow = make_uow([animal], [task])
    await run_compliance_sweep.execute(uow, now=NOW)

    task.complete(NOW)
    result = await run_compliance_sweep.execute(uow, now=NOW + timedelta(hours=1))

    assert result.alerts_resolved == 1
    (alert,) = uow.compliance_alerts.items.values()
    assert alert.status == "resolved"
    assert alert.resolved_at == NOW + timedelta(hours=1)


@pytest.mark.asyncio
async def test_manual_alerts_are_left_alone():
    manual = ComplianceAlert.create(
        farm_id=uuid4(), alert_type="other", severity="low", description="Fence down"
    )
    uow = make_uow([], [])
    await uow.compliance_alerts.add(manual)

    result = await run_compliance_sweep.execute(uow, now=NOW)

    assert result.alerts_resolved == 0
    assert manual.status == "active"


@pytest.mark.asyncio
async def test_manually_resolved_alert_stays_resolved():
    animal = _animal(NOW + timedelta(days=10), NOW + timedelta(days=10))
    task = _task(animal, date(2024, 1, 5))
    uow = make_uow([animal], [task])
    await run_compliance_sweep.execute(uow, now=NOW)
    (alert,) = uow.compliance_alerts.items.values()
    alert.resolve(NOW)

    result = await run_compliance_sweep.execute(uow, now=NOW + timedelta(days=3))

    assert result.alerts_created == 0
    assert result.alerts_escalated == 0
    assert [a for a in uow.compliance_alerts.items.values() if a.is_active] == []
