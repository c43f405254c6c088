from __future__ import annotations

from datetime import date, time
from uuid import uuid4

from src.domain.models.compliance_alert import missed_task_severity
from src.domain.models.task import Task, TaskState
from src.domain.services.task_schedule import (
    CadenceStrategy,
    TaskSchedulePolicy,
    build_task_dates,
)
from src.domain.value_objects.severity import Severity

START = date(2024, 1, 1)


def test_default_policy_is_three_daily_tasks():
    policy = TaskSchedulePolicy()
    assert policy.validate() == []
    assert build_task_dates(policy, START) == [
        date(2024, 1, 1),
        date(2024, 1, 2),
        date(2024, 1, 3),
    ]


def test_fixed_count_ignores_end_date():
    policy = TaskSchedulePolicy(count=2)
    assert build_task_dates(policy, START, date(2024, 1, 10)) == [
        date(2024, 1, 1),
        date(2024, 1, 2),
    ]


def test_interval_days_runs_through_end_date():
    policy = TaskSchedulePolicy(strategy=CadenceStrategy.INTERVAL_DAYS, interval_days=3)
    assert build_task_dates(policy, START, date(2024, 1, 10)) == [
        date(2024, 1, 1),
        date(2024, 1, 4),
        date(2024, 1, 7),
        date(2024, 1, 10),
    ]


def test_interval_days_without_end_date_uses_count():
    policy = TaskSchedulePolicy(strategy=CadenceStrategy.INTERVAL_DAYS, interval_days=2, count=2)
    assert build_task_dates(policy, START) == [date(2024, 1, 1), date(2024, 1, 3)]


def test_explicit_dates_are_sorted_and_deduplicated():
    policy = TaskSchedulePolicy(
        strategy=CadenceStrategy.EXPLICIT_DATES,
        dates=(date(2024, 1, 5), date(2024, 1, 2), date(2024, 1, 5)),
    )
    assert build_task_dates(policy, START) == [date(2024, 1, 2), date(2024, 1, 5)]


def test_invalid_policies_report_problems():
    assert TaskSchedulePolicy(count=0).validate()
    assert TaskSchedulePolicy(points_per_task=-1).validate()
    assert TaskSchedulePolicy(strategy=CadenceStrategy.EXPLICIT_DATES).validate()
    assert TaskSchedulePolicy(strategy=CadenceStrategy.INTERVAL_DAYS, interval_days=0).validate()


def _task(scheduled: date) -> Task:
    return Task.create(
        treatment_id=uuid4(),
        animal_id=uuid4(),
        farmer_id=uuid4(),
        medication_name="Drug",
        dosage="1 ml",
        scheduled_date=scheduled,
        scheduled_time=time(8, 0),
        points_awarded=5,
    )


def test_task_state_is_derived_from_the_calendar():
    task = _task(date(2024, 1, 2))
    assert task.state(date(2024, 1, 1)) is TaskState.SCHEDULED
    assert task.state(date(2024, 1, 2)) is TaskState.DUE_TODAY
    assert task.state(date(2024, 1, 4)) is TaskState.OVERDUE
    assert task.days_overdue(date(2024, 1, 4)) == 2


def test_completed_task_is_never_overdue():
    task = _task(date(2024, 1, 1))
    task.is_completed = True
    assert task.state(date(2024, 2, 1)) is TaskState.COMPLETED
    assert task.days_overdue(date(2024, 2, 1)) == 0


def test_missed_task_severity_bands():
    assert missed_task_severity(1) is Severity.LOW
    assert missed_task_severity(2) is Severity.MEDIUM
    assert missed_task_severity(3) is Severity.MEDIUM
    assert missed_task_severity(4) is Severity.HIGH


def test_explicit_dates_before_start_are_rejected():
    policy = TaskSchedulePolicy(
        strategy=CadenceStrategy.EXPLICIT_DATES,
        dates=(date(2023, 12, 31), date(2024, 1, 2)),
    )
    assert policy.validate() == []
    assert policy.validate(START) == ["dates must not precede the treatment start date"]
    assert TaskSchedulePolicy(
        strategy=CadenceStrategy.EXPLICIT_DATES, dates=(START,)
    ).validate(START) == []
