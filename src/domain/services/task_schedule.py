from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time, timedelta
from enum import Enum


class CadenceStrategy(str, Enum):
    FIXED_COUNT = "fixed_count"
    INTERVAL_DAYS = "interval_days"
    EXPLICIT_DATES = "explicit_dates"


@dataclass(slots=True, frozen=True)
class TaskSchedulePolicy:
    strategy: CadenceStrategy = CadenceStrategy.FIXED_COUNT
    count: int = 3
    interval_days: int = 1
    dates: tuple[date, ...] = field(default_factory=tuple)
    scheduled_time: time = time(8, 0)
    points_per_task: int = 5

    def validate(self, start_date: date | None = None) -> list[str]:
        """Return a list of human readable problems; empty when the policy is usable.

        With ``start_date`` given, explicit dates before it are rejected.
        """
        problems: list[str] = []
        if self.points_per_task < 0:
            problems.append("points_per_task must be >= 0")
        if self.strategy is CadenceStrategy.FIXED_COUNT and self.count < 1:
            problems.append("count must be >= 1 for fixed_count")
        if self.strategy is CadenceStrategy.INTERVAL_DAYS:
            if self.interval_days < 1:
                problems.append("interval_days must be >= 1 for interval_days")
            if self.count < 1:
                problems.append("count must be >= 1 for interval_days")
        if self.strategy is CadenceStrategy.EXPLICIT_DATES and not self.dates:
            problems.append("dates are required for explicit_dates")
        if (
            self.strategy is CadenceStrategy.EXPLICIT_DATES
            and start_date is not None
            and any(d < start_date for d in self.dates)
        ):
            problems.append("dates must not precede the treatment start date")
        return problems


def build_task_dates(
    policy: TaskSchedulePolicy,
    start_date: date,
    end_date: date | None = None,
) -> list[date]:
    if policy.strategy is CadenceStrategy.EXPLICIT_DATES:
        return sorted(set(policy.dates))

    if policy.strategy is CadenceStrategy.FIXED_COUNT:
        return [start_date + timedelta(days=offset) for offset in range(policy.count)]

    # interval_days: every N days through the end date (inclusive)
    step = timedelta(days=policy.interval_days)
    if end_date is None:
        end_date = start_date + step * (policy.count - 1)
    dates: list[date] = []
    current = start_date
    while current <= end_date:
        dates.append(current)
        current += step
    return dates
