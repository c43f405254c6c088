"""Withdrawal window arithmetic and compliance classification.

A window is elapsed only when its end is strictly before the evaluation
instant: an animal whose window ends exactly "now" is still restricted.
Every caller (treatment recording, dashboards, the periodic sweep) goes
through :func:`evaluate_compliance` so the boundary is applied uniformly.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Protocol

from src.domain.value_objects.compliance_status import ComplianceStatus


class WithdrawalPeriods(Protocol):
    withdrawal_period_milk_hours: int
    withdrawal_period_meat_days: int


@dataclass(slots=True, frozen=True)
class WithdrawalWindows:
    milk_until: datetime
    meat_until: datetime


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def compute_withdrawal_windows(
    treated_at: datetime, medication: WithdrawalPeriods
) -> WithdrawalWindows:
    treated_at = _as_utc(treated_at)
    return WithdrawalWindows(
        milk_until=treated_at + timedelta(hours=medication.withdrawal_period_milk_hours),
        meat_until=treated_at + timedelta(days=medication.withdrawal_period_meat_days),
    )


def is_window_active(until: datetime | None, now: datetime) -> bool:
    if until is None:
        return False
    return not _as_utc(until) < _as_utc(now)


def evaluate_compliance(
    milk_until: datetime | None,
    meat_until: datetime | None,
    now: datetime,
) -> ComplianceStatus:
    milk_restricted = is_window_active(milk_until, now)
    meat_restricted = is_window_active(meat_until, now)
    if milk_restricted and meat_restricted:
        return ComplianceStatus.FULLY_RESTRICTED
    if milk_restricted:
        return ComplianceStatus.MILK_RESTRICTED
    if meat_restricted:
        return ComplianceStatus.MEAT_RESTRICTED
    return ComplianceStatus.SAFE


def is_compliant(milk_until: datetime | None, meat_until: datetime | None, now: datetime) -> bool:
    return evaluate_compliance(milk_until, meat_until, now).is_safe
