from __future__ import annotations

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from src.domain.models.animal import Animal
from src.domain.models.medication import Medication
from src.domain.services.withdrawal import (
    compute_withdrawal_windows,
    evaluate_compliance,
    is_compliant,
)
from src.domain.value_objects.compliance_status import ComplianceStatus

TREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)
ONE_US = timedelta(microseconds=1)


def _medication(milk_hours: int, meat_days: int) -> Medication:
    return Medication.create(
        name="Test drug",
        active_ingredient="x",
        withdrawal_period_milk_hours=milk_hours,
        withdrawal_period_meat_days=meat_days,
    )


def test_windows_are_offsets_from_treatment_instant():
    windows = compute_withdrawal_windows(TREATED_AT, _medication(48, 5))
    assert windows.milk_until == datetime(2024, 1, 3, tzinfo=timezone.utc)
    assert windows.meat_until == datetime(2024, 1, 6, tzinfo=timezone.utc)


def test_naive_treatment_instant_is_read_as_utc():
    windows = compute_withdrawal_windows(datetime(2024, 1, 1), _medication(1, 0))
    assert windows.milk_until == datetime(2024, 1, 1, 1, tzinfo=timezone.utc)
    assert windows.meat_until.tzinfo is not None


@pytest.mark.parametrize(
    ("now", "expected"),
    [
        (TREATED_AT, ComplianceStatus.FULLY_RESTRICTED),
        (datetime(2024, 1, 3, tzinfo=timezone.utc), ComplianceStatus.FULLY_RESTRICTED),
        (datetime(2024, 1, 3, tzinfo=timezone.utc) + ONE_US, ComplianceStatus.MEAT_RESTRICTED),
        (datetime(2024, 1, 6, tzinfo=timezone.utc), ComplianceStatus.MEAT_RESTRICTED),
        (datetime(2024, 1, 6, tzinfo=timezone.utc) + ONE_US, ComplianceStatus.SAFE),
    ],
)
def test_classification_over_time(now, expected):
    windows = compute_withdrawal_windows(TREATED_AT, _medication(48, 5))
    assert evaluate_compliance(windows.milk_until, windows.meat_until, now) is expected


def test_milk_only_restriction():
    windows = compute_withdrawal_windows(TREATED_AT, _medication(72, 1))
    status = evaluate_compliance(
        windows.milk_until, windows.meat_until, datetime(2024, 1, 2, 12, tzinfo=timezone.utc)
    )
    assert status is ComplianceStatus.MILK_RESTRICTED


def test_animal_without_windows_is_safe():
    assert evaluate_compliance(None, None, TREATED_AT) is ComplianceStatus.SAFE
    assert is_compliant(None, None, TREATED_AT)


def test_zero_periods_restrict_only_the_treatment_instant():
    windows = compute_withdrawal_windows(TREATED_AT, _medication(0, 0))
    assert not is_compliant(windows.milk_until, windows.meat_until, TREATED_AT)
    assert is_compliant(windows.milk_until, windows.meat_until, TREATED_AT + ONE_US)


def test_apply_withdrawal_overwrites_instead_of_merging():
    animal = Animal.create(farm_id=uuid4(), species="cattle", tag="T-1")
    long = compute_withdrawal_windows(TREATED_AT, _medication(48, 5))
    animal.apply_withdrawal(long, TREATED_AT)
    assert animal.status == "withdrawal"

    later = TREATED_AT + timedelta(hours=1)
    short = compute_withdrawal_windows(later, _medication(1, 0))
    animal.apply_withdrawal(short, later)

    assert animal.withdrawal_until_milk == later + timedelta(hours=1)
    assert animal.withdrawal_until_meat == later
    assert animal.compliance_status(later + timedelta(hours=2)) is ComplianceStatus.SAFE


def test_negative_periods_are_rejected():
    with pytest.raises(ValueError):
        _medication(-1, 0)
