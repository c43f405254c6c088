from __future__ import annotations

from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

from src.domain.services.compliance_summary import (
    AnimalSnapshot,
    compliance_rate,
    summarize_compliance,
)

NOW = datetime(2024, 1, 10, tzinfo=timezone.utc)
PAST = datetime(2024, 1, 1, tzinfo=timezone.utc)
FUTURE = datetime(2024, 1, 20, tzinfo=timezone.utc)


def _snapshot(milk, meat) -> AnimalSnapshot:
    return AnimalSnapshot(
        id=uuid4(),
        farm_id=uuid4(),
        tag="T",
        name=None,
        status="active",
        withdrawal_until_milk=milk,
        withdrawal_until_meat=meat,
    )


def test_empty_herd_is_fully_compliant():
    summary = summarize_compliance([], [], NOW)
    assert summary.total_animals == 0
    assert summary.compliance_rate == 100.0
    assert summary.by_status == {
        "safe": 0,
        "milk-restricted": 0,
        "meat-restricted": 0,
        "fully-restricted": 0,
    }


def test_counts_by_status_and_alert_severity():
    animals = [
        _snapshot(None, None),
        _snapshot(PAST, PAST),
        _snapshot(FUTURE, PAST),
        _snapshot(PAST, FUTURE),
        _snapshot(FUTURE, FUTURE),
        # window ending exactly now still counts as restricted
        _snapshot(NOW, PAST),
    ]
    alerts = [SimpleNamespace(severity="high"), SimpleNamespace(severity="low")]

    summary = summarize_compliance(animals, alerts, NOW)

    assert summary.total_animals == 6
    assert summary.compliant_animals == 2
    assert summary.restricted_animals == 4
    assert summary.by_status["milk-restricted"] == 2
    assert summary.by_status["meat-restricted"] == 1
    assert summary.by_status["fully-restricted"] == 1
    assert summary.active_alerts == 2
    assert summary.alerts_by_severity == {"low": 1, "medium": 0, "high": 1}
    assert summary.compliance_rate == 33.33


def test_compliance_rate_rounds_to_two_decimals():
    assert compliance_rate(1, 3) == 33.33
    assert compliance_rate(0, 0) == 100.0
    assert compliance_rate(5, 5) == 100.0
