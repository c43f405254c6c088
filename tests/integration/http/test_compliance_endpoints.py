from __future__ import annotations

from datetime import datetime, timezone


async def _treat(client, headers, farm_with_animal, medication):
    response = await client.post(
        "/api/v1/treatments/",
        json={
            "animal_id": farm_with_animal["animal"]["id"],
            "medication_id": str(medication.id),
            "diagnosis": "Foot rot",
            "dosage": "5 ml",
        },
        headers=headers["vet"],
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_summary_counts_restricted_animals(
    client, headers, farm_with_animal, medication_48h_5d
):
    await _treat(client, headers, farm_with_animal, medication_48h_5d)

    response = await client.get("/api/v1/compliance/summary", headers=headers["farmer"])
    assert response.status_code == 200
    summary = response.json()
    assert summary["total_animals"] == 1
    assert summary["restricted_animals"] == 1
    assert summary["by_status"]["fully-restricted"] == 1
    assert summary["compliance_rate"] == 0.0

    empty = await client.get("/api/v1/compliance/summary", headers=headers["other_farmer"])
    assert empty.json()["total_animals"] == 0
    assert empty.json()["compliance_rate"] == 100.0


async def test_sweep_releases_animals_and_raises_missed_task_alerts(
    client, headers, farm_with_animal, medication_48h_5d, clock
):
    body = await _treat(client, headers, farm_with_animal, medication_48h_5d)
    first_task = body["tasks"][0]
    done = await client.post(f"/api/v1/tasks/{first_task['id']}/complete", headers=headers["farmer"])
    assert done.status_code == 200

    clock.now = datetime(2024, 1, 7, 12, 0, tzinfo=timezone.utc)
    forbidden = await client.post("/api/v1/compliance/sweep", headers=headers["farmer"])
    assert forbidden.status_code == 403

    sweep = await client.post("/api/v1/compliance/sweep", headers=headers["admin"])
    assert sweep.status_code == 200
    assert sweep.json() == {
        "animals_released": 1,
        "alerts_created": 2,
        "alerts_escalated": 0,
        "alerts_resolved": 0,
    }

    animal = await client.get(
        f"/api/v1/animals/{farm_with_animal['animal']['id']}", headers=headers["farmer"]
    )
    assert animal.json()["status"] == "active"

    repeat = await client.post("/api/v1/compliance/sweep", headers=headers["admin"])
    assert repeat.json()["alerts_created"] == 0
    assert repeat.json()["animals_released"] == 0

    alerts = await client.get("/api/v1/compliance/alerts", headers=headers["farmer"])
    assert alerts.status_code == 200
    items = alerts.json()
    assert len(items) == 2
    assert {item["alert_type"] for item in items} == {"missed_task"}
    assert {item["severity"] for item in items} == {"high"}

    assert (
        await client.get("/api/v1/compliance/alerts", headers=headers["other_farmer"])
    ).json() == []

    # Completing a missed task lets the next sweep resolve its alert
    late_task = body["tasks"][1]
    await client.post(f"/api/v1/tasks/{late_task['id']}/complete", headers=headers["farmer"])
    resolved = await client.post("/api/v1/compliance/sweep", headers=headers["admin"])
    assert resolved.json()["alerts_resolved"] == 1
    remaining = await client.get("/api/v1/compliance/alerts", headers=headers["farmer"])
    assert len(remaining.json()) == 1


async def test_manual_alert_lifecycle(client, headers, farm_with_animal):
    animal_id = farm_with_animal["animal"]["id"]
    created = await client.post(
        "/api/v1/compliance/alerts",
        json={
            "alert_type": "residue_detected",
            "severity": "high",
            "description": "Residue found in bulk tank sample",
            "animal_id": animal_id,
        },
        headers=headers["lab"],
    )
    assert created.status_code == 201
    alert = created.json()
    assert alert["farm_id"] == farm_with_animal["farm"]["id"]
    assert alert["status"] == "active"

    farmer_create = await client.post(
        "/api/v1/compliance/alerts",
        json={
            "alert_type": "other",
            "severity": "low",
            "description": "Self report",
            "animal_id": animal_id,
        },
        headers=headers["farmer"],
    )
    assert farmer_create.status_code == 403

    stranger = await client.post(
        f"/api/v1/compliance/alerts/{alert['id']}/resolve", headers=headers["other_farmer"]
    )
    assert stranger.status_code == 404

    resolved = await client.post(
        f"/api/v1/compliance/alerts/{alert['id']}/resolve", headers=headers["farmer"]
    )
    assert resolved.status_code == 200
    assert resolved.json()["status"] == "resolved"
    assert resolved.json()["resolved_at"] is not None

    again = await client.post(
        f"/api/v1/compliance/alerts/{alert['id']}/resolve", headers=headers["farmer"]
    )
    assert again.status_code == 409

    history = await client.get(
        "/api/v1/compliance/alerts", params={"status": "resolved"}, headers=headers["admin"]
    )
    assert [item["id"] for item in history.json()] == [alert["id"]]
