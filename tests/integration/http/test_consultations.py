from __future__ import annotations

from src.domain.value_objects.role import Role


async def test_consultation_request_lifecycle(client, headers, farm_with_animal, login_as):
    animal_id = farm_with_animal["animal"]["id"]
    created = await client.post(
        "/api/v1/consultations/",
        json={"symptoms": "Off feed for two days", "priority": "high", "animal_id": animal_id},
        headers=headers["farmer"],
    )
    assert created.status_code == 201, created.text
    request_id = created.json()["id"]
    assert created.json()["status"] == "pending"
    assert created.json()["vet_id"] is None

    queue = await client.get(
        "/api/v1/consultations/", params={"status": "pending"}, headers=headers["vet"]
    )
    assert [item["id"] for item in queue.json()] == [request_id]

    early_feedback = await client.post(
        f"/api/v1/consultations/{request_id}/feedback",
        json={"rating": 5},
        headers=headers["farmer"],
    )
    assert early_feedback.status_code == 409

    accepted = await client.post(
        f"/api/v1/consultations/{request_id}/accept", headers=headers["vet"]
    )
    assert accepted.status_code == 200
    assert accepted.json()["status"] == "accepted"

    twice = await client.post(f"/api/v1/consultations/{request_id}/accept", headers=headers["vet"])
    assert twice.status_code == 409

    other_vet = await login_as("vet2@example.com", Role.VETERINARIAN, vet_license_id="VET-002")
    hijack = await client.patch(
        f"/api/v1/consultations/{request_id}/status",
        json={"status": "completed"},
        headers=other_vet,
    )
    assert hijack.status_code == 403

    no_time = await client.patch(
        f"/api/v1/consultations/{request_id}/status",
        json={"status": "scheduled"},
        headers=headers["vet"],
    )
    assert no_time.status_code == 422

    scheduled = await client.patch(
        f"/api/v1/consultations/{request_id}/status",
        json={"status": "scheduled", "scheduled_at": "2024-01-02T10:00:00Z"},
        headers=headers["vet"],
    )
    assert scheduled.status_code == 200
    assert scheduled.json()["status"] == "scheduled"

    farmer_complete = await client.patch(
        f"/api/v1/consultations/{request_id}/status",
        json={"status": "completed"},
        headers=headers["farmer"],
    )
    assert farmer_complete.status_code == 403

    completed = await client.patch(
        f"/api/v1/consultations/{request_id}/status",
        json={"status": "completed", "notes": "Treated for ketosis"},
        headers=headers["vet"],
    )
    assert completed.status_code == 200

    reopened = await client.patch(
        f"/api/v1/consultations/{request_id}/status",
        json={"status": "accepted"},
        headers=headers["vet"],
    )
    assert reopened.status_code == 409

    bad_rating = await client.post(
        f"/api/v1/consultations/{request_id}/feedback",
        json={"rating": 6},
        headers=headers["farmer"],
    )
    assert bad_rating.status_code == 422

    feedback = await client.post(
        f"/api/v1/consultations/{request_id}/feedback",
        json={"rating": 4, "feedback": "Quick response"},
        headers=headers["farmer"],
    )
    assert feedback.status_code == 200
    assert feedback.json()["rating"] == 4

    mine = await client.get("/api/v1/consultations/", headers=headers["vet"])
    assert [item["id"] for item in mine.json()] == [request_id]
    assert (await client.get("/api/v1/consultations/", headers=other_vet)).json() == []


async def test_vet_schedules_visit_and_farmer_cancels(client, headers, seeded_users):
    past = await client.post(
        "/api/v1/consultations/visits",
        json={
            "farmer_id": str(seeded_users["farmer"].id),
            "scheduled_at": "2023-12-31T09:00:00Z",
            "reason": "Herd check",
        },
        headers=headers["vet"],
    )
    assert past.status_code == 422

    visit = await client.post(
        "/api/v1/consultations/visits",
        json={
            "farmer_id": str(seeded_users["farmer"].id),
            "scheduled_at": "2024-01-05T09:00:00Z",
            "reason": "Herd check",
            "consultation_type": "visit",
        },
        headers=headers["vet"],
    )
    assert visit.status_code == 201, visit.text
    body = visit.json()
    assert body["status"] == "scheduled"
    assert body["vet_id"] == str(seeded_users["vet"].id)

    farmer_view = await client.get("/api/v1/consultations/", headers=headers["farmer"])
    assert [item["id"] for item in farmer_view.json()] == [body["id"]]

    cancelled = await client.patch(
        f"/api/v1/consultations/{body['id']}/status",
        json={"status": "cancelled"},
        headers=headers["farmer"],
    )
    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "cancelled"

    to_a_vet = await client.post(
        "/api/v1/consultations/visits",
        json={
            "farmer_id": str(seeded_users["lab"].id),
            "scheduled_at": "2024-01-05T09:00:00Z",
            "reason": "Herd check",
        },
        headers=headers["vet"],
    )
    assert to_a_vet.status_code == 404


async def test_problem_report_flow(client, headers, farm_with_animal):
    created = await client.post(
        "/api/v1/problem-reports/",
        json={
            "problem_type": "disease",
            "symptoms": "Coughing",
            "severity": "high",
            "animal_id": farm_with_animal["animal"]["id"],
        },
        headers=headers["farmer"],
    )
    assert created.status_code == 201
    report_id = created.json()["id"]

    vet_list = await client.get(
        "/api/v1/problem-reports/", params={"status": "pending"}, headers=headers["vet"]
    )
    assert [item["id"] for item in vet_list.json()] == [report_id]

    assert (
        await client.get("/api/v1/problem-reports/", headers=headers["other_farmer"])
    ).json() == []

    responded = await client.post(
        f"/api/v1/problem-reports/{report_id}/respond",
        json={"response": "Isolate and monitor temperature"},
        headers=headers["vet"],
    )
    assert responded.status_code == 200
    assert responded.json()["status"] == "responded"
    assert responded.json()["vet_response"] == "Isolate and monitor temperature"

    again = await client.post(
        f"/api/v1/problem-reports/{report_id}/respond",
        json={"response": "Second opinion"},
        headers=headers["vet"],
    )
    assert again.status_code == 409

    closed = await client.post(
        f"/api/v1/problem-reports/{report_id}/close", headers=headers["farmer"]
    )
    assert closed.status_code == 200
    assert closed.json()["status"] == "closed"
