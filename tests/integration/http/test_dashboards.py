from __future__ import annotations


async def _treat(client, headers, animal_id, medication_id):
    response = await client.post(
        "/api/v1/treatments/",
        json={
            "animal_id": animal_id,
            "medication_id": str(medication_id),
            "diagnosis": "Pneumonia",
            "dosage": "20 ml",
        },
        headers=headers["vet"],
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_farmer_dashboard(client, headers, farm_with_animal, medication_48h_5d):
    await _treat(client, headers, farm_with_animal["animal"]["id"], medication_48h_5d.id)

    response = await client.get("/api/v1/dashboard/farmer", headers=headers["farmer"])
    assert response.status_code == 200
    body = response.json()
    assert body["summary"]["total_animals"] == 1
    assert body["summary"]["restricted_animals"] == 1
    assert [task["scheduled_date"] for task in body["todays_tasks"]] == ["2024-01-01"]
    assert body["overdue_tasks"] == 0
    assert body["active_alerts"] == []
    assert body["reward_points"] == 0

    wrong_role = await client.get("/api/v1/dashboard/farmer", headers=headers["vet"])
    assert wrong_role.status_code == 403


async def test_vet_dashboard_lists_high_risk_animals_and_queues(
    client, headers, farm_with_animal, medication_48h_5d
):
    animal_id = farm_with_animal["animal"]["id"]
    await _treat(client, headers, animal_id, medication_48h_5d.id)
    await client.post(
        "/api/v1/consultations/",
        json={"symptoms": "Limping", "animal_id": animal_id},
        headers=headers["farmer"],
    )
    await client.post(
        "/api/v1/problem-reports/",
        json={"problem_type": "injury", "symptoms": "Swollen leg", "animal_id": animal_id},
        headers=headers["farmer"],
    )

    response = await client.get("/api/v1/dashboard/vet", headers=headers["vet"])
    assert response.status_code == 200
    body = response.json()
    assert [item["animal_id"] for item in body["high_risk_animals"]] == [animal_id]
    assert body["high_risk_animals"][0]["status"] == "fully-restricted"
    assert len(body["pending_consultations"]) == 1
    assert body["my_consultations"] == []
    assert len(body["pending_problem_reports"]) == 1


async def test_admin_dashboard(client, headers, farm_with_animal):
    response = await client.get("/api/v1/dashboard/admin", headers=headers["admin"])
    assert response.status_code == 200
    body = response.json()
    assert body["users_by_role"] == {"farmer": 2, "veterinarian": 1, "admin": 1, "lab": 1}
    assert body["total_users"] == 5
    assert body["total_farms"] == 1
    assert body["summary"]["total_animals"] == 1
    assert body["summary"]["compliance_rate"] == 100.0

    forbidden = await client.get("/api/v1/dashboard/admin", headers=headers["farmer"])
    assert forbidden.status_code == 403


async def test_compliance_report_json_and_pdf(
    client, headers, farm_with_animal, medication_48h_5d
):
    await _treat(client, headers, farm_with_animal["animal"]["id"], medication_48h_5d.id)

    as_json = await client.post(
        "/api/v1/reports/compliance", json={"format": "json"}, headers=headers["admin"]
    )
    assert as_json.status_code == 200
    report = as_json.json()
    assert report["format"] == "json"
    assert report["data"]["overall"]["restricted_animals"] == 1
    assert report["data"]["farms"][0]["farm_name"] == "Green Acres"
    assert report["data"]["restricted_animals"][0]["tag"] == "COW-1"

    as_pdf = await client.post(
        "/api/v1/reports/compliance", json={"format": "pdf"}, headers=headers["vet"]
    )
    assert as_pdf.status_code == 200
    pdf = as_pdf.json()
    assert pdf["file_name"].endswith(".pdf")
    assert pdf["content"]

    farmer = await client.post(
        "/api/v1/reports/compliance", json={"format": "json"}, headers=headers["farmer"]
    )
    assert farmer.status_code == 403
