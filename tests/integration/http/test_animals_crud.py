from __future__ import annotations


async def test_animals_crud_flow(client, headers, farm_with_animal):
    farmer_headers = headers["farmer"]
    farm_id = farm_with_animal["farm"]["id"]
    created = farm_with_animal["animal"]
    animal_id = created["id"]
    assert created["status"] == "active"
    assert created["version"] == 1
    assert created["withdrawal_until_milk"] is None

    list_response = await client.get("/api/v1/animals/", headers=farmer_headers)
    assert list_response.status_code == 200
    body = list_response.json()
    assert body["total"] == 1
    assert body["items"][0]["id"] == animal_id

    update_response = await client.put(
        f"/api/v1/animals/{animal_id}",
        json={"version": created["version"], "name": "Daisy Prime", "breed": "Holstein"},
        headers=farmer_headers,
    )
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["name"] == "Daisy Prime"
    assert updated["version"] == 2

    stale_update = await client.put(
        f"/api/v1/animals/{animal_id}",
        json={"version": created["version"], "name": "Stale"},
        headers=farmer_headers,
    )
    assert stale_update.status_code == 409

    duplicate = await client.post(
        "/api/v1/animals/",
        json={"farm_id": farm_id, "species": "cattle", "tag": "COW-1"},
        headers=farmer_headers,
    )
    assert duplicate.status_code == 409

    second = await client.post(
        "/api/v1/animals/",
        json={"farm_id": farm_id, "species": "goat", "tag": "GOAT-7"},
        headers=farmer_headers,
    )
    assert second.status_code == 201

    search = await client.get("/api/v1/animals/", params={"q": "goat"}, headers=farmer_headers)
    assert search.status_code == 200
    assert [item["tag"] for item in search.json()["items"]] == ["GOAT-7"]


async def test_animals_are_scoped_to_the_owning_farmer(client, headers, farm_with_animal):
    animal_id = farm_with_animal["animal"]["id"]
    farm_id = farm_with_animal["farm"]["id"]

    other_list = await client.get("/api/v1/animals/", headers=headers["other_farmer"])
    assert other_list.status_code == 200
    assert other_list.json()["total"] == 0

    other_get = await client.get(f"/api/v1/animals/{animal_id}", headers=headers["other_farmer"])
    assert other_get.status_code == 404

    other_create = await client.post(
        "/api/v1/animals/",
        json={"farm_id": farm_id, "species": "cattle", "tag": "INTRUDER"},
        headers=headers["other_farmer"],
    )
    assert other_create.status_code == 403

    vet_get = await client.get(f"/api/v1/animals/{animal_id}", headers=headers["vet"])
    assert vet_get.status_code == 200

    vet_create = await client.post(
        "/api/v1/animals/",
        json={"farm_id": farm_id, "species": "cattle", "tag": "VET-1"},
        headers=headers["vet"],
    )
    assert vet_create.status_code == 403


async def test_farms_listing_by_role(client, headers, farm_with_animal):
    mine = await client.get("/api/v1/farms/", headers=headers["farmer"])
    assert [farm["farm_name"] for farm in mine.json()] == ["Green Acres"]

    others = await client.get("/api/v1/farms/", headers=headers["other_farmer"])
    assert others.json() == []

    everything = await client.get("/api/v1/farms/", headers=headers["admin"])
    assert len(everything.json()) == 1

    vet_create = await client.post(
        "/api/v1/farms/",
        json={"farm_name": "Clinic", "address": "2 Vet Street"},
        headers=headers["vet"],
    )
    assert vet_create.status_code == 403
