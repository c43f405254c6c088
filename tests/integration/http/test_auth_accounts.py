from __future__ import annotations


async def test_register_and_login_new_farmer(client):
    register_payload = {
        "email": "New.Farmer@example.com",
        "password": "farmerpass",
        "full_name": "New Farmer",
        "role": "farmer",
        "phone": "+1 555 0100",
    }
    register_response = await client.post("/api/v1/auth/register", json=register_payload)
    assert register_response.status_code == 201
    created = register_response.json()
    assert created["email"] == "new.farmer@example.com"
    assert created["role"] == "farmer"
    assert created["reward_points"] == 0

    login_response = await client.post(
        "/api/v1/auth/login",
        json={"email": "new.farmer@example.com", "password": "farmerpass"},
    )
    assert login_response.status_code == 200
    data = login_response.json()
    assert data["token_type"] == "bearer"
    assert data["role"] == "farmer"

    me = await client.get(
        "/api/v1/me", headers={"Authorization": f"Bearer {data['access_token']}"}
    )
    assert me.status_code == 200
    assert me.json()["id"] == created["id"]


async def test_register_rejects_admin_and_unlicensed_vet(client):
    admin = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "sneaky@example.com",
            "password": "adminpass",
            "full_name": "Sneaky",
            "role": "admin",
        },
    )
    assert admin.status_code == 422

    vet = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "vet2@example.com",
            "password": "vetpass123",
            "full_name": "Vet Two",
            "role": "veterinarian",
        },
    )
    assert vet.status_code == 422


async def test_register_duplicate_email_conflicts(client, seeded_users):
    response = await client.post(
        "/api/v1/auth/register",
        json={
            "email": "farmer@example.com",
            "password": "anotherpass",
            "full_name": "Copy Cat",
            "role": "farmer",
        },
    )
    assert response.status_code == 409


async def test_login_with_wrong_password(client, seeded_users):
    response = await client.post(
        "/api/v1/auth/login", json={"email": "farmer@example.com", "password": "wrong-pass"}
    )
    assert response.status_code == 401


async def test_admin_lists_users_and_verifies_vet(client, headers, seeded_users):
    listing = await client.get(
        "/api/v1/users", params={"role": "farmer"}, headers=headers["admin"]
    )
    assert listing.status_code == 200
    body = listing.json()
    assert body["total"] == 2
    assert {item["email"] for item in body["items"]} == {
        "farmer@example.com",
        "neighbour@example.com",
    }

    vet_id = seeded_users["vet"].id
    verify = await client.patch(
        f"/api/v1/users/{vet_id}/verification",
        json={"verified": True},
        headers=headers["admin"],
    )
    assert verify.status_code == 200
    assert verify.json()["is_vet_verified"] is True

    not_a_vet = await client.patch(
        f"/api/v1/users/{seeded_users['farmer'].id}/verification",
        json={"verified": True},
        headers=headers["admin"],
    )
    assert not_a_vet.status_code == 422

    forbidden = await client.get("/api/v1/users", headers=headers["vet"])
    assert forbidden.status_code == 403
