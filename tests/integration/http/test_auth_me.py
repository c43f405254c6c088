from __future__ import annotations


async def test_me_returns_profile(client, headers, seeded_users):
    response = await client.get("/api/v1/me", headers=headers["vet"])
    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == str(seeded_users["vet"].id)
    assert payload["email"] == "vet@example.com"
    assert payload["role"] == "veterinarian"
    assert payload["vet_license_id"] == "VET-001"
    assert payload["is_vet_verified"] is False
    assert "hashed_password" not in payload


async def test_me_requires_token(client):
    response = await client.get("/api/v1/me")
    assert response.status_code == 401
    assert response.json()["code"] == "auth_error"


async def test_me_rejects_garbage_token(client):
    response = await client.get("/api/v1/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


async def test_health_is_public(client):
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
