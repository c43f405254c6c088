from __future__ import annotations

import os
import sys
from collections.abc import AsyncIterator
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///default.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from src.config.settings import Settings
from src.domain.models.medication import Medication
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.db.base import Base
from src.infrastructure.db.orm import (  # noqa: F401
    animal,
    compliance_alert,
    consultation_request,
    farm,
    medication,
    problem_report,
    task,
    testing_report,
    treatment,
    user,
)
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.interfaces.http.deps import get_now
from src.interfaces.http.main import create_app

DEFAULT_PASSWORD = "secret-pass"
FIXED_NOW = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)


class Clock:
    """Mutable clock injected through the ``get_now`` dependency."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def test_settings(tmp_path) -> Settings:
    db_path = tmp_path / "test.db"
    return Settings.model_validate(
        {
            "database_url": f"sqlite+aiosqlite:///{db_path}",
            "jwt_secret_key": "test-secret",
            "log_level": "INFO",
            "environment": "test",
        }
    )


@pytest.fixture()
def clock() -> Clock:
    return Clock(FIXED_NOW)


@pytest.fixture()
def app(test_settings: Settings, clock: Clock):
    app = create_app(settings=test_settings)
    app.dependency_overrides[get_now] = clock
    return app


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        engine = app.state.engine
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield client


async def create_user(app, email: str, role: Role, **extra: Any) -> User:
    hasher = app.state.password_hasher
    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        created = await uow.users.add(
            User.create(
                email=email,
                hashed_password=hasher.hash(DEFAULT_PASSWORD),
                full_name=email.split("@")[0].title(),
                role=role,
                **extra,
            )
        )
        await uow.commit()
    return created


async def login(client: AsyncClient, email: str) -> dict[str, str]:
    response = await client.post(
        "/api/v1/auth/login", json={"email": email, "password": DEFAULT_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
async def seeded_users(app, client) -> dict[str, User]:
    return {
        "admin": await create_user(app, "admin@example.com", Role.ADMIN),
        "farmer": await create_user(app, "farmer@example.com", Role.FARMER),
        "other_farmer": await create_user(app, "neighbour@example.com", Role.FARMER),
        "vet": await create_user(
            app, "vet@example.com", Role.VETERINARIAN, vet_license_id="VET-001"
        ),
        "lab": await create_user(app, "lab@example.com", Role.LAB),
    }


@pytest.fixture()
async def headers(client, seeded_users) -> dict[str, dict[str, str]]:
    return {name: await login(client, user.email) for name, user in seeded_users.items()}


@pytest.fixture()
async def medication_48h_5d(app, client) -> Medication:
    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        created = await uow.medications.add(
            Medication.create(
                name="Oxytetracycline",
                active_ingredient="oxytetracycline",
                withdrawal_period_milk_hours=48,
                withdrawal_period_meat_days=5,
            )
        )
        await uow.commit()
    return created


@pytest.fixture()
async def farm_with_animal(client, headers) -> dict[str, Any]:
    farm_resp = await client.post(
        "/api/v1/farms/",
        json={"farm_name": "Green Acres", "address": "1 Farm Road"},
        headers=headers["farmer"],
    )
    assert farm_resp.status_code == 201, farm_resp.text
    farm_data = farm_resp.json()
    animal_resp = await client.post(
        "/api/v1/animals/",
        json={"farm_id": farm_data["id"], "species": "cattle", "tag": "COW-1", "name": "Daisy"},
        headers=headers["farmer"],
    )
    assert animal_resp.status_code == 201, animal_resp.text
    return {"farm": farm_data, "animal": animal_resp.json()}


@pytest.fixture()
def login_as(app, client):
    """Create an extra account with ``role`` and return its auth headers."""

    async def _login_as(email: str, role: Role, **extra: Any) -> dict[str, str]:
        await create_user(app, email, role, **extra)
        return await login(client, email)

    return _login_as
