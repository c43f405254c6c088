from __future__ import annotations

from uuid import uuid4

import pytest
from sqlalchemy import inspect

from src.application.errors import ConflictError
from src.domain.models.compliance_alert import ComplianceAlert
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def _index_names(engine, table: str) -> set[str]:
    async with engine.connect() as conn:
        indexes = await conn.run_sync(lambda sync: inspect(sync).get_indexes(table))
    return {index["name"] for index in indexes}


@pytest.mark.asyncio
async def test_partial_indexes_created_on_sqlite(app, client):
    engine = app.state.engine
    assert "ux_compliance_alerts_active_task" in await _index_names(engine, "compliance_alerts")
    assert "idx_prescription_tasks_pending" in await _index_names(engine, "prescription_tasks")
    assert "idx_animals_withdrawal" in await _index_names(engine, "animals")


@pytest.mark.asyncio
async def test_one_active_alert_per_task(app, client):
    farm_id, task_id = uuid4(), uuid4()

    def _alert() -> ComplianceAlert:
        return ComplianceAlert.create(
            farm_id=farm_id,
            alert_type="missed_task",
            severity="low",
            description="Dose overdue",
            task_id=task_id,
        )

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        first = await uow.compliance_alerts.add(_alert())
        await uow.commit()

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        with pytest.raises(ConflictError):
            await uow.compliance_alerts.add(_alert())

    # Once resolved, the slot for that task is free again
    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        stored = await uow.compliance_alerts.get(first.id)
        stored.resolve(stored.created_at)
        await uow.compliance_alerts.update(stored)
        await uow.compliance_alerts.add(_alert())
        await uow.commit()
        assert len(await uow.compliance_alerts.list(status="active")) == 1
