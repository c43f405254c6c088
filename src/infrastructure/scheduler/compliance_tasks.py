from __future__ import annotations

import asyncio
import logging
from datetime import datetime

from src.application.use_cases.compliance import run_compliance_sweep
from src.application.use_cases.compliance.run_compliance_sweep import SweepResult
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.utils.datetime_tz import utc_now

logger = logging.getLogger(__name__)


async def sweep_compliance(
    session_factory,
    *,
    grace_days: int = 0,
    now: datetime | None = None,
) -> SweepResult | None:
    """Run one compliance sweep in its own unit of work; failures are logged."""
    try:
        async with SQLAlchemyUnitOfWork(session_factory) as uow:
            return await run_compliance_sweep.execute(
                uow, now=now or utc_now(), grace_days=grace_days
            )
    except Exception as exc:
        logger.error("sweep_compliance failed: %s", exc, exc_info=True)
        return None


async def compliance_sweep_loop(
    session_factory, *, interval_minutes: int, grace_days: int = 0
) -> None:
    """Repeat the sweep every ``interval_minutes`` until cancelled."""
    logger.info("Compliance sweep scheduled every %d minutes", interval_minutes)
    while True:
        await sweep_compliance(session_factory, grace_days=grace_days)
        await asyncio.sleep(interval_minutes * 60)
