#!/usr/bin/env python3
"""
Run one compliance sweep and exit.

Meant for cron or a platform scheduler when the in-process loop is disabled
(COMPLIANCE_SWEEP_INTERVAL_MINUTES=0).

Usage:
  python scripts/run_compliance_sweep.py [--grace-days N]
"""

import asyncio
import logging
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.infrastructure.db.session import create_engine, create_session_factory
from src.infrastructure.scheduler.compliance_tasks import sweep_compliance


async def main(grace_days: int | None) -> int:
    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    try:
        result = await sweep_compliance(
            session_factory,
            grace_days=settings.missed_task_grace_days if grace_days is None else grace_days,
        )
    finally:
        await engine.dispose()
    if result is None:
        print("❌ Compliance sweep failed, see logs")
        return 1
    print(
        f"✅ released={result.animals_released} created={result.alerts_created} "
        f"escalated={result.alerts_escalated} resolved={result.alerts_resolved}"
    )
    return 0


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Run the compliance sweep once")
    parser.add_argument("--grace-days", type=int, help="Override MISSED_TASK_GRACE_DAYS")
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.grace_days)))
