#!/usr/bin/env python3
"""
Load the medication catalog.

Reads a JSON file with a list of objects shaped like
  {"name": "...", "active_ingredient": "...", "withdrawal_period_milk_hours": 72,
   "withdrawal_period_meat_days": 28, "dosage_instructions": "..."}
and inserts every medication whose name is not registered yet.
Without --file a small built-in catalog is loaded.

Usage:
  python scripts/seed_medications.py [--file medications.json]
"""

import asyncio
import json
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config.settings import get_settings
from src.domain.models.medication import Medication
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)

DEFAULT_CATALOG = [
    {
        "name": "Oxytetracycline 20% LA",
        "active_ingredient": "oxytetracycline",
        "withdrawal_period_milk_hours": 168,
        "withdrawal_period_meat_days": 28,
        "dosage_instructions": "1 ml per 10 kg body weight, deep IM",
    },
    {
        "name": "Penicillin G Procaine",
        "active_ingredient": "benzylpenicillin procaine",
        "withdrawal_period_milk_hours": 72,
        "withdrawal_period_meat_days": 10,
        "dosage_instructions": "1 ml per 25 kg body weight, IM once daily",
    },
    {
        "name": "Meloxicam 20 mg/ml",
        "active_ingredient": "meloxicam",
        "withdrawal_period_milk_hours": 120,
        "withdrawal_period_meat_days": 15,
        "dosage_instructions": "2.5 ml per 100 kg body weight, SC or IV single dose",
    },
    {
        "name": "Ceftiofur 50 mg/ml",
        "active_ingredient": "ceftiofur hydrochloride",
        "withdrawal_period_milk_hours": 0,
        "withdrawal_period_meat_days": 8,
        "dosage_instructions": "1 ml per 50 kg body weight, IM for 3 to 5 days",
    },
    {
        "name": "Ivermectin 1%",
        "active_ingredient": "ivermectin",
        "withdrawal_period_milk_hours": 0,
        "withdrawal_period_meat_days": 49,
        "dosage_instructions": "1 ml per 50 kg body weight, SC. Not for lactating dairy animals",
    },
]


async def seed(entries: list[dict]) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    created = skipped = 0
    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            for entry in entries:
                if await uow.medications.get_by_name(entry["name"]):
                    skipped += 1
                    continue
                await uow.medications.add(
                    Medication.create(
                        name=entry["name"],
                        active_ingredient=entry["active_ingredient"],
                        withdrawal_period_milk_hours=int(
                            entry.get("withdrawal_period_milk_hours", 0)
                        ),
                        withdrawal_period_meat_days=int(entry.get("withdrawal_period_meat_days", 0)),
                        dosage_instructions=entry.get("dosage_instructions"),
                    )
                )
                created += 1
            await uow.commit()
    finally:
        await engine.dispose()
    print(f"✅ {created} medications created, {skipped} already present")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Seed the medication catalog")
    parser.add_argument("--file", help="JSON file with the catalog (optional)")
    args = parser.parse_args()

    catalog = DEFAULT_CATALOG
    if args.file:
        try:
            catalog = json.loads(Path(args.file).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            print(f"❌ Error reading {args.file}: {exc}")
            sys.exit(1)

    asyncio.run(seed(catalog))
