#!/usr/bin/env python3
"""
Script to create an admin account.

Admins cannot sign up through the API; this is the only way to create one.

Usage:
  python scripts/create_admin.py --email admin@example.com --full-name "Ops Admin"

The password is read from --password or generated and printed once.
"""

import asyncio
import secrets
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import ConflictError
from src.config.settings import get_settings
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.auth.password import PasswordHasher
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)


async def create_admin(email: str, full_name: str, password: str | None) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    password_hasher = PasswordHasher()

    generated = password is None
    password = password or secrets.token_urlsafe(16)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            existing = await uow.users.get_by_email(email)
            if existing:
                print(f"ℹ️  User {email} already exists (ID: {existing.id}, role: {existing.role.value})")
                return
            user = User.create(
                email=email,
                hashed_password=password_hasher.hash(password),
                full_name=full_name,
                role=Role.ADMIN,
            )
            created = await uow.users.add(user)
            await uow.commit()

        print("\n✅ Admin created successfully!")
        print(f"   User ID: {created.id}")
        print(f"   Email: {created.email}")
        if generated:
            print(f"   Password: {password}")
            print("\n   ⚠️  Store this password now, it is not shown again")
    except ConflictError as exc:
        print(f"\n❌ Error creating admin: {exc.message}")
        sys.exit(1)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create an admin account")
    parser.add_argument("--email", required=True, help="Email of the admin")
    parser.add_argument("--full-name", default="Administrator", help="Display name")
    parser.add_argument("--password", help="Password (optional, generated when omitted)")

    args = parser.parse_args()
    if args.password is not None and len(args.password) < 8:
        print("❌ Error: password must be at least 8 characters")
        sys.exit(1)

    print("=" * 60)
    print("🚀 Admin Creator - FarmGuard")
    print("=" * 60)

    asyncio.run(create_admin(args.email, args.full_name, args.password))
