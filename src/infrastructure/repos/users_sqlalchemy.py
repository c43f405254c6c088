from __future__ import annotations

from uuid import UUID

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.errors import ConflictError, DependencyError, NotFound
from src.application.interfaces.repositories.users import UserRepository
from src.domain.models.user import User
from src.domain.value_objects.role import Role
from src.infrastructure.db.orm.user import UserORM
from src.utils.datetime_tz import ensure_utc


class UsersSQLAlchemyRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _to_domain(self, orm: UserORM) -> User:
        return User(
            id=orm.id,
            email=orm.email,
            hashed_password=orm.hashed_password,
            full_name=orm.full_name,
            role=orm.role,
            phone=orm.phone,
            vet_license_id=orm.vet_license_id,
            is_vet_verified=orm.is_vet_verified,
            reward_points=orm.reward_points,
            is_active=orm.is_active,
            created_at=ensure_utc(orm.created_at),
            updated_at=ensure_utc(orm.updated_at),
        )

    async def add(self, user: User) -> User:
        orm = UserORM(
            id=user.id,
            email=user.email,
            hashed_password=user.hashed_password,
            full_name=user.full_name,
            role=user.role,
            phone=user.phone,
            vet_license_id=user.vet_license_id,
            is_vet_verified=user.is_vet_verified,
            reward_points=user.reward_points,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
        self.session.add(orm)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise ConflictError("Email already registered") from exc
        return self._to_domain(orm)

    async def get(self, user_id: UUID) -> User | None:
        stmt = select(UserORM).where(UserORM.id == user_id)
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def get_by_email(self, email: str) -> User | None:
        stmt = select(UserORM).where(UserORM.email == email.lower())
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def list(
        self,
        *,
        role: Role | None = None,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[User], int]:
        stmt = select(UserORM)
        count_stmt = select(func.count(UserORM.id))
        if role is not None:
            stmt = stmt.where(UserORM.role == role)
            count_stmt = count_stmt.where(UserORM.role == role)
        if search:
            pattern = f"%{search.lower()}%"
            condition = or_(
                func.lower(UserORM.email).like(pattern),
                func.lower(UserORM.full_name).like(pattern),
            )
            stmt = stmt.where(condition)
            count_stmt = count_stmt.where(condition)

        stmt = stmt.order_by(UserORM.created_at.desc()).offset(offset).limit(limit)
        result = await self.session.execute(stmt)
        total = (await self.session.execute(count_stmt)).scalar() or 0
        return [self._to_domain(row) for row in result.scalars().all()], total

    async def count_by_role(self) -> dict[str, int]:
        stmt = select(UserORM.role, func.count(UserORM.id)).group_by(UserORM.role)
        result = await self.session.execute(stmt)
        counts = {role.value: 0 for role in Role}
        for role, count in result.all():
            counts[Role(role).value] = count
        return counts

    async def set_vet_verified(self, user_id: UUID, verified: bool) -> User | None:
        stmt = (
            update(UserORM)
            .where(UserORM.id == user_id)
            .values(is_vet_verified=verified)
            .returning(UserORM)
        )
        result = await self.session.execute(stmt)
        orm = result.scalar_one_or_none()
        return self._to_domain(orm) if orm else None

    async def increment_reward_points(self, user_id: UUID, points: int) -> int:
        stmt = (
            update(UserORM)
            .where(UserORM.id == user_id)
            .values(reward_points=UserORM.reward_points + points)
            .returning(UserORM.reward_points)
        )
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise DependencyError("Failed to credit reward points") from exc
        balance = result.scalar_one_or_none()
        if balance is None:
            raise NotFound("User not found")
        return balance
