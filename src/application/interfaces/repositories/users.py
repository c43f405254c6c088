from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.user import User
from src.domain.value_objects.role import Role


class UserRepository(Protocol):
    async def add(self, user: User) -> User: ...

    async def get(self, user_id: UUID) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def list(
        self,
        *,
        role: Role | None = None,
        search: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[User], int]: ...

    async def count_by_role(self) -> dict[str, int]: ...

    async def set_vet_verified(self, user_id: UUID, verified: bool) -> User | None: ...

    async def increment_reward_points(self, user_id: UUID, points: int) -> int: ...
