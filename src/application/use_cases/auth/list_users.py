from __future__ import annotations

from dataclasses import dataclass

from src.application.errors import PermissionDenied, ValidationError
from src.application.interfaces.unit_of_work import UnitOfWork
from src.domain.models.user import User
from src.domain.value_objects.role import Role


@dataclass(slots=True)
class ListUsersResult:
    items: list[User]
    total: int


async def execute(
    uow: UnitOfWork,
    role: Role,
    *,
    role_filter: Role | None = None,
    search: str | None = None,
    limit: int = 50,
    offset: int = 0,
) -> ListUsersResult:
    if role is not Role.ADMIN:
        raise PermissionDenied("Only admins can list users")
    if limit <= 0 or limit > 200:
        raise ValidationError("limit must be between 1 and 200")
    items, total = await uow.users.list(
        role=role_filter, search=search, limit=limit, offset=offset
    )
    return ListUsersResult(items=items, total=total)
