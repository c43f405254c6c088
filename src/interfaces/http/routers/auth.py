from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.auth import (
    get_me,
    list_users,
    login_user,
    register_account,
    verify_vet,
)
from src.domain.value_objects.role import Role
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.auth.jwt_service import JWTService
from src.infrastructure.auth.password import PasswordHasher
from src.interfaces.http.deps import (
    get_auth_context,
    get_jwt_service,
    get_password_hasher,
    get_uow,
)
from src.interfaces.http.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
    UsersListResponse,
    VerifyVetRequest,
)

router = APIRouter(prefix="", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/auth/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserResponse:
    result = await register_account.execute(
        uow=uow,
        payload=register_account.RegisterAccountInput(
            email=payload.email,
            password=payload.password,
            full_name=payload.full_name,
            role=payload.role,
            phone=payload.phone,
            vet_license_id=payload.vet_license_id,
        ),
        password_hasher=password_hasher,
    )
    logger.info("Registered %s account %s", result.user.role.value, result.user.id)
    return UserResponse.model_validate(result.user)


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    payload: LoginRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> LoginResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email=payload.email, password=payload.password),
        password_hasher=password_hasher,
        jwt_service=jwt_service,
    )
    return LoginResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        user_id=result.user_id,
        email=result.email,
        role=result.role,
        expires_at=result.expires_at,
    )


@router.get("/me", response_model=UserResponse)
async def read_me(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> UserResponse:
    user = await get_me.execute(uow, context.user_id)
    return UserResponse.model_validate(user)


@router.get("/users", response_model=UsersListResponse)
async def list_users_endpoint(
    role: Role | None = Query(None),
    search: str | None = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> UsersListResponse:
    result = await list_users.execute(
        uow, context.role, role_filter=role, search=search, limit=limit, offset=offset
    )
    return UsersListResponse(
        items=[UserResponse.model_validate(user) for user in result.items],
        total=result.total,
        limit=limit,
        offset=offset,
    )


@router.patch("/users/{user_id}/verification", response_model=UserResponse)
async def verify_vet_endpoint(
    user_id: UUID,
    payload: VerifyVetRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> UserResponse:
    user = await verify_vet.execute(uow, context.role, user_id, verified=payload.verified)
    return UserResponse.model_validate(user)
