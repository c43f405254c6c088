from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.animals import (
    create_animal,
    get_animal,
    get_animal_compliance,
    list_animals,
    update_animal,
)
from src.application.use_cases.treatments import list_treatments
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_now, get_uow
from src.interfaces.http.schemas.animals import (
    AnimalComplianceResponse,
    AnimalCreate,
    AnimalResponse,
    AnimalsListResponse,
    AnimalUpdate,
)
from src.interfaces.http.schemas.treatments import TreatmentResponse, TreatmentsListResponse

router = APIRouter(prefix="/animals", tags=["animals"])


@router.get("/", response_model=AnimalsListResponse)
async def list_animals_endpoint(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    farm_id: UUID | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    q: str | None = Query(None, description="Text search across tag, name, species, breed"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalsListResponse:
    result = await list_animals.execute(
        uow,
        context.role,
        context.user_id,
        limit=limit,
        offset=offset,
        farm_id=farm_id,
        status=status_filter,
        search=q,
    )
    return AnimalsListResponse(
        items=[AnimalResponse.model_validate(item) for item in result.items],
        total=result.total,
        limit=limit,
        offset=offset,
    )


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal_endpoint(
    payload: AnimalCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await create_animal.execute(
        uow,
        context.role,
        context.user_id,
        create_animal.CreateAnimalInput(**payload.model_dump()),
    )
    return AnimalResponse.model_validate(animal)


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await get_animal.execute(uow, context.role, context.user_id, animal_id)
    return AnimalResponse.model_validate(animal)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal_endpoint(
    animal_id: UUID,
    payload: AnimalUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> AnimalResponse:
    animal = await update_animal.execute(
        uow,
        context.role,
        context.user_id,
        animal_id,
        update_animal.UpdateAnimalInput(**payload.model_dump()),
    )
    return AnimalResponse.model_validate(animal)


@router.get("/{animal_id}/compliance", response_model=AnimalComplianceResponse)
async def get_animal_compliance_endpoint(
    animal_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> AnimalComplianceResponse:
    result = await get_animal_compliance.execute(
        uow, context.role, context.user_id, animal_id, now=now
    )
    return AnimalComplianceResponse.model_validate(result)


@router.get("/{animal_id}/treatments", response_model=TreatmentsListResponse)
async def list_animal_treatments(
    animal_id: UUID,
    limit: int = Query(50, ge=1, le=100),
    offset: int = Query(0, ge=0),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> TreatmentsListResponse:
    result = await list_treatments.execute(
        uow, context.role, context.user_id, animal_id, limit=limit, offset=offset
    )
    return TreatmentsListResponse(
        items=[TreatmentResponse.model_validate(item) for item in result.items],
        total=result.total,
        limit=result.limit,
        offset=result.offset,
    )
