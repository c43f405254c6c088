from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.application.use_cases.farms import create_farm, list_farms
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.farms import FarmCreate, FarmResponse

router = APIRouter(prefix="/farms", tags=["farms"])


@router.get("/", response_model=list[FarmResponse])
async def list_farms_endpoint(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[FarmResponse]:
    farms = await list_farms.execute(uow, context.role, context.user_id)
    return [FarmResponse.model_validate(farm) for farm in farms]


@router.post("/", response_model=FarmResponse, status_code=status.HTTP_201_CREATED)
async def create_farm_endpoint(
    payload: FarmCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> FarmResponse:
    farm = await create_farm.execute(
        uow,
        context.role,
        context.user_id,
        create_farm.CreateFarmInput(
            farm_name=payload.farm_name,
            address=payload.address,
            registration_number=payload.registration_number,
        ),
    )
    return FarmResponse.model_validate(farm)
