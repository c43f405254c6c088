from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from src.application.use_cases.medications import get_medication, list_medications
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_uow
from src.interfaces.http.schemas.medications import MedicationResponse

router = APIRouter(prefix="/medications", tags=["medications"])


@router.get("/", response_model=list[MedicationResponse])
async def list_medications_endpoint(
    q: str | None = Query(None, description="Search by name or active ingredient"),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[MedicationResponse]:
    medications = await list_medications.execute(uow, search=q)
    return [MedicationResponse.model_validate(item) for item in medications]


@router.get("/{medication_id}", response_model=MedicationResponse)
async def get_medication_endpoint(
    medication_id: UUID,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> MedicationResponse:
    medication = await get_medication.execute(uow, medication_id)
    return MedicationResponse.model_validate(medication)
