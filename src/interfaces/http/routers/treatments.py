from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, status

from src.application.use_cases.treatments import record_treatment
from src.domain.services.task_schedule import TaskSchedulePolicy
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_now, get_task_policy, get_uow
from src.interfaces.http.schemas.animals import AnimalResponse
from src.interfaces.http.schemas.tasks import TaskResponse
from src.interfaces.http.schemas.treatments import (
    RecordTreatmentResponse,
    TreatmentCreate,
    TreatmentResponse,
)

router = APIRouter(prefix="/treatments", tags=["treatments"])


@router.post("/", response_model=RecordTreatmentResponse, status_code=status.HTTP_201_CREATED)
async def record_treatment_endpoint(
    payload: TreatmentCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    task_policy: TaskSchedulePolicy = Depends(get_task_policy),
    now: datetime = Depends(get_now),
) -> RecordTreatmentResponse:
    schedule = None
    if payload.schedule is not None:
        schedule = record_treatment.TaskPolicyOverride(**payload.schedule.model_dump())
    result = await record_treatment.execute(
        uow,
        context.role,
        context.user_id,
        record_treatment.RecordTreatmentInput(
            animal_id=payload.animal_id,
            medication_id=payload.medication_id,
            diagnosis=payload.diagnosis,
            dosage=payload.dosage,
            route_of_administration=payload.route_of_administration,
            notes=payload.notes,
            treatment_start_date=payload.treatment_start_date,
            treatment_end_date=payload.treatment_end_date,
            animal_version=payload.animal_version,
            schedule=schedule,
        ),
        task_policy=task_policy,
        now=now,
    )
    return RecordTreatmentResponse(
        treatment=TreatmentResponse.model_validate(result.treatment),
        animal=AnimalResponse.model_validate(result.animal),
        tasks=[TaskResponse.model_validate(task) for task in result.tasks],
    )
