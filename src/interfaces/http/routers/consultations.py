from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.consultations import (
    accept_consultation,
    add_feedback,
    create_consultation,
    list_consultations,
    schedule_visit,
    update_consultation_status,
)
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_now, get_uow
from src.interfaces.http.schemas.consultations import (
    ConsultationCreate,
    ConsultationFeedback,
    ConsultationResponse,
    ConsultationStatusUpdate,
    ScheduleVisitRequest,
)

router = APIRouter(prefix="/consultations", tags=["consultations"])


@router.get("/", response_model=list[ConsultationResponse])
async def list_consultations_endpoint(
    status_filter: str | None = Query(None, alias="status"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[ConsultationResponse]:
    items = await list_consultations.execute(
        uow, context.role, context.user_id, status=status_filter
    )
    return [ConsultationResponse.model_validate(item) for item in items]


@router.post("/", response_model=ConsultationResponse, status_code=status.HTTP_201_CREATED)
async def create_consultation_endpoint(
    payload: ConsultationCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ConsultationResponse:
    request = await create_consultation.execute(
        uow,
        context.role,
        context.user_id,
        create_consultation.CreateConsultationInput(**payload.model_dump()),
    )
    return ConsultationResponse.model_validate(request)


@router.post("/visits", response_model=ConsultationResponse, status_code=status.HTTP_201_CREATED)
async def schedule_visit_endpoint(
    payload: ScheduleVisitRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> ConsultationResponse:
    request = await schedule_visit.execute(
        uow,
        context.role,
        context.user_id,
        schedule_visit.ScheduleVisitInput(**payload.model_dump()),
        now=now,
    )
    return ConsultationResponse.model_validate(request)


@router.post("/{request_id}/accept", response_model=ConsultationResponse)
async def accept_consultation_endpoint(
    request_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ConsultationResponse:
    request = await accept_consultation.execute(uow, context.role, context.user_id, request_id)
    return ConsultationResponse.model_validate(request)


@router.patch("/{request_id}/status", response_model=ConsultationResponse)
async def update_consultation_status_endpoint(
    request_id: UUID,
    payload: ConsultationStatusUpdate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ConsultationResponse:
    request = await update_consultation_status.execute(
        uow,
        context.role,
        context.user_id,
        request_id,
        update_consultation_status.UpdateConsultationStatusInput(**payload.model_dump()),
    )
    return ConsultationResponse.model_validate(request)


@router.post("/{request_id}/feedback", response_model=ConsultationResponse)
async def add_feedback_endpoint(
    request_id: UUID,
    payload: ConsultationFeedback,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ConsultationResponse:
    request = await add_feedback.execute(
        uow,
        context.role,
        context.user_id,
        request_id,
        rating=payload.rating,
        feedback=payload.feedback,
    )
    return ConsultationResponse.model_validate(request)
