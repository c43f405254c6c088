from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.testing_reports import (
    list_testing_reports,
    request_test,
    update_testing_report,
)
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_now, get_uow
from src.interfaces.http.schemas.testing_reports import (
    LabTestComplete,
    LabTestCreate,
    LabTestResponse,
)

router = APIRouter(prefix="/lab-tests", tags=["lab-tests"])


@router.get("/", response_model=list[LabTestResponse])
async def list_lab_tests(
    status_filter: str | None = Query(None, alias="status"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[LabTestResponse]:
    reports = await list_testing_reports.execute(
        uow, context.role, context.user_id, status=status_filter
    )
    return [LabTestResponse.model_validate(report) for report in reports]


@router.post("/", response_model=LabTestResponse, status_code=status.HTTP_201_CREATED)
async def request_lab_test(
    payload: LabTestCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> LabTestResponse:
    report = await request_test.execute(
        uow,
        context.role,
        context.user_id,
        request_test.RequestTestInput(**payload.model_dump()),
    )
    return LabTestResponse.model_validate(report)


@router.post("/{report_id}/receive", response_model=LabTestResponse)
async def receive_sample(
    report_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> LabTestResponse:
    report = await update_testing_report.mark_received(
        uow, context.role, context.user_id, report_id, now=now
    )
    return LabTestResponse.model_validate(report)


@router.post("/{report_id}/complete", response_model=LabTestResponse)
async def complete_lab_test(
    report_id: UUID,
    payload: LabTestComplete,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> LabTestResponse:
    report = await update_testing_report.mark_completed(
        uow,
        context.role,
        context.user_id,
        report_id,
        results=payload.results,
        notes=payload.notes,
        now=now,
    )
    return LabTestResponse.model_validate(report)
