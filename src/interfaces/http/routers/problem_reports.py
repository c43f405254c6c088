from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.use_cases.problem_reports import (
    close_problem_report,
    create_problem_report,
    list_problem_reports,
    respond_problem_report,
)
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_now, get_uow
from src.interfaces.http.schemas.problem_reports import (
    ProblemReportCreate,
    ProblemReportRespond,
    ProblemReportResponse,
)

router = APIRouter(prefix="/problem-reports", tags=["problem-reports"])


@router.get("/", response_model=list[ProblemReportResponse])
async def list_problem_reports_endpoint(
    status_filter: str | None = Query(None, alias="status"),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[ProblemReportResponse]:
    reports = await list_problem_reports.execute(
        uow, context.role, context.user_id, status=status_filter
    )
    return [ProblemReportResponse.model_validate(report) for report in reports]


@router.post("/", response_model=ProblemReportResponse, status_code=status.HTTP_201_CREATED)
async def create_problem_report_endpoint(
    payload: ProblemReportCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> ProblemReportResponse:
    report = await create_problem_report.execute(
        uow,
        context.role,
        context.user_id,
        create_problem_report.CreateProblemReportInput(**payload.model_dump()),
    )
    return ProblemReportResponse.model_validate(report)


@router.post("/{report_id}/respond", response_model=ProblemReportResponse)
async def respond_problem_report_endpoint(
    report_id: UUID,
    payload: ProblemReportRespond,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> ProblemReportResponse:
    report = await respond_problem_report.execute(
        uow, context.role, context.user_id, report_id, response=payload.response, now=now
    )
    return ProblemReportResponse.model_validate(report)


@router.post("/{report_id}/close", response_model=ProblemReportResponse)
async def close_problem_report_endpoint(
    report_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> ProblemReportResponse:
    report = await close_problem_report.execute(
        uow, context.role, context.user_id, report_id, now=now
    )
    return ProblemReportResponse.model_validate(report)
