from __future__ import annotations

from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from src.application.errors import PermissionDenied
from src.application.use_cases.compliance import (
    create_alert,
    get_compliance_summary,
    list_alerts,
    resolve_alert,
    run_compliance_sweep,
)
from src.config.settings import Settings
from src.domain.value_objects.role import Role
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_app_settings, get_auth_context, get_now, get_uow
from src.interfaces.http.schemas.compliance import (
    AlertCreate,
    AlertResponse,
    ComplianceSummaryResponse,
    SweepResponse,
)

router = APIRouter(prefix="/compliance", tags=["compliance"])


@router.get("/summary", response_model=ComplianceSummaryResponse)
async def compliance_summary(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> ComplianceSummaryResponse:
    summary = await get_compliance_summary.execute(uow, context.role, context.user_id, now=now)
    return ComplianceSummaryResponse.model_validate(summary)


@router.get("/alerts", response_model=list[AlertResponse])
async def list_alerts_endpoint(
    status_filter: str | None = Query("active", alias="status"),
    alert_type: str | None = Query(None),
    limit: int = Query(100, ge=1, le=500),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> list[AlertResponse]:
    alerts = await list_alerts.execute(
        uow,
        context.role,
        context.user_id,
        status=status_filter,
        alert_type=alert_type,
        limit=limit,
    )
    return [AlertResponse.model_validate(alert) for alert in alerts]


@router.post("/alerts", response_model=AlertResponse, status_code=status.HTTP_201_CREATED)
async def create_alert_endpoint(
    payload: AlertCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> AlertResponse:
    alert = await create_alert.execute(
        uow,
        context.role,
        create_alert.CreateAlertInput(**payload.model_dump()),
        now=now,
    )
    return AlertResponse.model_validate(alert)


@router.post("/alerts/{alert_id}/resolve", response_model=AlertResponse)
async def resolve_alert_endpoint(
    alert_id: UUID,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> AlertResponse:
    alert = await resolve_alert.execute(uow, context.role, context.user_id, alert_id, now=now)
    return AlertResponse.model_validate(alert)


@router.post("/sweep", response_model=SweepResponse)
async def run_sweep(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
    now: datetime = Depends(get_now),
) -> SweepResponse:
    """Run the compliance sweep on demand (admin only)."""
    if context.role is not Role.ADMIN:
        raise PermissionDenied("Only admins can trigger the compliance sweep")
    result = await run_compliance_sweep.execute(
        uow, now=now, grace_days=settings.missed_task_grace_days
    )
    return SweepResponse.model_validate(result)
