from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends

from src.application.use_cases.dashboards import (
    admin_dashboard,
    farmer_dashboard,
    lab_dashboard,
    vet_dashboard,
)
from src.infrastructure.auth.context import AuthContext
from src.interfaces.http.deps import get_auth_context, get_now, get_uow
from src.interfaces.http.schemas.compliance import AlertResponse, ComplianceSummaryResponse
from src.interfaces.http.schemas.consultations import ConsultationResponse
from src.interfaces.http.schemas.dashboard import (
    AdminDashboardResponse,
    FarmerDashboardResponse,
    HighRiskAnimalResponse,
    LabDashboardResponse,
    VetDashboardResponse,
)
from src.interfaces.http.schemas.problem_reports import ProblemReportResponse
from src.interfaces.http.schemas.tasks import TaskResponse
from src.interfaces.http.schemas.testing_reports import LabTestResponse

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/farmer", response_model=FarmerDashboardResponse)
async def get_farmer_dashboard(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> FarmerDashboardResponse:
    result = await farmer_dashboard.execute(uow, context.role, context.user_id, now=now)
    return FarmerDashboardResponse(
        summary=ComplianceSummaryResponse.model_validate(result.summary),
        todays_tasks=[TaskResponse.model_validate(task) for task in result.todays_tasks],
        overdue_tasks=result.overdue_tasks,
        active_alerts=[AlertResponse.model_validate(alert) for alert in result.active_alerts],
        reward_points=result.reward_points,
    )


@router.get("/vet", response_model=VetDashboardResponse)
async def get_vet_dashboard(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> VetDashboardResponse:
    result = await vet_dashboard.execute(uow, context.role, context.user_id, now=now)
    return VetDashboardResponse(
        pending_consultations=[
            ConsultationResponse.model_validate(item) for item in result.pending_consultations
        ],
        my_consultations=[
            ConsultationResponse.model_validate(item) for item in result.my_consultations
        ],
        pending_problem_reports=[
            ProblemReportResponse.model_validate(item) for item in result.pending_problem_reports
        ],
        high_risk_animals=[
            HighRiskAnimalResponse(
                animal_id=item.animal.id,
                farm_id=item.animal.farm_id,
                tag=item.animal.tag,
                name=item.animal.name,
                status=item.status,
                withdrawal_until_milk=item.animal.withdrawal_until_milk,
                withdrawal_until_meat=item.animal.withdrawal_until_meat,
            )
            for item in result.high_risk_animals
        ],
    )


@router.get("/admin", response_model=AdminDashboardResponse)
async def get_admin_dashboard(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> AdminDashboardResponse:
    result = await admin_dashboard.execute(uow, context.role, now=now)
    return AdminDashboardResponse(
        users_by_role=result.users_by_role,
        total_users=result.total_users,
        total_farms=result.total_farms,
        summary=ComplianceSummaryResponse.model_validate(result.summary),
        recent_alerts=[AlertResponse.model_validate(alert) for alert in result.recent_alerts],
    )


@router.get("/lab", response_model=LabDashboardResponse)
async def get_lab_dashboard(
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
) -> LabDashboardResponse:
    result = await lab_dashboard.execute(uow, context.role)
    return LabDashboardResponse(
        counts_by_status=result.counts_by_status,
        queue=[LabTestResponse.model_validate(item) for item in result.queue],
    )
