from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.domain.value_objects.compliance_status import ComplianceStatus
from src.interfaces.http.schemas.compliance import AlertResponse, ComplianceSummaryResponse
from src.interfaces.http.schemas.consultations import ConsultationResponse
from src.interfaces.http.schemas.problem_reports import ProblemReportResponse
from src.interfaces.http.schemas.tasks import TaskResponse
from src.interfaces.http.schemas.testing_reports import LabTestResponse


class FarmerDashboardResponse(BaseModel):
    summary: ComplianceSummaryResponse
    todays_tasks: list[TaskResponse]
    overdue_tasks: int
    active_alerts: list[AlertResponse]
    reward_points: int


class HighRiskAnimalResponse(BaseModel):
    animal_id: UUID
    farm_id: UUID
    tag: str
    name: str | None = None
    status: ComplianceStatus
    withdrawal_until_milk: datetime | None = None
    withdrawal_until_meat: datetime | None = None


class VetDashboardResponse(BaseModel):
    pending_consultations: list[ConsultationResponse]
    my_consultations: list[ConsultationResponse]
    pending_problem_reports: list[ProblemReportResponse]
    high_risk_animals: list[HighRiskAnimalResponse]


class AdminDashboardResponse(BaseModel):
    users_by_role: dict[str, int]
    total_users: int
    total_farms: int
    summary: ComplianceSummaryResponse
    recent_alerts: list[AlertResponse]


class LabDashboardResponse(BaseModel):
    counts_by_status: dict[str, int]
    queue: list[LabTestResponse]
