from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends

from src.application.use_cases.compliance import compliance_report
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.reports.pdf_generator import PDFGenerator
from src.infrastructure.reports.report_service import ReportService
from src.interfaces.http.deps import get_auth_context, get_now, get_uow
from src.interfaces.http.schemas.reports import ComplianceReportRequest, ReportResponse

router = APIRouter(prefix="/reports", tags=["reports"])

# Initialize report service
pdf_generator = PDFGenerator()
report_service = ReportService(pdf_generator)


@router.post("/compliance", response_model=ReportResponse)
async def generate_compliance_report(
    request: ComplianceReportRequest,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    now: datetime = Depends(get_now),
) -> ReportResponse:
    """Generate the cross-farm compliance report"""
    report = await compliance_report.execute(uow, context.role, now=now)
    return report_service.generate_compliance_report(report, request.format)
