from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel


class ComplianceReportRequest(BaseModel):
    format: Literal["pdf", "json"] = "pdf"


class ReportResponse(BaseModel):
    report_id: str
    title: str
    generated_at: str
    format: str
    content: str | None = None  # base64 for PDF
    data: dict[str, Any] | None = None  # structured data when format=json
    file_name: str | None = None
