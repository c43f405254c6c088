from __future__ import annotations

import uuid
from dataclasses import asdict
from typing import Any

from src.application.use_cases.compliance.compliance_report import ComplianceReport
from src.domain.services.compliance_summary import ComplianceSummary
from src.infrastructure.reports.pdf_generator import PDFGenerator
from src.interfaces.http.schemas.reports import ReportResponse

REPORT_TITLE = "Compliance Report"
FARM_COLUMNS = (
    ("Farm", "farm_name"),
    ("Animals", "total_animals"),
    ("Restricted", "restricted_animals"),
    ("Compliance rate", "compliance_rate"),
    ("Active alerts", "active_alerts"),
)
ANIMAL_COLUMNS = (
    ("Farm", "farm_name"),
    ("Tag", "tag"),
    ("Status", "status"),
    ("Milk until", "milk_until"),
    ("Meat until", "meat_until"),
)


class ReportService:
    def __init__(self, pdf_generator: PDFGenerator):
        self.pdf_generator = pdf_generator

    @staticmethod
    def _kpis(summary: ComplianceSummary) -> dict[str, Any]:
        return {
            "total_animals": summary.total_animals,
            "compliant_animals": summary.compliant_animals,
            "restricted_animals": summary.restricted_animals,
            "compliance_rate": summary.compliance_rate,
            "active_alerts": summary.active_alerts,
        }

    def _report_data(self, report: ComplianceReport) -> dict[str, Any]:
        return {
            "overall": asdict(report.overall),
            "farms": [
                {
                    "farm_id": str(row.farm_id),
                    "farm_name": row.farm_name,
                    **asdict(row.summary),
                }
                for row in report.farms
            ],
            "restricted_animals": [
                {
                    "animal_id": str(item.animal.id),
                    "farm_name": item.farm_name,
                    "tag": item.animal.tag,
                    "name": item.animal.name,
                    "status": item.status,
                    "withdrawal_until_milk": (
                        item.animal.withdrawal_until_milk.isoformat()
                        if item.animal.withdrawal_until_milk
                        else None
                    ),
                    "withdrawal_until_meat": (
                        item.animal.withdrawal_until_meat.isoformat()
                        if item.animal.withdrawal_until_meat
                        else None
                    ),
                }
                for item in report.restricted_animals
            ],
        }

    def generate_compliance_report(self, report: ComplianceReport, fmt: str) -> ReportResponse:
        """Render a compliance report as base64 PDF or structured JSON."""
        report_id = str(uuid.uuid4())
        generated_at = report.generated_at.isoformat()
        stamp = report.generated_at.strftime("%Y%m%d")

        if fmt == "json":
            return ReportResponse(
                report_id=report_id,
                title=REPORT_TITLE,
                generated_at=generated_at,
                format="json",
                data=self._report_data(report),
                file_name=f"compliance_{stamp}.json",
            )

        pdf = self.pdf_generator
        elements = pdf.create_header(
            REPORT_TITLE, "Withdrawal status across all farms", report.generated_at
        )
        elements.extend(pdf.create_kpi_section("Overall", self._kpis(report.overall)))
        elements.extend(
            pdf.create_status_chart("Animals by classification", report.overall.by_status)
        )

        farm_rows = [
            {
                "farm_name": row.farm_name,
                **self._kpis(row.summary),
            }
            for row in report.farms
        ]
        elements.extend(pdf.create_table_section("By farm", farm_rows, FARM_COLUMNS))

        animal_rows = [
            {
                "farm_name": item.farm_name,
                "tag": item.animal.tag,
                "status": item.status,
                "milk_until": item.animal.withdrawal_until_milk,
                "meat_until": item.animal.withdrawal_until_meat,
            }
            for item in report.restricted_animals
        ]
        elements.extend(
            pdf.create_table_section(
                "Animals under withdrawal", animal_rows, ANIMAL_COLUMNS, status_key="status"
            )
        )

        return ReportResponse(
            report_id=report_id,
            title=REPORT_TITLE,
            generated_at=generated_at,
            format="pdf",
            content=pdf.generate_pdf(elements, title=REPORT_TITLE),
            file_name=f"compliance_{stamp}.pdf",
        )
