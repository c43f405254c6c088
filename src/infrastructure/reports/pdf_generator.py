from __future__ import annotations

import base64
import io
from datetime import date, datetime
from typing import Any, Sequence

from reportlab.graphics.charts.piecharts import Pie
from reportlab.graphics.shapes import Drawing, String
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from src.domain.value_objects.compliance_status import ComplianceStatus

CONTENT_WIDTH = 6.5 * inch

# Row tint per compliance classification
STATUS_COLORS = {
    ComplianceStatus.SAFE.value: colors.HexColor("#e3f4e1"),
    ComplianceStatus.MILK_RESTRICTED.value: colors.HexColor("#fff1cc"),
    ComplianceStatus.MEAT_RESTRICTED.value: colors.HexColor("#ffe0b8"),
    ComplianceStatus.FULLY_RESTRICTED.value: colors.HexColor("#f9d0cc"),
}

KPI_LABELS = {
    "total_animals": "Total animals",
    "compliant_animals": "Compliant animals",
    "restricted_animals": "Animals under withdrawal",
    "compliance_rate": "Compliance rate (%)",
    "active_alerts": "Active alerts",
}


def _format_cell(value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:,.1f}"
    if isinstance(value, datetime):
        return value.strftime("%d/%m/%Y %H:%M")
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    return str(value)


class PDFGenerator:
    """Builds reportlab flowables for compliance reports."""

    def __init__(self):
        self.styles = getSampleStyleSheet()
        self.styles.add(
            ParagraphStyle(
                name="ReportTitle",
                parent=self.styles["Heading1"],
                fontSize=18,
                spaceAfter=12,
                textColor=colors.darkgreen,
                alignment=1,
            )
        )
        self.styles.add(
            ParagraphStyle(
                name="SectionHeading",
                parent=self.styles["Heading2"],
                fontSize=13,
                spaceAfter=8,
                textColor=colors.darkgreen,
            )
        )
        self.styles.add(
            ParagraphStyle(name="Cell", parent=self.styles["Normal"], fontSize=8, leading=10)
        )

    def create_header(self, title: str, subtitle: str | None, generated_at: datetime) -> list:
        elements: list = [Paragraph(title, self.styles["ReportTitle"])]
        if subtitle:
            elements.append(Paragraph(subtitle, self.styles["Heading3"]))
        stamp = generated_at.strftime("%d/%m/%Y %H:%M UTC")
        elements.append(Paragraph(f"Evaluated at: {stamp}", self.styles["Normal"]))
        elements.append(Spacer(1, 16))
        return elements

    def create_kpi_section(self, title: str, kpis: dict[str, Any]) -> list:
        elements: list = [Paragraph(title, self.styles["SectionHeading"])]
        rows = [[KPI_LABELS.get(key, key), _format_cell(value)] for key, value in kpis.items()]
        if rows:
            table = Table(rows, colWidths=[3 * inch, 1.5 * inch])
            table.setStyle(
                TableStyle(
                    [
                        ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                        ("FONTSIZE", (0, 0), (-1, -1), 10),
                        ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                        ("ROWBACKGROUNDS", (0, 0), (-1, -1), [colors.whitesmoke, colors.white]),
                        ("BOX", (0, 0), (-1, -1), 0.75, colors.grey),
                        ("TOPPADDING", (0, 0), (-1, -1), 6),
                        ("BOTTOMPADDING", (0, 0), (-1, -1), 6),
                    ]
                )
            )
            elements.append(table)
        elements.append(Spacer(1, 16))
        return elements

    def create_table_section(
        self,
        title: str,
        rows: Sequence[dict[str, Any]],
        columns: Sequence[tuple[str, str]],
        *,
        status_key: str | None = None,
    ) -> list:
        """Render ``rows`` as a grid.

        ``columns`` pairs a header label with the row key to read. When
        ``status_key`` is given each row is tinted by its classification.
        """
        elements: list = [Paragraph(title, self.styles["SectionHeading"])]
        if not rows:
            elements.append(Paragraph("Nothing to report", self.styles["Normal"]))
            elements.append(Spacer(1, 16))
            return elements

        data: list[list] = [[label for label, _ in columns]]
        for row in rows:
            data.append(
                [Paragraph(_format_cell(row.get(key)), self.styles["Cell"]) for _, key in columns]
            )

        style = [
            ("BACKGROUND", (0, 0), (-1, 0), colors.darkgreen),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, 0), 9),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]
        if status_key:
            for index, row in enumerate(rows, start=1):
                tint = STATUS_COLORS.get(str(row.get(status_key)))
                if tint is not None:
                    style.append(("BACKGROUND", (0, index), (-1, index), tint))

        width = CONTENT_WIDTH / len(columns)
        table = Table(data, colWidths=[width] * len(columns), repeatRows=1)
        table.setStyle(TableStyle(style))
        elements.append(table)
        elements.append(Spacer(1, 16))
        return elements

    def create_status_chart(self, title: str, counts: dict[str, int]) -> list:
        """Pie of animals per classification; empty classes are left out."""
        elements: list = [Paragraph(title, self.styles["SectionHeading"])]
        present = {status: count for status, count in counts.items() if count > 0}
        drawing = Drawing(CONTENT_WIDTH, 170)
        if not present:
            drawing.add(String(10, 80, "No animals recorded", fontSize=10))
        else:
            pie = Pie()
            pie.x, pie.y = 40, 10
            pie.width = pie.height = 150
            pie.data = list(present.values())
            pie.labels = [f"{status} ({count})" for status, count in present.items()]
            pie.sideLabels = True
            for index, status in enumerate(present):
                pie.slices[index].fillColor = STATUS_COLORS.get(status, colors.lightgrey)
                pie.slices[index].strokeColor = colors.grey
            drawing.add(pie)
        elements.append(drawing)
        elements.append(Spacer(1, 16))
        return elements

    def generate_pdf(self, elements: list, *, title: str) -> str:
        """Build the document and return it base64 encoded."""
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            title=title,
            rightMargin=54,
            leftMargin=54,
            topMargin=54,
            bottomMargin=36,
        )
        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()
        return base64.b64encode(pdf_bytes).decode("ascii")
