"""
PDF rendering of revenue reports with reportlab.

Layout:
- A4 portrait, 15mm side margins
- Title in the shop accent color, date line below it
- Grid table with accent header row and tinted alternate rows
- Separate total table spanning the first three columns
- Grey footer on every page
"""

import io
import logging
from pathlib import Path
from typing import Union

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from barbershop.errors import ExportError
from barbershop.report import Report

logger = logging.getLogger(__name__)

ACCENT_COLOR = colors.HexColor("#990000")
ALTERNATE_ROW_COLOR = colors.HexColor("#F5F5F5")
TOTAL_ROW_COLOR = colors.HexColor("#F0F0F0")
FOOTER_COLOR = colors.HexColor("#646464")


class ReportPdfRenderer:
    """Renders a Report into PDF bytes or a file"""

    PAGE_SIZE = A4
    SIDE_MARGIN = 15 * mm
    TOP_MARGIN = 15 * mm
    BOTTOM_MARGIN = 20 * mm
    FOOTER_OFFSET = 10 * mm

    # Berber, Saat, Hizmet, Fiyat
    COLUMN_WIDTHS = [50 * mm, 25 * mm, 70 * mm, 35 * mm]

    def __init__(self):
        self.styles = getSampleStyleSheet()
        self._create_custom_styles()

    def _create_custom_styles(self):
        self.title_style = ParagraphStyle(
            "ReportTitle",
            parent=self.styles["Heading1"],
            fontSize=22,
            leading=26,
            alignment=TA_CENTER,
            textColor=ACCENT_COLOR,
            fontName="Helvetica-Bold",
            spaceAfter=4 * mm,
        )

        self.date_style = ParagraphStyle(
            "ReportDate",
            parent=self.styles["Normal"],
            fontSize=12,
            alignment=TA_CENTER,
            textColor=colors.black,
            spaceAfter=6 * mm,
        )

    def render(self, report: Report) -> bytes:
        """
        Generate the PDF document.

        Raises:
            ExportError: If reportlab fails for any reason
        """
        buffer = io.BytesIO()
        try:
            doc = SimpleDocTemplate(
                buffer,
                pagesize=self.PAGE_SIZE,
                leftMargin=self.SIDE_MARGIN,
                rightMargin=self.SIDE_MARGIN,
                topMargin=self.TOP_MARGIN,
                bottomMargin=self.BOTTOM_MARGIN,
                title=report.title,
            )

            def draw_footer(canvas, _doc):
                canvas.saveState()
                canvas.setFont("Helvetica", 10)
                canvas.setFillColor(FOOTER_COLOR)
                canvas.drawCentredString(
                    self.PAGE_SIZE[0] / 2, self.FOOTER_OFFSET, report.footer
                )
                canvas.restoreState()

            doc.build(
                self._build_story(report),
                onFirstPage=draw_footer,
                onLaterPages=draw_footer,
            )
            return buffer.getvalue()
        except Exception as e:
            raise ExportError(f"PDF generation failed: {e}") from e
        finally:
            buffer.close()

    def write(self, report: Report, directory: Union[str, Path]) -> Path:
        """Render and save under directory, returning the file path"""
        pdf_bytes = self.render(report)
        path = Path(directory) / report.filename
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(pdf_bytes)
        except OSError as e:
            raise ExportError(f"Could not write {path}: {e}") from e

        logger.info(f"Report written to {path} ({len(pdf_bytes)} bytes)")
        return path

    def _build_story(self, report: Report):
        return [
            Paragraph(report.title, self.title_style),
            Paragraph(report.date_line, self.date_style),
            self._build_records_table(report),
            Spacer(1, 5 * mm),
            self._build_total_table(report),
        ]

    def _build_records_table(self, report: Report) -> Table:
        data = [list(report.header)] + [list(row) for row in report.rows]

        table = Table(data, colWidths=self.COLUMN_WIDTHS, repeatRows=1)
        style = [
            ("BACKGROUND", (0, 0), (-1, 0), ACCENT_COLOR),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, 0), 12),
            ("ALIGN", (0, 0), (-1, 0), "CENTER"),
            ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 1), (-1, -1), 11),
            ("ALIGN", (0, 1), (0, -1), "LEFT"),
            ("ALIGN", (1, 1), (1, -1), "CENTER"),
            ("ALIGN", (2, 1), (2, -1), "LEFT"),
            ("ALIGN", (3, 1), (3, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ]
        # Tint every second body row
        for row_index in range(2, len(data), 2):
            style.append(
                ("BACKGROUND", (0, row_index), (-1, row_index), ALTERNATE_ROW_COLOR)
            )

        table.setStyle(TableStyle(style))
        return table

    def _build_total_table(self, report: Report) -> Table:
        data = [[report.total_label, "", "", report.total_text]]

        table = Table(data, colWidths=self.COLUMN_WIDTHS)
        table.setStyle(
            TableStyle(
                [
                    ("SPAN", (0, 0), (2, 0)),
                    ("BACKGROUND", (0, 0), (-1, -1), TOTAL_ROW_COLOR),
                    ("FONTNAME", (0, 0), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 12),
                    ("ALIGN", (0, 0), (-1, -1), "RIGHT"),
                    ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    ("BOX", (0, 0), (-1, -1), 0.3 * mm, ACCENT_COLOR),
                    ("INNERGRID", (0, 0), (-1, -1), 0.3 * mm, ACCENT_COLOR),
                ]
            )
        )
        return table
