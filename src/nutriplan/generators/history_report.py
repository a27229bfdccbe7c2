"""Exports of the progress history: PDF report, CSV file and e-mail draft."""

import csv
import io
from dataclasses import dataclass
from datetime import datetime
from urllib.parse import quote

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..i18n import get_translation
from ..models.progress import ProgressEntry
from ..utils.calculators import format_full_date

CSV_FILENAME = "mi-evolucion-nutriplan.csv"

HEADER_COLOR = colors.Color(51 / 255, 65 / 255, 85 / 255)
TABLE_HEAD_COLOR = colors.Color(16 / 255, 185 / 255, 129 / 255)


def pdf_filename(now: datetime | None = None) -> str:
    """File name for a PDF report, stamped with epoch milliseconds."""
    now = now or datetime.now()
    return f"Evolucion_NutriPlan_{int(now.timestamp() * 1000)}.pdf"


@dataclass
class ReportConfig:
    """Configuration for history exports."""

    language: str = "es"


class HistoryReportGenerator:
    """Renders the progress history in shareable formats."""

    def __init__(self, config: ReportConfig | None = None):
        self.config = config or ReportConfig()
        self.t = get_translation(self.config.language)

    def _date(self, entry: ProgressEntry) -> str:
        return format_full_date(entry.date, self.config.language)

    def to_csv(self, history: list[ProgressEntry]) -> str:
        """Header line plus one row per entry."""
        buffer = io.StringIO()
        buffer.write(self.t["csv_header"] + "\n")
        writer = csv.writer(buffer, lineterminator="\n")
        for entry in history:
            writer.writerow([self._date(entry), entry.weight, entry.waist, entry.bmi])
        return buffer.getvalue().rstrip("\n")

    def to_pdf(self, history: list[ProgressEntry], now: datetime | None = None) -> bytes:
        """Render a titled PDF with a grid table of all entries."""
        now = now or datetime.now()
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            title=self.t["report_evo_title"],
            leftMargin=15 * mm,
            rightMargin=15 * mm,
        )
        styles = getSampleStyleSheet()

        title = Table(
            [
                [Paragraph(f"<font color='white' size='22'><b>{self.t['report_evo_title']}</b></font>", styles["Title"])],
                [Paragraph(
                    f"<font color='white'>{self.t['report_generated']}: "
                    f"{format_full_date(now.isoformat(), self.config.language)}</font>",
                    styles["Normal"],
                )],
            ],
            colWidths=[doc.width],
        )
        title.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, -1), HEADER_COLOR),
            ("LEFTPADDING", (0, 0), (-1, -1), 10),
        ]))

        rows = [[
            self.t["col_date"],
            self.t["col_weight"],
            self.t["col_waist"],
            self.t["col_bmi"],
        ]]
        for entry in history:
            rows.append([
                self._date(entry),
                f"{entry.weight} kg",
                f"{entry.waist} cm",
                str(entry.bmi),
            ])

        table = Table(rows, hAlign="LEFT", colWidths=[doc.width / 4] * 4)
        table.setStyle(TableStyle([
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
            ("BACKGROUND", (0, 0), (-1, 0), TABLE_HEAD_COLOR),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ]))

        doc.build([title, Spacer(1, 10 * mm), table])
        return buffer.getvalue()

    def to_mailto(self, history: list[ProgressEntry]) -> str | None:
        """Prefilled mailto: URL for the latest entry, or None without history."""
        if not history:
            return None
        last = history[-1]
        subject = quote(self.t["email_subject"], safe="")
        body = quote(
            self.t["email_body"].format(weight=last.weight, waist=last.waist, bmi=last.bmi),
            safe="",
        )
        return f"mailto:?subject={subject}&body={body}"
