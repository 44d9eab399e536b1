"""
PDF report generation
"""
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from fpdf import FPDF
from fpdf.enums import XPos, YPos
from fpdf.fonts import FontFace

from peak_sun_hours.core.models import ReportModel
from peak_sun_hours.export.table_renderer import (
    MONTHLY_HEADER, MONTHLY_TITLE, YEARLY_HEADER, YEARLY_TITLE,
    monthly_rows, totals_row
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportSection:
    """A titled table in the document"""
    title: str
    header: Tuple[str, ...]
    rows: List[Tuple[str, ...]]


def build_sections(report: Optional[ReportModel]) -> List[ReportSection]:
    """Document layout for a report, in reading order"""
    if report is None:
        return []
    return [
        ReportSection(MONTHLY_TITLE, MONTHLY_HEADER, monthly_rows(report)),
        ReportSection(YEARLY_TITLE, YEARLY_HEADER, [totals_row(report)]),
    ]


class PDFExporter:
    """Lays out a report as a PDF document"""

    def __init__(self, page_format='A4', compress: bool = True):
        self.page_format = page_format
        self.compress = compress

        # Layout (mm / pt)
        self.margin = 14
        self.top = 15
        self.title_size = 16
        self.body_size = 10
        self.section_gap = 7
        self.heading_style = FontFace(emphasis='BOLD', color=(255, 255, 255), fill_color=(41, 128, 185))

    def render(self, report: Optional[ReportModel]) -> Optional[FPDF]:
        """Build the document; None when there is no report"""
        sections = build_sections(report)
        if not sections:
            logger.info("No report to export, skipping PDF generation")
            return None

        pdf = FPDF(format=self.page_format)
        pdf.set_compression(self.compress)
        pdf.set_margins(self.margin, self.top, self.margin)
        pdf.set_auto_page_break(auto=True, margin=15)
        pdf.add_page()

        for index, section in enumerate(sections):
            if index:
                self._start_section(pdf)
            self._write_section(pdf, section)

        return pdf

    def export(self, report: Optional[ReportModel]) -> Optional[bytes]:
        """
        Render the report to PDF bytes

        Exporting without a report is a no-op and returns None.
        """
        pdf = self.render(report)
        if pdf is None:
            return None
        data = bytes(pdf.output())
        logger.info("PDF report generated: %d pages, %d bytes", pdf.page_no(), len(data))
        return data

    def _start_section(self, pdf: FPDF) -> bool:
        """
        Move below the previous table, or onto a new page

        A section starts where the previous table ended unless its title,
        heading row and first data row would not fit there together.

        Returns:
            True when a page was added
        """
        row_height = self.body_size / pdf.k * 2
        needed = self.section_gap + 10 + 1 + 2 * row_height
        if pdf.will_page_break(needed):
            pdf.add_page()
            return True
        pdf.ln(self.section_gap)
        return False

    def _write_section(self, pdf: FPDF, section: ReportSection):
        pdf.set_font('Helvetica', 'B', self.title_size)
        pdf.cell(0, 10, section.title, new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(1)

        pdf.set_font('Helvetica', '', self.body_size)
        self._write_table(pdf, section.header, section.rows)

    def _write_table(self, pdf: FPDF, header: Sequence[str], rows: Sequence[Sequence[str]]):
        # Long tables continue on the next page with the heading row repeated
        with pdf.table(headings_style=self.heading_style, repeat_headings=1, text_align="LEFT",
                       line_height=pdf.font_size * 2) as table:
            heading = table.row()
            for text in header:
                heading.cell(text)
            for values in rows:
                row = table.row()
                for text in values:
                    row.cell(text)
