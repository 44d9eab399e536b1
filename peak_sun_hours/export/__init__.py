"""
export module - report presentation

This module contains the following components:
- table_renderer: display rows, data frames and CSV/JSON/Excel downloads
- pdf_exporter: PDF document layout
"""

from .table_renderer import TableRenderer, monthly_rows, totals_row, to_dataframe
from .pdf_exporter import PDFExporter, ReportSection, build_sections

__version__ = "1.0.0"
__author__ = "Peak Sun Hours Team"

__all__ = [
    'TableRenderer',
    'monthly_rows',
    'totals_row',
    'to_dataframe',
    'PDFExporter',
    'ReportSection',
    'build_sections'
]
