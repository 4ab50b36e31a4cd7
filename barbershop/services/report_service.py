"""
Report export: filter, total, format and render in one call.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union

from barbershop.aggregates import filtered, total
from barbershop.pdf_renderer import ReportPdfRenderer
from barbershop.record_store import RecordStore
from barbershop.report import ReportFormatter

logger = logging.getLogger(__name__)


def export_report(
    store: RecordStore,
    selection: str,
    formatter: ReportFormatter,
    renderer: ReportPdfRenderer,
    directory: Union[str, Path],
    today: Optional[date] = None,
) -> Path:
    """
    Export the records matching selection to a PDF file.

    Args:
        store: Record store to read from
        selection: "all" or a barber name
        formatter: Builds the tabular report
        renderer: Writes the document
        directory: Output directory
        today: Report date (defaults to today)

    Returns:
        Path of the written file

    Raises:
        EmptyReportRequest: No records match, nothing is written
        ExportError: Document generation failed
    """
    subset = filtered(store.records, selection)
    report = formatter.build(subset, total(subset), selection, today or date.today())
    path = renderer.write(report, directory)
    logger.info(f"Exported {len(subset)} records for '{selection}' to {path}")
    return path
