"""
Report formatter
Turns a filtered record list into a ready-to-render tabular report.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from barbershop.aggregates import format_total
from barbershop.errors import EmptyReportRequest
from barbershop.models import ALL_BARBERS, ServiceRecord

logger = logging.getLogger(__name__)

# Characters the standard PDF fonts cannot draw, mapped to ASCII
TURKISH_TRANSLITERATION: Dict[str, str] = {
    "ı": "i",
    "ğ": "g",
    "ü": "u",
    "ş": "s",
    "ö": "o",
    "ç": "c",
    "İ": "I",
}

TURKISH_MONTHS = (
    "Ocak",
    "Şubat",
    "Mart",
    "Nisan",
    "Mayıs",
    "Haziran",
    "Temmuz",
    "Ağustos",
    "Eylül",
    "Ekim",
    "Kasım",
    "Aralık",
)

HEADER = ("Berber", "Saat", "Hizmet", "Fiyat")


def transliterate(text: str, table: Mapping[str, str] = TURKISH_TRANSLITERATION) -> str:
    """Replace each character found in table"""
    return "".join(table.get(char, char) for char in text)


def format_long_date(day: date) -> str:
    """Long Turkish date, e.g. 19 Ekim 2026"""
    return f"{day.day} {TURKISH_MONTHS[day.month - 1]} {day.year}"


@dataclass(frozen=True)
class Report:
    """Structured report handed to the document renderer"""

    title: str
    date_text: str
    date_line: str
    header: Tuple[str, ...]
    rows: List[Tuple[str, str, str, str]]
    total_label: str
    total_text: str
    footer: str
    filename: str


class ReportFormatter:
    """Builds Report objects for a barber selection"""

    def __init__(
        self,
        title: str = "ODTU Berber - Gelir Raporu",
        footer: str = "© 2025 ODTÜ Berber - Eyyüpcan İşler",
        currency_label: str = "TL",
        file_prefix: str = "ODTU_Berber_Gelir_Raporu",
        transliteration: Optional[Mapping[str, str]] = None,
    ):
        self.title = title
        self.footer = footer
        self.currency_label = currency_label
        self.file_prefix = file_prefix
        self.transliteration = (
            TURKISH_TRANSLITERATION if transliteration is None else transliteration
        )

    @classmethod
    def from_config(cls, config) -> "ReportFormatter":
        return cls(
            title=config.report_title,
            footer=config.footer_text,
            currency_label=config.currency_label,
            file_prefix=config.report_file_prefix,
        )

    def with_currency(self, amount: str) -> str:
        return f"{amount} {self.currency_label}"

    def total_row_label(self, selection: str) -> str:
        if selection == ALL_BARBERS:
            return "TOPLAM:"
        return f"{selection} TOPLAM:"

    def filename(self, day: date) -> str:
        """File name embedding the long date with underscores"""
        date_part = "_".join(format_long_date(day).split())
        return f"{self.file_prefix}_{date_part}.pdf"

    def build(
        self,
        subset: Sequence[ServiceRecord],
        total: float,
        selection: str,
        today: date,
    ) -> Report:
        """
        Format a report for the given records.

        Raises:
            EmptyReportRequest: If subset is empty
        """
        if not subset:
            raise EmptyReportRequest(selection)

        date_text = format_long_date(today)
        rows = [
            (
                transliterate(record.barber, self.transliteration),
                record.time,
                transliterate(record.service, self.transliteration),
                self.with_currency(record.price),
            )
            for record in subset
        ]

        logger.info(f"Formatted report for '{selection}' with {len(rows)} rows")

        return Report(
            title=self.title,
            date_text=date_text,
            date_line=transliterate(f"Tarih: {date_text}", self.transliteration),
            header=HEADER,
            rows=rows,
            total_label=transliterate(
                self.total_row_label(selection), self.transliteration
            ),
            total_text=self.with_currency(format_total(total)),
            footer=transliterate(self.footer, self.transliteration),
            filename=self.filename(today),
        )
