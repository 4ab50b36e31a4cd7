"""
Filtering and totals over the record list
"""

from typing import Iterable, List

from barbershop.models import ALL_BARBERS, ServiceRecord


def filtered(records: Iterable[ServiceRecord], selection: str) -> List[ServiceRecord]:
    """Records matching the barber selection, in original order"""
    if selection == ALL_BARBERS:
        return list(records)
    return [record for record in records if record.barber == selection]


def parse_price(price: str) -> float:
    """
    Parse a stored price.

    Unparsable values become NaN so that a corrupt record shows up
    in the total instead of being silently skipped.
    """
    try:
        return float(price)
    except (TypeError, ValueError):
        return float("nan")


def total(subset: Iterable[ServiceRecord]) -> float:
    """Sum of prices"""
    return sum((parse_price(record.price) for record in subset), 0.0)


def format_total(value: float) -> str:
    """Two decimal places, e.g. 250.50"""
    return f"{value:.2f}"


def filtered_total(records: Iterable[ServiceRecord], selection: str) -> str:
    """Formatted total of the records matching selection"""
    return format_total(total(filtered(records, selection)))


def total_label(selection: str) -> str:
    """Label of the on-screen total row"""
    if selection == ALL_BARBERS:
        return "Toplam Günlük Gelir:"
    return f"{selection} Toplam Gelir:"
