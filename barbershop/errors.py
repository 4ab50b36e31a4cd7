"""
Exception hierarchy for the shop
Every error is recoverable: handlers turn them into chat messages
"""

from typing import Sequence


class BarberShopError(Exception):
    """Base class for all shop errors"""


class FormError(BarberShopError):
    """Service entry form could not be saved"""


class MissingField(FormError):
    """One or more required inputs are empty"""

    def __init__(self, fields: Sequence[str]):
        self.fields = tuple(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class InvalidPrice(FormError):
    """Price is not a finite non-negative number"""

    def __init__(self, price: str):
        self.price = price
        super().__init__(f"Invalid price: {price!r}")


class EmptyReportRequest(BarberShopError):
    """Export requested with no matching records"""

    def __init__(self, selection: str):
        self.selection = selection
        super().__init__(f"No records to report for selection '{selection}'")


class PersistenceError(BarberShopError):
    """Key-value store read or write failed"""


class ExportError(BarberShopError):
    """Document generation failed"""
