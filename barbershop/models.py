"""
Type-safe data models for the shop
Uses dataclasses and enums for better type safety and IDE support
"""
from dataclasses import dataclass
from enum import Enum

# Filter selection meaning "every barber"
ALL_BARBERS = "all"


@dataclass(frozen=True)
class ServiceRecord:
    """One completed transaction"""
    barber: str
    time: str  # HH:MM, local clock at save time
    service: str
    price: str  # decimal number as entered


class FormState(str, Enum):
    """Entry form lifecycle"""
    EDITING = "editing"
    IDLE_AFTER_SAVE = "idle_after_save"


# Catalog offered by the entry form
DEFAULT_BARBERS = ("Berber 1", "Berber 2", "Berber 3")

DEFAULT_SERVICE_PRICES = {
    "Saç Kesimi": ("250", "300", "350"),
    "Tıraş": ("150", "200", "250"),
    "Sakal Tıraşı": ("100", "150", "200"),
    "Saç Boyama": ("450", "550", "650"),
}
