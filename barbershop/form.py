"""
Service entry form controller
Holds the three selections, validates them and turns them into a record.
"""

import logging
import math
from datetime import datetime
from typing import Callable, List, Mapping, Optional, Sequence

from barbershop.errors import InvalidPrice, MissingField
from barbershop.models import DEFAULT_SERVICE_PRICES, FormState, ServiceRecord
from barbershop.record_store import RecordStore

logger = logging.getLogger(__name__)


def validate_price(price: str) -> str:
    """Return the price stripped, raising InvalidPrice if not a finite number >= 0"""
    value = price.strip()
    try:
        amount = float(value)
    except ValueError:
        raise InvalidPrice(price)
    if not math.isfinite(amount) or amount < 0:
        raise InvalidPrice(price)
    return value


class FormController:
    """
    Entry form for one staff member.

    States:
        EDITING: selections are being made
        IDLE_AFTER_SAVE: last save succeeded, fields are empty
    """

    def __init__(
        self,
        store: RecordStore,
        service_prices: Optional[Mapping[str, Sequence[str]]] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.service_prices = (
            DEFAULT_SERVICE_PRICES if service_prices is None else service_prices
        )
        self.clock = clock
        self.barber = ""
        self.service = ""
        self.price = ""
        self.state = FormState.EDITING

    def select_barber(self, barber: str) -> None:
        self.barber = barber
        self.state = FormState.EDITING

    def select_service(self, service: str) -> None:
        self.service = service
        self.state = FormState.EDITING

    def select_price(self, price: str) -> None:
        self.price = price
        self.state = FormState.EDITING

    def suggested_prices(self, service: Optional[str] = None) -> List[str]:
        """Quick-select price tiers for a service (current one by default)"""
        return list(self.service_prices.get(service or self.service, []))

    @staticmethod
    def validate(barber: str, service: str, price: str) -> None:
        """
        Check all inputs are filled in

        Raises:
            MissingField: Naming every empty input
        """
        missing = [
            name
            for name, value in (("barber", barber), ("service", service), ("price", price))
            if not value or not value.strip()
        ]
        if missing:
            raise MissingField(missing)

    def save(self) -> ServiceRecord:
        """
        Append the current selections to the store and reset the form

        Raises:
            MissingField: If any input is empty
            InvalidPrice: If price is not a non-negative number
        """
        self.validate(self.barber, self.service, self.price)
        price = validate_price(self.price)

        record = ServiceRecord(
            barber=self.barber,
            time=self.clock().strftime("%H:%M"),
            service=self.service,
            price=price,
        )
        self.store.append(record)
        logger.info(f"Form saved: {record.barber} {record.time} {record.service}")

        self.reset()
        self.state = FormState.IDLE_AFTER_SAVE
        return record

    def reset(self) -> None:
        """Clear the three inputs"""
        self.barber = ""
        self.service = ""
        self.price = ""
