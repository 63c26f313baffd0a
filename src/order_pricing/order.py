"""Order pricing core.

Every derived amount is a query over the order's current inputs: nothing is
stored, so a change to ``item.price`` is visible on the next read.
"""

from __future__ import annotations

import logging
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from .config import get_config
from .errors import MalformedItemError
from .types import PricedItem, PriceBreakdown

logger = logging.getLogger(__name__)

__all__ = [
    "BULK_DISCOUNT_REDUCTION",
    "BULK_DISCOUNT_THRESHOLD",
    "STANDARD_DISCOUNT_FACTOR",
    "Order",
]

STANDARD_DISCOUNT_FACTOR = 0.98
BULK_DISCOUNT_REDUCTION = 0.03
BULK_DISCOUNT_THRESHOLD = 1000


def _is_finite(value: Any) -> bool:
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    # int and Fraction are always finite; converting them to float may overflow
    return True


def _require_number(field: str, value: Any) -> Any:
    # bool is an int subclass but never a quantity or a price
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)) or not _is_finite(value):
        logger.debug("Rejecting %s=%r for pricing", field, value)
        raise MalformedItemError(field, value)
    return value


@dataclass(frozen=True, eq=False)
class Order:
    """A purchase of ``quantity`` units of a single ``item``.

    The item is shared, never copied; only its ``price`` is read. Orders
    compare and hash by identity.
    """

    quantity: float
    item: PricedItem

    @property
    def base_price(self) -> float:
        unit_price = self.item.price
        return _require_number("quantity", self.quantity) * _require_number("item.price", unit_price)

    @property
    def discount_factor(self) -> float:
        return self._discount_for(self.base_price)

    @property
    def price(self) -> float:
        return self.base_price * self.discount_factor

    def breakdown(self) -> PriceBreakdown:
        """Return every pricing step for the current inputs in one snapshot."""
        unit_price = self.item.price
        quantity = _require_number("quantity", self.quantity)
        unit_price = _require_number("item.price", unit_price)
        base_price = quantity * unit_price
        discount_factor = self._discount_for(base_price)
        return {
            "quantity": self.quantity,
            "unit_price": unit_price,
            "base_price": base_price,
            "discount_factor": discount_factor,
            "price": base_price * discount_factor,
            "bulk_discount_applied": base_price > BULK_DISCOUNT_THRESHOLD,
            "currency": get_config().currency,
        }

    @staticmethod
    def _discount_for(base_price: float) -> float:
        factor = STANDARD_DISCOUNT_FACTOR
        if base_price > BULK_DISCOUNT_THRESHOLD:
            factor -= BULK_DISCOUNT_REDUCTION
            logger.debug("Bulk discount applied to base price %s", base_price)
        return factor
