"""Typed contracts shared by the order pricing core and its callers.

The core reads collaborators structurally: anything exposing ``price`` can be
priced, so ``PricedItem`` is a protocol rather than a base class.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, TypedDict, runtime_checkable


@runtime_checkable
class PricedItem(Protocol):
    """Collaborator contract: an object with a numeric unit ``price``."""

    price: float


@dataclass
class Item:
    """Plain priced item. Mutable, so price changes show up on live orders."""

    price: float
    name: Optional[str] = None


class PriceBreakdown(TypedDict):
    """Snapshot of every pricing step for one order.

    Invariant:
    - ``price == base_price * discount_factor`` within the same snapshot.
    - ``bulk_discount_applied`` is true exactly when ``base_price > 1000``.
    """

    quantity: float
    unit_price: float
    base_price: float
    discount_factor: float
    price: float
    bulk_discount_applied: bool
    currency: str
