"""
Domain: Sale transactions.

A Sale records one transaction on an event day: a product, the price paid,
the implied quantity of units and an absolute discount amount.

Snapshot rule:
- price and quantity_units are captured at entry time and never recomputed
  from later PriceRule edits.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from domain.product import Product
from domain.time import require_utc_timestamp


@dataclass(frozen=True, slots=True)
class SaleRecord:
    """
    Immutable sale row as persisted.

    `product` is attached by stores that load the product alongside the sale
    (listing by event day, fetching by id); grouping by brand requires it.
    """

    sale_id: int
    event_day_id: int
    product_id: int
    price: Decimal
    quantity_units: int
    discount_value: Decimal = Decimal("0")
    price_rule_id: Optional[int] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    product: Optional[Product] = None

    def __post_init__(self) -> None:
        if self.created_at is not None:
            require_utc_timestamp("created_at", self.created_at)

    @property
    def net_amount(self) -> Decimal:
        """Price minus discount (discount is an absolute amount)."""

        return self.price - self.discount_value


@dataclass(frozen=True, slots=True)
class NewSale:
    """Validated input for inserting a sale; the store assigns sale_id."""

    event_day_id: int
    product_id: int
    price: Decimal
    quantity_units: int
    discount_value: Decimal
    created_at: datetime
    price_rule_id: Optional[int] = None
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        require_utc_timestamp("created_at", self.created_at)


@dataclass(frozen=True, slots=True)
class SaleChanges:
    """Mutable fields of a sale. event_day_id and product_id never change."""

    price: Decimal
    quantity_units: int
    discount_value: Decimal
    notes: Optional[str] = None
    price_rule_id: Optional[int] = None
