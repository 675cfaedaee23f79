"""
Domain: Products and their date-effective price rules.

A PriceRule maps a charged price to an implied unit count for one product
within a validity window [effective_from, effective_to]. An absent
effective_to means the rule is open-ended.

This module contains only pure domain entities: no I/O, no database.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from domain.enums import Brand


@dataclass(frozen=True, slots=True)
class Product:
    product_id: int
    name: str
    brand: Brand
    is_active: bool = True


@dataclass(frozen=True, slots=True)
class PriceRule:
    """
    Date-effective pricing tier for a product.

    Several rules may share the same (product_id, price); resolution picks the
    one that applies on a given date (see `domain/pricing.py`).
    """

    price_rule_id: int
    product_id: int
    price: Decimal
    units_per_sale: int
    sort_order: int
    effective_from: date
    effective_to: Optional[date] = None

    def __post_init__(self) -> None:
        if self.effective_to is not None and self.effective_to < self.effective_from:
            raise ValueError("effective_to must be >= effective_from")

    def is_effective_on(self, on_date: date) -> bool:
        """True iff effective_from <= on_date <= effective_to (open end when None)."""

        if self.effective_from > on_date:
            return False
        return self.effective_to is None or self.effective_to >= on_date
