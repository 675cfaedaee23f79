"""
Pricing service for resolving units per sale.

Looks up the price rules in effect for a product on a date and applies the
resolution policy from `domain/pricing.py`. A missing rule is a normal outcome
(1 unit, no rule reference), not an error.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from domain.pricing import UnitsPerSale, resolve_price_rule, units_for_rule
from domain.product import PriceRule
from repositories.interfaces import PriceRuleStore

logger = logging.getLogger(__name__)


class PriceRuleService:
    """Read-only price lookups for sale entry."""

    def __init__(self, store: PriceRuleStore) -> None:
        self._store = store

    def resolve_rule(self, product_id: int, price: Decimal, on_date: date) -> Optional[PriceRule]:
        """Return the applicable rule, or None if no rule matches."""

        try:
            rules = self._store.list_effective_rules(product_id, on_date)
        except Exception:
            logger.exception(
                "Failed to get price rules for Product %s, Price %s, Date %s",
                product_id, price, on_date,
            )
            raise
        return resolve_price_rule(rules, product_id, price, on_date)

    def get_units_for_product(self, product_id: int, price: Decimal, on_date: date) -> UnitsPerSale:
        """
        Units implied by charging `price` for a product on `on_date`.

        Example:
            units = service.get_units_for_product(3, Decimal("38.00"), date(2025, 6, 1))
            # UnitsPerSale(units=2, price_rule_id=...) with the seeded candle tiers
        """

        rule = self.resolve_rule(product_id, price, on_date)
        if rule is None:
            logger.warning(
                "No price rule found for Product %s, Price %s, Date %s. Defaulting to 1 unit per sale.",
                product_id, price, on_date,
            )
        elif rule.units_per_sale <= 0:
            logger.warning(
                "Price rule %s has units_per_sale=%s; counting 1 unit per sale",
                rule.price_rule_id, rule.units_per_sale,
            )
        return units_for_rule(rule)


__all__ = ["PriceRuleService"]
