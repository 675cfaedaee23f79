"""
Domain: price rule resolution.

Maps a (product, price charged, date) triple to the PriceRule that applies and
the unit count it implies.

Resolution policy:
- Candidates are the product's rules whose price equals the charged price
  exactly and whose validity window contains the date
  (effective_from <= date <= effective_to, open end when effective_to is None).
- The candidate with the latest effective_from wins; ties are broken by
  ascending sort_order.
- No candidate is not an error: the sale counts as 1 unit with no rule
  reference.
- A matched rule with units_per_sale == 0 still supplies its identity, but the
  effective quantity is 1.

Pure functions only; safe to call concurrently.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from domain.product import PriceRule

DEFAULT_UNITS_PER_SALE = 1


@dataclass(frozen=True, slots=True)
class UnitsPerSale:
    """Effective unit count for a sale and the rule it came from, if any."""

    units: int
    price_rule_id: Optional[int] = None


def resolve_price_rule(
    rules: Iterable[PriceRule],
    product_id: int,
    price: Decimal,
    on_date: date,
) -> Optional[PriceRule]:
    """
    Select the single PriceRule applying to (product_id, price, on_date).

    Returns None when nothing matches.
    """

    candidates = [
        rule
        for rule in rules
        if rule.product_id == product_id
        and rule.price == price
        and rule.is_effective_on(on_date)
    ]
    if not candidates:
        return None

    # Latest effective_from first, then lowest sort_order.
    return min(candidates, key=lambda r: (-r.effective_from.toordinal(), r.sort_order))


def units_for_rule(rule: Optional[PriceRule]) -> UnitsPerSale:
    """Effective units for a resolved rule, applying the 1-unit fallbacks."""

    if rule is None:
        return UnitsPerSale(units=DEFAULT_UNITS_PER_SALE, price_rule_id=None)

    # units_per_sale is not validated anywhere upstream; zero would record
    # sales with no units.
    units = rule.units_per_sale if rule.units_per_sale > 0 else DEFAULT_UNITS_PER_SALE
    return UnitsPerSale(units=units, price_rule_id=rule.price_rule_id)
