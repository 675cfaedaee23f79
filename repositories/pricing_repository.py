"""
Pricing repository for querying price rules.

Fetches the rules of a product whose validity window contains a date. Choosing
among them (exact price, latest effective_from, sort order) is domain logic
and lives in `domain/pricing.py`.
"""

from __future__ import annotations

from datetime import date
from typing import List

from supabase import Client  # type: ignore[import-not-found]

from domain.product import PriceRule
from repositories.interfaces import PriceRuleStore
from repositories.rows import PRICE_RULES_TABLE, execute, row_to_price_rule


class SupabasePriceRuleRepository(PriceRuleStore):
    """price_rules table access through the Supabase client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def list_effective_rules(self, product_id: int, on_date: date) -> List[PriceRule]:
        """
        Rules for a product valid on a date.

        Example:
            rules = repo.list_effective_rules(3, date(2025, 6, 1))
            # effective_from <= 2025-06-01 and (effective_to is null or >= 2025-06-01)
        """

        day = on_date.isoformat()
        rows = execute(
            self._client.table(PRICE_RULES_TABLE)
            .select("*")
            .eq("product_id", product_id)
            .lte("effective_from", day)
            .or_(f"effective_to.is.null,effective_to.gte.{day}")
            .order("sort_order"),
            "fetch price rules",
        )
        return [row_to_price_rule(row) for row in rows]


__all__ = ["SupabasePriceRuleRepository"]
