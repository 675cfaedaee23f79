"""
Product repository for the catalog.

Read-only access to products and their full price rule lists.
"""

from __future__ import annotations

from typing import List

from supabase import Client  # type: ignore[import-not-found]

from domain.product import PriceRule, Product
from repositories.interfaces import ProductStore
from repositories.rows import (
    PRICE_RULES_TABLE,
    PRODUCTS_TABLE,
    execute,
    row_to_price_rule,
    row_to_product,
)


class SupabaseProductRepository(ProductStore):
    def __init__(self, client: Client) -> None:
        self._client = client

    def list_active_products(self) -> List[Product]:
        rows = execute(
            self._client.table(PRODUCTS_TABLE)
            .select("*")
            .eq("is_active", True)
            .order("brand", desc=True),
            "list products",
        )
        return [row_to_product(row) for row in rows]

    def list_price_rules(self, product_id: int) -> List[PriceRule]:
        rows = execute(
            self._client.table(PRICE_RULES_TABLE)
            .select("*")
            .eq("product_id", product_id)
            .order("sort_order"),
            "list price rules",
        )
        return [row_to_price_rule(row) for row in rows]


__all__ = ["SupabaseProductRepository"]
