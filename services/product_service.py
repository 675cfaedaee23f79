"""Product catalog reads for sale entry screens."""

from __future__ import annotations

import logging
from typing import List

from domain.product import PriceRule, Product
from repositories.interfaces import ProductStore

logger = logging.getLogger(__name__)


class ProductService:
    def __init__(self, store: ProductStore) -> None:
        self._store = store

    def get_active_products(self) -> List[Product]:
        """Active products, brand descending."""

        try:
            return self._store.list_active_products()
        except Exception:
            logger.exception("Failed to retrieve active products")
            raise

    def get_price_rules_for_product(self, product_id: int) -> List[PriceRule]:
        """Every rule of the product, sort_order ascending, for display."""

        try:
            return self._store.list_price_rules(product_id)
        except Exception:
            logger.exception("Failed to retrieve price rules for Product %s", product_id)
            raise


__all__ = ["ProductService"]
