"""
Sale repository (persistence).

This module provides *only* persistence operations for sales. It does not
validate prices or quantities and never notifies subscribers; both belong to
the sale service.
"""

from __future__ import annotations

from typing import Any, List, Optional

from supabase import Client  # type: ignore[import-not-found]

from domain.sale import NewSale, SaleChanges, SaleRecord
from domain.time import to_iso_utc
from repositories.interfaces import SaleStore
from repositories.rows import SALE_WITH_PRODUCT, SALES_TABLE, execute, row_to_sale


class SupabaseSaleRepository(SaleStore):
    """Sales table access through the Supabase client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def list_by_event_day(self, event_day_id: int) -> List[SaleRecord]:
        rows = execute(
            self._client.table(SALES_TABLE)
            .select(SALE_WITH_PRODUCT)
            .eq("event_day_id", event_day_id)
            .order("sale_id", desc=True),
            "list sales",
        )
        return [row_to_sale(row) for row in rows]

    def get(self, sale_id: int) -> Optional[SaleRecord]:
        rows = execute(
            self._client.table(SALES_TABLE)
            .select(SALE_WITH_PRODUCT)
            .eq("sale_id", sale_id)
            .limit(1),
            "get sale",
        )
        if not rows:
            return None
        return row_to_sale(rows[0])

    def insert(self, sale: NewSale) -> SaleRecord:
        """
        Insert a new sale and re-read it with the product attached.

        The insert response carries only the sales columns.
        """

        payload: dict[str, Any] = {
            "event_day_id": sale.event_day_id,
            "product_id": sale.product_id,
            "price_rule_id": sale.price_rule_id,
            "price": str(sale.price),
            "quantity_units": sale.quantity_units,
            "discount_value": str(sale.discount_value),
            "notes": sale.notes,
            "created_at_utc": to_iso_utc(sale.created_at, name="created_at"),
        }

        rows = execute(self._client.table(SALES_TABLE).insert(payload), "record sale")
        if not rows:
            raise RuntimeError("Failed to record sale: insert returned no row")

        sale_id = int(rows[0]["sale_id"])
        saved = self.get(sale_id)
        if saved is None:
            raise RuntimeError(f"Failed to record sale: sale {sale_id} not readable after insert")
        return saved

    def update(self, sale_id: int, changes: SaleChanges) -> Optional[SaleRecord]:
        payload: dict[str, Any] = {
            "price": str(changes.price),
            "quantity_units": changes.quantity_units,
            "discount_value": str(changes.discount_value),
            "notes": changes.notes,
            "price_rule_id": changes.price_rule_id,
        }

        rows = execute(
            self._client.table(SALES_TABLE).update(payload).eq("sale_id", sale_id),
            "update sale",
        )
        if not rows:
            return None
        return self.get(sale_id)

    def delete(self, sale_id: int) -> bool:
        rows = execute(
            self._client.table(SALES_TABLE).delete().eq("sale_id", sale_id),
            "delete sale",
        )
        return bool(rows)


__all__ = ["SupabaseSaleRepository"]
