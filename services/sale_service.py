"""
Sale recording service.

Handles:
- Validated creation, update and deletion of sales
- Notifying event-day subscribers after each committed change
- Reading a day's sales

Failure semantics:
- Invalid input raises ValidationError before any store call or notification.
- Unknown sales are reported as None/False, not raised.
- Store faults are logged and propagate unchanged; nothing is retried.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Optional

from domain.calculations import validate_sale_input
from domain.errors import ValidationError
from domain.sale import NewSale, SaleChanges, SaleRecord
from domain.time import utc_now
from repositories.interfaces import SaleStore
from services.notifications import ChangeBroadcaster

logger = logging.getLogger(__name__)


def _require_valid(unit_price: Decimal, quantity_units: int) -> None:
    validation = validate_sale_input(unit_price, quantity_units)
    if not validation.is_valid:
        logger.warning("Rejected sale input: %s", validation.error_message)
        raise ValidationError(validation.error_message or "Invalid sale")


class SaleRecorder:
    """Orchestrates sale mutations against a SaleStore."""

    def __init__(self, store: SaleStore, broadcaster: ChangeBroadcaster) -> None:
        self._store = store
        self._broadcaster = broadcaster

    def get_sales_by_event_day(self, event_day_id: int) -> List[SaleRecord]:
        """Sales of a day with product attached, most recent first."""

        try:
            return self._store.list_by_event_day(event_day_id)
        except Exception:
            logger.exception("Failed to retrieve sales for EventDay %s", event_day_id)
            raise

    def get_sale(self, sale_id: int) -> Optional[SaleRecord]:
        try:
            return self._store.get(sale_id)
        except Exception:
            logger.exception("Failed to retrieve sale %s", sale_id)
            raise

    def create_sale(
        self,
        event_day_id: int,
        product_id: int,
        price_rule_id: Optional[int],
        unit_price: Decimal,
        quantity_units: int,
        discount_value: Decimal = Decimal("0"),
        notes: Optional[str] = None,
    ) -> SaleRecord:
        """
        Record a new sale and notify the day's subscribers.

        Returns:
            The persisted SaleRecord with its product attached.

        Raises:
            ValidationError: If unit_price or quantity_units is not > 0.
        """

        _require_valid(unit_price, quantity_units)

        logger.info(
            "Creating sale for EventDay %s, Product %s, Price %s, Qty %s",
            event_day_id, product_id, unit_price, quantity_units,
        )

        new_sale = NewSale(
            event_day_id=event_day_id,
            product_id=product_id,
            price_rule_id=price_rule_id,
            price=unit_price,
            quantity_units=quantity_units,
            discount_value=discount_value,
            notes=notes,
            created_at=utc_now(),
        )

        try:
            saved = self._store.insert(new_sale)
        except Exception:
            logger.exception("Failed to create sale for EventDay %s", event_day_id)
            raise

        self._broadcaster.notify_sale_changed(saved.event_day_id, saved.sale_id)

        logger.info("Successfully created sale %s", saved.sale_id)
        return saved

    def update_sale(
        self,
        sale_id: int,
        unit_price: Decimal,
        quantity_units: int,
        discount_value: Decimal,
        notes: Optional[str],
        price_rule_id: Optional[int] = None,
    ) -> Optional[SaleRecord]:
        """
        Overwrite a sale's mutable fields and notify its day's subscribers.

        event_day_id and product_id are never changed.

        Returns:
            The updated SaleRecord, or None if no sale has that id.

        Raises:
            ValidationError: If unit_price or quantity_units is not > 0.
        """

        _require_valid(unit_price, quantity_units)

        logger.info(
            "Updating sale %s, Price %s, Qty %s", sale_id, unit_price, quantity_units
        )

        changes = SaleChanges(
            price=unit_price,
            quantity_units=quantity_units,
            discount_value=discount_value,
            notes=notes,
            price_rule_id=price_rule_id,
        )

        try:
            updated = self._store.update(sale_id, changes)
        except Exception:
            logger.exception("Failed to update sale %s", sale_id)
            raise

        if updated is None:
            logger.warning("Sale %s not found for update", sale_id)
            return None

        self._broadcaster.notify_sale_changed(updated.event_day_id, sale_id)

        logger.info("Successfully updated sale %s", sale_id)
        return updated

    def delete_sale(self, sale_id: int) -> bool:
        """
        Delete a sale.

        Returns:
            True if a sale was removed (subscribers are notified), False if
            nothing matched (no notification).
        """

        try:
            existing = self._store.get(sale_id)
            deleted = existing is not None and self._store.delete(sale_id)
        except Exception:
            logger.exception("Failed to delete sale %s", sale_id)
            raise

        if not deleted:
            logger.warning("Sale %s not found for deletion", sale_id)
            return False

        logger.info("Deleted sale %s from EventDay %s", sale_id, existing.event_day_id)
        self._broadcaster.notify_sale_changed(existing.event_day_id, sale_id)
        return True


__all__ = ["SaleRecorder"]
