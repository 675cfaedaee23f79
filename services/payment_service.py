"""
Payment ledger service.

Keeps the counted total per (event day, payment method). Saving a payment
overwrites the existing amount for that pair, so repeated saves converge to
one row holding the latest amount.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import List

from domain.enums import PaymentMethod
from domain.payment import Payment
from repositories.interfaces import PaymentStore

logger = logging.getLogger(__name__)


class PaymentLedger:
    def __init__(self, store: PaymentStore) -> None:
        self._store = store

    def get_payments_by_event_day(self, event_day_id: int) -> List[Payment]:
        """All payments for the day, ordered by method."""

        try:
            return self._store.list_by_event_day(event_day_id)
        except Exception:
            logger.exception("Failed to retrieve payments for EventDay %s", event_day_id)
            raise

    def save_payment(self, event_day_id: int, method: PaymentMethod, amount: Decimal) -> Payment:
        """Insert or overwrite the payment for (event_day_id, method)."""

        logger.info(
            "Saving payment for EventDay %s, Method %s, Amount %s",
            event_day_id, method.name, amount,
        )
        try:
            payment = self._store.upsert(event_day_id, method, amount)
        except Exception:
            logger.exception("Failed to save payment for EventDay %s", event_day_id)
            raise

        logger.info("Successfully saved payment %s", payment.payment_id)
        return payment

    def delete_payment(self, payment_id: int) -> None:
        """Remove a payment; an unknown id is silently ignored."""

        try:
            deleted = self._store.delete(payment_id)
        except Exception:
            logger.exception("Failed to delete payment %s", payment_id)
            raise

        if deleted:
            logger.info("Deleted payment %s", payment_id)
        else:
            logger.debug("Payment %s not found for deletion", payment_id)


__all__ = ["PaymentLedger"]
