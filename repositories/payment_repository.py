"""
Payment repository (persistence).

One row per (event_day_id, method). Upsert is check-then-write; the database
is expected to back this with a unique constraint on (event_day_id, method)
so that concurrent upserts for the same key cannot create duplicates.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, List, Optional

from postgrest.exceptions import APIError  # type: ignore[import-not-found]
from supabase import Client  # type: ignore[import-not-found]

from domain.enums import PaymentMethod
from domain.payment import Payment
from repositories.interfaces import PaymentStore
from repositories.rows import PAYMENTS_TABLE, execute, row_to_payment

logger = logging.getLogger(__name__)

# Postgres unique_violation
_UNIQUE_VIOLATION = "23505"


class SupabasePaymentRepository(PaymentStore):
    """Payments table access through the Supabase client."""

    def __init__(self, client: Client) -> None:
        self._client = client

    def list_by_event_day(self, event_day_id: int) -> List[Payment]:
        rows = execute(
            self._client.table(PAYMENTS_TABLE)
            .select("*")
            .eq("event_day_id", event_day_id)
            .order("method"),
            "list payments",
        )
        return [row_to_payment(row) for row in rows]

    def find(self, event_day_id: int, method: PaymentMethod) -> Optional[Payment]:
        rows = execute(
            self._client.table(PAYMENTS_TABLE)
            .select("*")
            .eq("event_day_id", event_day_id)
            .eq("method", int(method))
            .limit(1),
            "find payment",
        )
        if not rows:
            return None
        return row_to_payment(rows[0])

    def upsert(self, event_day_id: int, method: PaymentMethod, amount: Decimal) -> Payment:
        existing = self.find(event_day_id, method)
        if existing is not None:
            return self._update_amount(existing.payment_id, amount)

        payload: dict[str, Any] = {
            "event_day_id": event_day_id,
            "method": int(method),
            "amount": str(amount),
        }
        try:
            rows = execute(self._client.table(PAYMENTS_TABLE).insert(payload), "insert payment")
        except APIError as exc:
            if str(getattr(exc, "code", "")) != _UNIQUE_VIOLATION:
                raise
            # A concurrent upsert inserted the row first; overwrite it instead.
            logger.info(
                "Payment for EventDay %s, Method %s inserted concurrently; updating",
                event_day_id, method.name,
            )
            concurrent = self.find(event_day_id, method)
            if concurrent is None:
                raise
            return self._update_amount(concurrent.payment_id, amount)

        if not rows:
            raise RuntimeError("Failed to insert payment: insert returned no row")
        return row_to_payment(rows[0])

    def _update_amount(self, payment_id: int, amount: Decimal) -> Payment:
        rows = execute(
            self._client.table(PAYMENTS_TABLE)
            .update({"amount": str(amount)})
            .eq("payment_id", payment_id),
            "update payment",
        )
        if not rows:
            raise RuntimeError(f"Failed to update payment: payment {payment_id} vanished")
        return row_to_payment(rows[0])

    def delete(self, payment_id: int) -> bool:
        rows = execute(
            self._client.table(PAYMENTS_TABLE).delete().eq("payment_id", payment_id),
            "delete payment",
        )
        return bool(rows)


__all__ = ["SupabasePaymentRepository"]
