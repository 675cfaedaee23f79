"""
Domain: counted payments.

A Payment is the single counted total for one payment method on one event
day. At most one Payment exists per (event_day_id, method); writes are upserts,
not a running ledger of transactions.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from domain.enums import PaymentMethod


@dataclass(frozen=True, slots=True)
class Payment:
    payment_id: int
    event_day_id: int
    method: PaymentMethod
    amount: Decimal
