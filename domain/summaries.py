"""
Domain: computed summaries (never persisted).

BrandSalesSummary - per-brand totals for a set of sales.
PaymentSummary    - one event day's payments reconciled against its sales.
EventSummary      - event-wide rollup across every day of an event.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List

from domain.enums import Brand, PaymentMethod
from domain.sale import SaleRecord


@dataclass(frozen=True, slots=True)
class BrandSalesSummary:
    brand: Brand
    sales: List[SaleRecord] = field(default_factory=list)
    total_price: Decimal = Decimal("0")
    total_discount: Decimal = Decimal("0")
    total_quantity_units: int = 0
    sales_count: int = 0

    @property
    def net_total(self) -> Decimal:
        return self.total_price - self.total_discount


@dataclass(frozen=True, slots=True)
class PaymentSummary:
    """
    Reconciliation for one event day.

    difference = total_payments - total_sales: positive means more money was
    counted than sales recorded, negative means a shortfall.
    """

    payments: Dict[PaymentMethod, Decimal]
    brand_sales_totals: Dict[Brand, Decimal]
    total_payments: Decimal
    total_sales: Decimal
    difference: Decimal


@dataclass(frozen=True, slots=True)
class EventSummary:
    """
    Event-wide totals aggregated across all event days.

    Unit counts are kept for TOTEM and CANDLES only; ceramics are tracked by
    revenue alone.
    """

    event_id: int
    event_name: str
    start_date: date
    end_date: date
    totem_count: int
    candles_count: int
    totem_revenue: Decimal
    ceramics_revenue: Decimal
    candles_revenue: Decimal
    total_revenue: Decimal
    payments_by_method: Dict[PaymentMethod, Decimal]
    total_payments: Decimal

    def amount_for(self, method: PaymentMethod) -> Decimal:
        return self.payments_by_method.get(method, Decimal("0"))

    @property
    def difference(self) -> Decimal:
        return self.total_payments - self.total_revenue
