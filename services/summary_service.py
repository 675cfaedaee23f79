"""
Aggregation service for sales and payment summaries.

Every call reads current data from the stores and recomputes; nothing is
cached between calls. The arithmetic lives in `domain/calculations.py`.
"""

from __future__ import annotations

import logging
from typing import List

from domain.calculations import group_sales_by_brand, summarize_event, summarize_payments
from domain.summaries import BrandSalesSummary, EventSummary, PaymentSummary
from repositories.interfaces import EventStore, PaymentStore, SaleStore
from services.results import ServiceResult

logger = logging.getLogger(__name__)


class AggregationEngine:
    """Builds brand, payment and event-wide summaries on demand."""

    def __init__(
        self,
        sale_store: SaleStore,
        payment_store: PaymentStore,
        event_store: EventStore,
    ) -> None:
        self._sales = sale_store
        self._payments = payment_store
        self._events = event_store

    def get_brand_sales_summaries(self, event_day_id: int) -> List[BrandSalesSummary]:
        """Per-brand totals for one event day, brand descending."""

        try:
            sales = self._sales.list_by_event_day(event_day_id)
        except Exception:
            logger.exception("Failed to get brand sales summaries for EventDay %s", event_day_id)
            raise

        summaries = group_sales_by_brand(sales)
        logger.info(
            "Retrieved %s brand summaries with %s total sales for EventDay %s",
            len(summaries), sum(s.sales_count for s in summaries), event_day_id,
        )
        return summaries

    def get_payment_summary(self, event_day_id: int) -> ServiceResult[PaymentSummary]:
        """Reconcile a day's counted payments against its net sales."""

        try:
            payments = self._payments.list_by_event_day(event_day_id)
            sales = self._sales.list_by_event_day(event_day_id)
            summary = summarize_payments(payments, sales)
        except Exception as exc:
            logger.exception("Failed to get payment summary for EventDay %s", event_day_id)
            return ServiceResult.fail(f"Failed to load payment data: {exc}")

        logger.info(
            "Payment summary for EventDay %s: Payments=%s, Sales=%s, Difference=%s",
            event_day_id, summary.total_payments, summary.total_sales, summary.difference,
        )
        return ServiceResult.ok(summary)

    def get_event_summary(self, event_id: int) -> ServiceResult[EventSummary]:
        """Totals across every day of an event."""

        try:
            event = self._events.get_event_with_all_data(event_id)
            if event is None:
                logger.warning("Event with ID %s not found", event_id)
                return ServiceResult.fail("Event not found")
            summary = summarize_event(event)
        except Exception as exc:
            logger.exception("Failed to get event summary for Event %s", event_id)
            return ServiceResult.fail(f"Failed to load event statistics: {exc}")

        logger.info(
            "Generated summary for Event %s: TotalRevenue=%s, TotalPayments=%s",
            event_id, summary.total_revenue, summary.total_payments,
        )
        return ServiceResult.ok(summary)


__all__ = ["AggregationEngine"]
