"""
Dependency wiring for the API.

Each request gets services built over the Supabase repositories and the shared
WebSocket hub. Tests replace the store providers through
`app.dependency_overrides`.
"""

from __future__ import annotations

from fastapi import Depends

from api.realtime import get_sales_hub
from repositories.client import get_supabase
from repositories.event_repository import SupabaseEventRepository
from repositories.interfaces import (
    EventStore,
    PaymentStore,
    PriceRuleStore,
    ProductStore,
    SaleStore,
)
from repositories.payment_repository import SupabasePaymentRepository
from repositories.pricing_repository import SupabasePriceRuleRepository
from repositories.product_repository import SupabaseProductRepository
from repositories.sale_repository import SupabaseSaleRepository
from services.event_service import EventService
from services.notifications import ChangeBroadcaster, NotificationSink
from services.payment_service import PaymentLedger
from services.pricing_service import PriceRuleService
from services.product_service import ProductService
from services.sale_service import SaleRecorder
from services.summary_service import AggregationEngine


def get_sale_store() -> SaleStore:
    return SupabaseSaleRepository(get_supabase())


def get_payment_store() -> PaymentStore:
    return SupabasePaymentRepository(get_supabase())


def get_price_rule_store() -> PriceRuleStore:
    return SupabasePriceRuleRepository(get_supabase())


def get_product_store() -> ProductStore:
    return SupabaseProductRepository(get_supabase())


def get_event_store() -> EventStore:
    return SupabaseEventRepository(get_supabase())


def get_notification_sink() -> NotificationSink:
    return get_sales_hub()


def get_sale_recorder(
    store: SaleStore = Depends(get_sale_store),
    sink: NotificationSink = Depends(get_notification_sink),
) -> SaleRecorder:
    return SaleRecorder(store, ChangeBroadcaster(sink))


def get_payment_ledger(store: PaymentStore = Depends(get_payment_store)) -> PaymentLedger:
    return PaymentLedger(store)


def get_price_rule_service(
    store: PriceRuleStore = Depends(get_price_rule_store),
) -> PriceRuleService:
    return PriceRuleService(store)


def get_product_service(store: ProductStore = Depends(get_product_store)) -> ProductService:
    return ProductService(store)


def get_event_service(store: EventStore = Depends(get_event_store)) -> EventService:
    return EventService(store)


def get_aggregation_engine(
    sale_store: SaleStore = Depends(get_sale_store),
    payment_store: PaymentStore = Depends(get_payment_store),
    event_store: EventStore = Depends(get_event_store),
) -> AggregationEngine:
    return AggregationEngine(sale_store, payment_store, event_store)
