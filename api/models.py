"""
API Request and Response Models.

Pydantic models for validating API requests and serializing responses.
Brand and payment method tags are exposed by name ("TOTEM", "CASH") together
with their display labels.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from api.labels import brand_label, payment_method_label
from domain.event import Event, EventDay
from domain.payment import Payment
from domain.pricing import UnitsPerSale
from domain.product import PriceRule, Product
from domain.sale import SaleRecord
from domain.summaries import BrandSalesSummary, EventSummary, PaymentSummary

# Alias so the `date` field below does not shadow its own type.
CalendarDate = date


# ============================================================================
# Catalog Models
# ============================================================================

class ProductResponse(BaseModel):
    product_id: int
    name: str
    brand: str
    brand_label: str
    is_active: bool

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            product_id=product.product_id,
            name=product.name,
            brand=product.brand.name,
            brand_label=brand_label(product.brand),
            is_active=product.is_active,
        )


class PriceRuleResponse(BaseModel):
    price_rule_id: int
    product_id: int
    price: Decimal
    units_per_sale: int
    sort_order: int
    effective_from: date
    effective_to: Optional[date] = None

    @classmethod
    def from_domain(cls, rule: PriceRule) -> "PriceRuleResponse":
        return cls(
            price_rule_id=rule.price_rule_id,
            product_id=rule.product_id,
            price=rule.price,
            units_per_sale=rule.units_per_sale,
            sort_order=rule.sort_order,
            effective_from=rule.effective_from,
            effective_to=rule.effective_to,
        )


class UnitsPerSaleResponse(BaseModel):
    """Units implied by a charged price; price_rule_id is null when no rule matched."""
    units: int
    price_rule_id: Optional[int] = None

    @classmethod
    def from_domain(cls, units: UnitsPerSale) -> "UnitsPerSaleResponse":
        return cls(units=units.units, price_rule_id=units.price_rule_id)

    class Config:
        json_schema_extra = {"example": {"units": 2, "price_rule_id": 3}}


# ============================================================================
# Event Models
# ============================================================================

class CreateEventRequest(BaseModel):
    """Request to create an event; one day is generated per date in the range."""
    name: str = Field(..., description="Event name (max 50 characters)")
    start_date: date
    end_date: date

    class Config:
        json_schema_extra = {
            "example": {
                "name": "Summer Craft Fair",
                "start_date": "2025-06-01",
                "end_date": "2025-06-03",
            }
        }


class EventDayResponse(BaseModel):
    event_day_id: int
    event_id: int
    date: CalendarDate
    starting_petty_cash: Optional[Decimal] = None

    @classmethod
    def from_domain(cls, day: EventDay) -> "EventDayResponse":
        return cls(
            event_day_id=day.event_day_id,
            event_id=day.event_id,
            date=day.date,
            starting_petty_cash=day.starting_petty_cash,
        )


class EventResponse(BaseModel):
    event_id: int
    name: str
    start_date: date
    end_date: date
    days: List[EventDayResponse]

    @classmethod
    def from_domain(cls, event: Event) -> "EventResponse":
        return cls(
            event_id=event.event_id,
            name=event.name,
            start_date=event.start_date,
            end_date=event.end_date,
            days=[EventDayResponse.from_domain(d) for d in event.days],
        )


class PettyCashRequest(BaseModel):
    """Starting petty cash for a day; null clears it."""
    amount: Optional[Decimal] = Field(None, ge=0)


class EventSummaryResponse(BaseModel):
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
    payments_by_method: Dict[str, Decimal]
    total_payments: Decimal
    difference: Decimal

    @classmethod
    def from_domain(cls, summary: EventSummary) -> "EventSummaryResponse":
        return cls(
            event_id=summary.event_id,
            event_name=summary.event_name,
            start_date=summary.start_date,
            end_date=summary.end_date,
            totem_count=summary.totem_count,
            candles_count=summary.candles_count,
            totem_revenue=summary.totem_revenue,
            ceramics_revenue=summary.ceramics_revenue,
            candles_revenue=summary.candles_revenue,
            total_revenue=summary.total_revenue,
            payments_by_method={m.name: a for m, a in summary.payments_by_method.items()},
            total_payments=summary.total_payments,
            difference=summary.difference,
        )


# ============================================================================
# Sale Models
# ============================================================================

class CreateSaleRequest(BaseModel):
    """
    Request to record a sale.

    When quantity_units is omitted it is resolved from the product's price
    rules for the event day's date (1 unit when no rule matches).
    """
    product_id: int
    price_rule_id: Optional[int] = None
    unit_price: Decimal
    quantity_units: Optional[int] = None
    discount_value: Decimal = Decimal("0")
    notes: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "product_id": 3,
                "unit_price": "38.00",
                "discount_value": "0",
                "notes": None,
            }
        }


class UpdateSaleRequest(BaseModel):
    unit_price: Decimal
    quantity_units: int
    discount_value: Decimal = Decimal("0")
    notes: Optional[str] = None
    price_rule_id: Optional[int] = None


class SaleResponse(BaseModel):
    sale_id: int
    event_day_id: int
    product_id: int
    product: Optional[ProductResponse] = None
    price_rule_id: Optional[int] = None
    price: Decimal
    quantity_units: int
    discount_value: Decimal
    net_amount: Decimal
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, sale: SaleRecord) -> "SaleResponse":
        return cls(
            sale_id=sale.sale_id,
            event_day_id=sale.event_day_id,
            product_id=sale.product_id,
            product=ProductResponse.from_domain(sale.product) if sale.product else None,
            price_rule_id=sale.price_rule_id,
            price=sale.price,
            quantity_units=sale.quantity_units,
            discount_value=sale.discount_value,
            net_amount=sale.net_amount,
            notes=sale.notes,
            created_at=sale.created_at,
        )


class BrandSalesSummaryResponse(BaseModel):
    brand: str
    brand_label: str
    sales: List[SaleResponse]
    total_price: Decimal
    total_discount: Decimal
    total_quantity_units: int
    sales_count: int
    net_total: Decimal

    @classmethod
    def from_domain(cls, summary: BrandSalesSummary) -> "BrandSalesSummaryResponse":
        return cls(
            brand=summary.brand.name,
            brand_label=brand_label(summary.brand),
            sales=[SaleResponse.from_domain(s) for s in summary.sales],
            total_price=summary.total_price,
            total_discount=summary.total_discount,
            total_quantity_units=summary.total_quantity_units,
            sales_count=summary.sales_count,
            net_total=summary.net_total,
        )


# ============================================================================
# Payment Models
# ============================================================================

class SavePaymentRequest(BaseModel):
    amount: Decimal

    class Config:
        json_schema_extra = {"example": {"amount": "350.00"}}


class PaymentResponse(BaseModel):
    payment_id: int
    event_day_id: int
    method: str
    method_label: str
    amount: Decimal

    @classmethod
    def from_domain(cls, payment: Payment) -> "PaymentResponse":
        return cls(
            payment_id=payment.payment_id,
            event_day_id=payment.event_day_id,
            method=payment.method.name,
            method_label=payment_method_label(payment.method),
            amount=payment.amount,
        )


class PaymentSummaryResponse(BaseModel):
    """Day reconciliation; difference = total_payments - total_sales."""
    payments: Dict[str, Decimal]
    brand_sales_totals: Dict[str, Decimal]
    total_payments: Decimal
    total_sales: Decimal
    difference: Decimal

    @classmethod
    def from_domain(cls, summary: PaymentSummary) -> "PaymentSummaryResponse":
        return cls(
            payments={m.name: a for m, a in summary.payments.items()},
            brand_sales_totals={b.name: t for b, t in summary.brand_sales_totals.items()},
            total_payments=summary.total_payments,
            total_sales=summary.total_sales,
            difference=summary.difference,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "payments": {"CASH": "60.00", "CARD": "40.00"},
                "brand_sales_totals": {"CANDLES": "92.00"},
                "total_payments": "100.00",
                "total_sales": "92.00",
                "difference": "8.00",
            }
        }
