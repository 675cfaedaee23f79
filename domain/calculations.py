"""
Domain: pure sales and payment calculations.

No I/O and no shared state; every function is deterministic given its inputs
and safe to call concurrently.

Contract excerpts implemented here:
- Net amount for one sale = price - discount (discount is absolute).
- Brand summaries partition sales by product brand; each partition carries
  sum(price), sum(discount), sum(quantity), count, and its sales ordered by
  sale_id descending. Net total is derived.
- Payments grouped by method sum amounts per method; methods without payments
  are absent from the mapping.
- Reconciliation difference = total payments - total net sales.
"""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List

from domain.enums import Brand, PaymentMethod
from domain.errors import ValidationResult
from domain.event import Event
from domain.payment import Payment
from domain.sale import SaleRecord
from domain.summaries import BrandSalesSummary, EventSummary, PaymentSummary

_ZERO = Decimal("0")

# Brands whose unit counts are rolled up in the event summary.
COUNTED_BRANDS = (Brand.TOTEM, Brand.CANDLES)


def calculate_net_amount(price: Decimal, discount: Decimal) -> Decimal:
    return price - discount


def validate_sale_input(unit_price: Decimal, quantity_units: int) -> ValidationResult:
    """Unit price and quantity must both be > 0. Reports instead of raising."""

    if unit_price <= 0:
        return ValidationResult.invalid("Unit price must be greater than zero")
    if quantity_units <= 0:
        return ValidationResult.invalid("Quantity units must be greater than zero")
    return ValidationResult.valid()


def _brand_of(sale: SaleRecord) -> Brand:
    if sale.product is None:
        raise ValueError(f"Sale {sale.sale_id} has no product attached; brand is unknown")
    return sale.product.brand


def group_sales_by_brand(sales: Iterable[SaleRecord]) -> List[BrandSalesSummary]:
    """
    Partition sales by brand and aggregate each partition.

    Summaries are ordered by brand descending; every sale must carry its
    product.
    """

    by_brand: Dict[Brand, List[SaleRecord]] = defaultdict(list)
    for sale in sales:
        by_brand[_brand_of(sale)].append(sale)

    return [
        _create_brand_summary(brand, by_brand[brand])
        for brand in sorted(by_brand, reverse=True)
    ]


def _create_brand_summary(brand: Brand, sales: List[SaleRecord]) -> BrandSalesSummary:
    return BrandSalesSummary(
        brand=brand,
        sales=sorted(sales, key=lambda s: s.sale_id, reverse=True),
        total_price=sum((s.price for s in sales), _ZERO),
        total_discount=sum((s.discount_value for s in sales), _ZERO),
        total_quantity_units=sum(s.quantity_units for s in sales),
        sales_count=len(sales),
    )


def calculate_total_revenue(sales: Iterable[SaleRecord]) -> Decimal:
    return sum((s.price for s in sales), _ZERO)


def calculate_total_discounts(sales: Iterable[SaleRecord]) -> Decimal:
    return sum((s.discount_value for s in sales), _ZERO)


def calculate_net_revenue(sales: Iterable[SaleRecord]) -> Decimal:
    """Revenue minus discounts."""

    sales = list(sales)
    return calculate_total_revenue(sales) - calculate_total_discounts(sales)


def calculate_total_payments(payments: Iterable[Payment]) -> Decimal:
    return sum((p.amount for p in payments), _ZERO)


def calculate_payment_difference(total_payments: Decimal, total_sales: Decimal) -> Decimal:
    """Positive: more counted than sold. Negative: shortfall."""

    return total_payments - total_sales


def group_payments_by_method(payments: Iterable[Payment]) -> Dict[PaymentMethod, Decimal]:
    totals: Dict[PaymentMethod, Decimal] = {}
    for payment in payments:
        totals[payment.method] = totals.get(payment.method, _ZERO) + payment.amount
    return totals


def get_amount_for_method(payments: Iterable[Payment], method: PaymentMethod) -> Decimal:
    return sum((p.amount for p in payments if p.method == method), _ZERO)


def summarize_payments(
    payments: Iterable[Payment], sales: Iterable[SaleRecord]
) -> PaymentSummary:
    """Reconcile one scope's counted payments against its recorded sales."""

    payments = list(payments)
    sales = list(sales)

    total_payments = calculate_total_payments(payments)
    total_sales = calculate_net_revenue(sales)

    return PaymentSummary(
        payments=group_payments_by_method(payments),
        brand_sales_totals={s.brand: s.net_total for s in group_sales_by_brand(sales)},
        total_payments=total_payments,
        total_sales=total_sales,
        difference=calculate_payment_difference(total_payments, total_sales),
    )


def summarize_event(event: Event) -> EventSummary:
    """
    Flatten every day's sales and payments and aggregate across the union.

    Unit counts cover TOTEM and CANDLES only. Per-method payment totals are
    reported for every method, zero when nothing was counted.
    """

    all_sales = [sale for day in event.days for sale in day.sales]
    all_payments = [payment for day in event.days for payment in day.payments]

    revenue: Dict[Brand, Decimal] = {brand: _ZERO for brand in Brand}
    units: Dict[Brand, int] = {brand: 0 for brand in COUNTED_BRANDS}
    for sale in all_sales:
        brand = _brand_of(sale)
        revenue[brand] += sale.net_amount
        if brand in units:
            units[brand] += sale.quantity_units

    payments_by_method = {method: _ZERO for method in PaymentMethod}
    payments_by_method.update(group_payments_by_method(all_payments))

    return EventSummary(
        event_id=event.event_id,
        event_name=event.name,
        start_date=event.start_date,
        end_date=event.end_date,
        totem_count=units[Brand.TOTEM],
        candles_count=units[Brand.CANDLES],
        totem_revenue=revenue[Brand.TOTEM],
        ceramics_revenue=revenue[Brand.CERAMICS],
        candles_revenue=revenue[Brand.CANDLES],
        total_revenue=sum(revenue.values(), _ZERO),
        payments_by_method=payments_by_method,
        total_payments=calculate_total_payments(all_payments),
    )
