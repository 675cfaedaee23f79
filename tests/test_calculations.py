"""
Tests for `domain/calculations.py`.

Covers contract rules:
- Net amount = price - discount.
- Brand summaries partition sales by brand, brand descending, sales within a
  brand by sale_id descending.
- Payment grouping omits methods with no payments.
- Difference = total payments - total net sales.
- Event summary counts units for TOTEM and CANDLES only and reports every
  payment method.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from domain.calculations import (
    calculate_net_amount,
    calculate_net_revenue,
    calculate_payment_difference,
    calculate_total_discounts,
    calculate_total_payments,
    calculate_total_revenue,
    get_amount_for_method,
    group_payments_by_method,
    group_sales_by_brand,
    summarize_event,
    summarize_payments,
    validate_sale_input,
)
from domain.enums import Brand, PaymentMethod
from domain.event import Event, EventDay
from fakes import CANDLES_PRODUCT, CERAMICS_PRODUCT, TOTEM_PRODUCT, make_payment, make_sale


def test_net_amount_subtracts_absolute_discount() -> None:
    assert calculate_net_amount(Decimal("40"), Decimal("5")) == Decimal("35")
    assert make_sale(1, TOTEM_PRODUCT, "40", discount="5").net_amount == Decimal("35")


def test_validate_sale_input_rejects_non_positive_values() -> None:
    """Verify price and quantity must both be greater than zero."""

    assert validate_sale_input(Decimal("10"), 1).is_valid

    zero_price = validate_sale_input(Decimal("0"), 1)
    assert not zero_price.is_valid
    assert zero_price.error_message == "Unit price must be greater than zero"

    zero_units = validate_sale_input(Decimal("10"), 0)
    assert not zero_units.is_valid
    assert zero_units.error_message == "Quantity units must be greater than zero"


def test_group_sales_by_brand_totals_and_order() -> None:
    """Verify per-brand totals and brand-descending, sale_id-descending ordering."""

    sales = [
        make_sale(1, TOTEM_PRODUCT, "40", quantity_units=1),
        make_sale(2, TOTEM_PRODUCT, "70", quantity_units=2, discount="10"),
        make_sale(3, CANDLES_PRODUCT, "38", quantity_units=2),
        make_sale(4, CERAMICS_PRODUCT, "25"),
    ]

    summaries = group_sales_by_brand(sales)

    assert [s.brand for s in summaries] == [Brand.CANDLES, Brand.CERAMICS, Brand.TOTEM]

    totem = summaries[2]
    assert totem.total_price == Decimal("110")
    assert totem.total_discount == Decimal("10")
    assert totem.net_total == Decimal("100")
    assert totem.total_quantity_units == 3
    assert totem.sales_count == 2
    assert [s.sale_id for s in totem.sales] == [2, 1]


def test_group_sales_by_brand_empty_input() -> None:
    assert group_sales_by_brand([]) == []


def test_group_sales_by_brand_requires_product() -> None:
    sale = replace(make_sale(1, TOTEM_PRODUCT, "40"), product=None)

    with pytest.raises(ValueError):
        group_sales_by_brand([sale])


def test_revenue_helpers() -> None:
    sales = [
        make_sale(1, TOTEM_PRODUCT, "40", discount="5"),
        make_sale(2, CANDLES_PRODUCT, "60"),
    ]

    assert calculate_total_revenue(sales) == Decimal("100")
    assert calculate_total_discounts(sales) == Decimal("5")
    assert calculate_net_revenue(sales) == Decimal("95")
    assert calculate_net_revenue([]) == Decimal("0")


def test_group_payments_by_method_omits_absent_methods() -> None:
    payments = [
        make_payment(1, PaymentMethod.CASH, "60"),
        make_payment(2, PaymentMethod.CARD, "40"),
    ]

    grouped = group_payments_by_method(payments)

    assert grouped == {PaymentMethod.CASH: Decimal("60"), PaymentMethod.CARD: Decimal("40")}
    assert PaymentMethod.REVOLUT_LIDIA not in grouped
    assert get_amount_for_method(payments, PaymentMethod.REVOLUT_LIDIA) == Decimal("0")
    assert calculate_total_payments(payments) == Decimal("100")


def test_payment_difference_sign() -> None:
    assert calculate_payment_difference(Decimal("100"), Decimal("92")) == Decimal("8")
    assert calculate_payment_difference(Decimal("80"), Decimal("92")) == Decimal("-12")


def test_summarize_payments_reconciles_day() -> None:
    """Verify payments 60 + 40 against net sales of 92 leave a difference of 8."""

    payments = [
        make_payment(1, PaymentMethod.CASH, "60"),
        make_payment(2, PaymentMethod.CARD, "40"),
    ]
    sales = [
        make_sale(1, CANDLES_PRODUCT, "57", quantity_units=3),
        make_sale(2, CANDLES_PRODUCT, "38", quantity_units=2, discount="3"),
    ]

    summary = summarize_payments(payments, sales)

    assert summary.total_payments == Decimal("100")
    assert summary.total_sales == Decimal("92")
    assert summary.difference == Decimal("8")
    assert summary.brand_sales_totals == {Brand.CANDLES: Decimal("92")}
    assert summary.payments[PaymentMethod.CASH] == Decimal("60")


def test_summarize_event_across_days() -> None:
    """Verify event totals span all days and unit counts skip ceramics."""

    day_1 = EventDay(
        event_day_id=1,
        event_id=9,
        date=date(2025, 6, 1),
        sales=(
            make_sale(1, TOTEM_PRODUCT, "70", quantity_units=2),
            make_sale(2, CERAMICS_PRODUCT, "25", quantity_units=4),
        ),
        payments=(make_payment(1, PaymentMethod.CASH, "95"),),
    )
    day_2 = EventDay(
        event_day_id=2,
        event_id=9,
        date=date(2025, 6, 2),
        sales=(make_sale(3, CANDLES_PRODUCT, "57", quantity_units=3, discount="7", event_day_id=2),),
        payments=(make_payment(2, PaymentMethod.CARD, "50", event_day_id=2),),
    )
    event = Event(9, "Summer Fair", date(2025, 6, 1), date(2025, 6, 2), days=(day_1, day_2))

    summary = summarize_event(event)

    assert summary.totem_count == 2
    assert summary.candles_count == 3
    assert summary.totem_revenue == Decimal("70")
    assert summary.ceramics_revenue == Decimal("25")
    assert summary.candles_revenue == Decimal("50")
    assert summary.total_revenue == Decimal("145")
    assert summary.total_payments == Decimal("145")
    assert summary.difference == Decimal("0")
    assert set(summary.payments_by_method) == set(PaymentMethod)
    assert summary.amount_for(PaymentMethod.REVOLUT_IVAYLO) == Decimal("0")


def test_summarize_event_without_days() -> None:
    event = Event(1, "Empty", date(2025, 6, 1), date(2025, 6, 1))

    summary = summarize_event(event)

    assert summary.total_revenue == Decimal("0")
    assert summary.totem_count == 0
    assert all(amount == Decimal("0") for amount in summary.payments_by_method.values())
