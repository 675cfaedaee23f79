"""
Row mapping shared by the Supabase repositories.

Converts PostgREST rows (plain dicts, with embedded relations as nested dicts
or lists) into domain models, and wraps query execution with the error check
every repository performs.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Mapping, Optional

from domain.enums import Brand, PaymentMethod
from domain.event import Event, EventDay
from domain.payment import Payment
from domain.product import PriceRule, Product
from domain.sale import SaleRecord
from domain.time import parse_date, parse_optional_date, parse_utc_datetime

# Supabase table names.
# Keep these aligned with your database schema.
EVENTS_TABLE: str = "events"
EVENT_DAYS_TABLE: str = "event_days"
PRODUCTS_TABLE: str = "products"
PRICE_RULES_TABLE: str = "price_rules"
SALES_TABLE: str = "sales"
PAYMENTS_TABLE: str = "payments"

# Select list for sales with their product embedded (many-to-one).
SALE_WITH_PRODUCT: str = "*, products(*)"


def execute(query: Any, action: str) -> List[Mapping[str, Any]]:
    """
    Execute a PostgREST query and return its rows.

    Raises RuntimeError naming the failed action if the response carries an error.
    """

    response = query.execute()
    error = getattr(response, "error", None)
    if error:
        raise RuntimeError(f"Failed to {action}: {error}")
    return getattr(response, "data", None) or []


def to_decimal(value: Any) -> Decimal:
    return Decimal(str(value))


def _to_optional_decimal(value: Any) -> Optional[Decimal]:
    return None if value is None else to_decimal(value)


def row_to_product(row: Mapping[str, Any]) -> Product:
    return Product(
        product_id=int(row["product_id"]),
        name=str(row["name"]),
        brand=Brand(int(row["brand"])),
        is_active=bool(row.get("is_active", True)),
    )


def row_to_price_rule(row: Mapping[str, Any]) -> PriceRule:
    return PriceRule(
        price_rule_id=int(row["price_rule_id"]),
        product_id=int(row["product_id"]),
        price=to_decimal(row["price"]),
        units_per_sale=int(row["units_per_sale"]),
        sort_order=int(row.get("sort_order") or 0),
        effective_from=parse_date(row["effective_from"]),
        effective_to=parse_optional_date(row.get("effective_to")),
    )


def row_to_sale(row: Mapping[str, Any]) -> SaleRecord:
    """Convert a sales row (optionally with embedded `products`) into a SaleRecord."""

    product_row = row.get("products")
    price_rule_id = row.get("price_rule_id")
    created_at = row.get("created_at_utc")

    return SaleRecord(
        sale_id=int(row["sale_id"]),
        event_day_id=int(row["event_day_id"]),
        product_id=int(row["product_id"]),
        price_rule_id=int(price_rule_id) if price_rule_id is not None else None,
        price=to_decimal(row["price"]),
        quantity_units=int(row["quantity_units"]),
        discount_value=to_decimal(row.get("discount_value") or 0),
        notes=row.get("notes"),
        created_at=parse_utc_datetime(created_at) if created_at else None,
        product=row_to_product(product_row) if product_row else None,
    )


def row_to_payment(row: Mapping[str, Any]) -> Payment:
    return Payment(
        payment_id=int(row["payment_id"]),
        event_day_id=int(row["event_day_id"]),
        method=PaymentMethod(int(row["method"])),
        amount=to_decimal(row["amount"]),
    )


def row_to_event_day(row: Mapping[str, Any]) -> EventDay:
    """Convert an event_days row; embedded `sales` and `payments` are optional."""

    return EventDay(
        event_day_id=int(row["event_day_id"]),
        event_id=int(row["event_id"]),
        date=parse_date(row["date"]),
        starting_petty_cash=_to_optional_decimal(row.get("starting_petty_cash")),
        sales=tuple(row_to_sale(s) for s in row.get("sales") or ()),
        payments=tuple(row_to_payment(p) for p in row.get("payments") or ()),
    )


def row_to_event(row: Mapping[str, Any]) -> Event:
    """Convert an events row; embedded `event_days` are attached ordered by date."""

    days = sorted(
        (row_to_event_day(d) for d in row.get("event_days") or ()),
        key=lambda d: d.date,
    )
    return Event(
        event_id=int(row["event_id"]),
        name=str(row["name"]),
        start_date=parse_date(row["start_date"]),
        end_date=parse_date(row["end_date"]),
        days=tuple(days),
    )
