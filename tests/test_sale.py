"""
Tests for `domain/sale.py`.

Covers contract rules:
- created_at, when present, must be a UTC timestamp.
- Sale entities are immutable (frozen).
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from domain.sale import NewSale, SaleRecord


def test_sale_record_created_at_must_be_utc() -> None:
    """Verify created_at enforces UTC timezone-aware timestamp."""

    with pytest.raises(ValueError):
        SaleRecord(
            sale_id=1,
            event_day_id=1,
            product_id=1,
            price=Decimal("40"),
            quantity_units=1,
            created_at=datetime(2025, 1, 1, 0, 0, 0),
        )

    with pytest.raises(ValueError):
        SaleRecord(
            sale_id=1,
            event_day_id=1,
            product_id=1,
            price=Decimal("40"),
            quantity_units=1,
            created_at=datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone(timedelta(hours=2))),
        )


def test_new_sale_requires_utc_timestamp() -> None:
    with pytest.raises(ValueError):
        NewSale(
            event_day_id=1,
            product_id=1,
            price=Decimal("40"),
            quantity_units=1,
            discount_value=Decimal("0"),
            created_at=datetime(2025, 1, 1, 0, 0, 0),
        )


def test_sale_record_is_immutable() -> None:
    """Verify SaleRecord cannot be mutated after creation (frozen entity)."""

    sale = SaleRecord(
        sale_id=1,
        event_day_id=1,
        product_id=1,
        price=Decimal("40"),
        quantity_units=1,
        created_at=datetime(2025, 1, 1, 0, 0, 0, tzinfo=timezone.utc),
    )

    with pytest.raises(FrozenInstanceError):
        sale.price = Decimal("50")  # type: ignore[misc]


def test_sale_record_defaults() -> None:
    sale = SaleRecord(sale_id=1, event_day_id=1, product_id=1, price=Decimal("40"), quantity_units=1)

    assert sale.discount_value == Decimal("0")
    assert sale.net_amount == Decimal("40")
    assert sale.price_rule_id is None
    assert sale.product is None
