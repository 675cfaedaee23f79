"""
Store interfaces (repository pattern).

Services depend only on these contracts; implementations must be swappable
and return domain models. Storage faults are raised as exceptions and never
reported through return values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import List, Optional

from domain.enums import PaymentMethod
from domain.event import Event, EventDay, EventHeader, NewEvent
from domain.payment import Payment
from domain.product import PriceRule, Product
from domain.sale import NewSale, SaleChanges, SaleRecord


class SaleStore(ABC):
    """Interface for sale persistence operations."""

    @abstractmethod
    def list_by_event_day(self, event_day_id: int) -> List[SaleRecord]:
        """Return the day's sales with product attached, ordered by sale_id descending."""
        ...

    @abstractmethod
    def get(self, sale_id: int) -> Optional[SaleRecord]:
        """Return a sale with product attached, or None if not found."""
        ...

    @abstractmethod
    def insert(self, sale: NewSale) -> SaleRecord:
        """Insert a sale and return it with its assigned id and product attached."""
        ...

    @abstractmethod
    def update(self, sale_id: int, changes: SaleChanges) -> Optional[SaleRecord]:
        """Apply the mutable fields; return the updated sale, or None if not found."""
        ...

    @abstractmethod
    def delete(self, sale_id: int) -> bool:
        """Delete a sale; True iff a row was removed."""
        ...


class PaymentStore(ABC):
    """
    Interface for counted-payment persistence.

    Implementations must guarantee at most one row per (event_day_id, method),
    e.g. through a unique constraint.
    """

    @abstractmethod
    def list_by_event_day(self, event_day_id: int) -> List[Payment]:
        """Return the day's payments ordered by method."""
        ...

    @abstractmethod
    def find(self, event_day_id: int, method: PaymentMethod) -> Optional[Payment]:
        ...

    @abstractmethod
    def upsert(self, event_day_id: int, method: PaymentMethod, amount: Decimal) -> Payment:
        """Overwrite the amount for (event_day_id, method) or insert a new row."""
        ...

    @abstractmethod
    def delete(self, payment_id: int) -> bool:
        """Delete a payment; True iff a row was removed."""
        ...


class PriceRuleStore(ABC):
    """Interface for price rule lookups."""

    @abstractmethod
    def list_effective_rules(self, product_id: int, on_date: date) -> List[PriceRule]:
        """Return the product's rules whose validity window contains on_date."""
        ...


class ProductStore(ABC):
    """Interface for the product catalog."""

    @abstractmethod
    def list_active_products(self) -> List[Product]:
        """Return active products ordered by brand descending."""
        ...

    @abstractmethod
    def list_price_rules(self, product_id: int) -> List[PriceRule]:
        """Return all rules of a product ordered by sort_order ascending."""
        ...


class EventStore(ABC):
    """Interface for events and their days."""

    @abstractmethod
    def list_event_headers_by_year(self, year: int) -> List[EventHeader]:
        """Return events whose start or end date falls in the given year."""
        ...

    @abstractmethod
    def list_events(self) -> List[Event]:
        """Return all events with their days, most recent first."""
        ...

    @abstractmethod
    def create_event(self, new_event: NewEvent) -> Event:
        """Persist an event together with one day per date in new_event.day_dates."""
        ...

    @abstractmethod
    def get_event_day(self, event_day_id: int) -> Optional[EventDay]:
        ...

    @abstractmethod
    def get_event_with_all_data(self, event_id: int) -> Optional[Event]:
        """Return an event with every day's sales (with product) and payments attached."""
        ...

    @abstractmethod
    def update_starting_petty_cash(
        self, event_day_id: int, amount: Optional[Decimal]
    ) -> Optional[EventDay]:
        """Set or clear a day's starting petty cash; None if the day does not exist."""
        ...
