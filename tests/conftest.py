"""
Pytest configuration and shared fixtures.

This file adds the parent directory to the Python path so that tests
can import from the domain, repositories, services and api modules.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
# so tests can import domain, repositories, etc.
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fakes import (  # noqa: E402
    CANDLES_PRODUCT,
    CERAMICS_PRODUCT,
    TOTEM_PRODUCT,
    InMemoryEventStore,
    InMemoryPaymentStore,
    InMemorySaleStore,
    RecordingSink,
)
from services.notifications import ChangeBroadcaster  # noqa: E402
from services.sale_service import SaleRecorder  # noqa: E402


@pytest.fixture
def sale_store() -> InMemorySaleStore:
    return InMemorySaleStore([TOTEM_PRODUCT, CERAMICS_PRODUCT, CANDLES_PRODUCT])


@pytest.fixture
def payment_store() -> InMemoryPaymentStore:
    return InMemoryPaymentStore()


@pytest.fixture
def event_store(sale_store, payment_store) -> InMemoryEventStore:
    return InMemoryEventStore(sale_store, payment_store)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def recorder(sale_store, sink) -> SaleRecorder:
    return SaleRecorder(sale_store, ChangeBroadcaster(sink))
