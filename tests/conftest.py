"""Pytest configuration and fixtures."""

import itertools

import pytest

from house_registry.clock import Clock
from house_registry.models import HousePayload
from house_registry.query import QueryEngine
from house_registry.service import HouseService
from house_registry.store import HouseStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def clock() -> Clock:
    """Clock ticking 1000ns per reading, starting at 1000."""
    ticks = itertools.count(1_000, 1_000)
    return Clock(source=lambda: next(ticks))


@pytest.fixture
def store(clock: Clock) -> HouseStore:
    """Create a fresh store for each test."""
    return HouseStore(clock=clock)


@pytest.fixture
def query(store: HouseStore) -> QueryEngine:
    """Case-insensitive query engine over the test store."""
    return QueryEngine(store)


@pytest.fixture
def service(store: HouseStore, query: QueryEngine) -> HouseService:
    """Service without a sink."""
    return HouseService(store=store, query=query)


@pytest.fixture
def alice_payload() -> HousePayload:
    """Sample listing payload."""
    return HousePayload(
        owners_name="Alice",
        house_type="flat",
        location="Lagos",
        price=1000,
        availabile_units=2,
        availability=True,
    )


@pytest.fixture
def bob_payload() -> HousePayload:
    """Second sample listing payload."""
    return HousePayload(
        owners_name="Bob",
        house_type="duplex",
        location="Abuja",
        price=5000,
        availabile_units=0,
        availability=False,
    )
