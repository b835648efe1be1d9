"""Pytest configuration for cartcache tests."""

from datetime import timedelta

import pytest

from cartcache import CartCache, CartItem, InMemoryListStore


class FakeClock:
    """Manually advanced clock for controlling store expiry."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryListStore:
    """Create an in-memory store driven by the fake clock."""
    return InMemoryListStore(maxsize=100, timer=clock)


@pytest.fixture
def cache(store: InMemoryListStore) -> CartCache:
    """Create a cart cache over the in-memory store."""
    return CartCache(store, ttl=timedelta(minutes=30))


@pytest.fixture
def items() -> list[CartItem]:
    """Sample cart items."""
    return [
        CartItem(product_id="OLJCESPC7Z", quantity=1),
        CartItem(product_id="66VCHSJNUP", quantity=3),
        CartItem(product_id="1YMWWN1N4O", quantity=2),
    ]
