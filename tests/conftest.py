from datetime import UTC, datetime, timedelta

import pytest

from cardsmith.mock_api.apis import MockApis
from cardsmith.mock_api.latency import NO_LATENCY
from cardsmith.store.store import Store

START_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


class FakeClock:
    """Deterministic clock that only moves when told to."""

    def __init__(self, start: datetime = START_TIME) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, seconds: float = 60) -> datetime:
        self.current += timedelta(seconds=seconds)
        return self.current


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> Store:
    """Freshly seeded store on a fake clock."""
    return Store(clock=clock)


@pytest.fixture
def apis(store: Store) -> MockApis:
    """Mock APIs over the test store, without simulated latency."""
    return MockApis.create(store, NO_LATENCY, creator_id="user_001")
