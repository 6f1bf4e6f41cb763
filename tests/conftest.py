import pytest

from aging_lfu import ManualClock, WeightedAgingLFUCache


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def make_cache(clock):
    def _make(max_weight=3, decay_interval=30):
        return WeightedAgingLFUCache(max_weight, decay_interval, clock=clock)
    return _make
