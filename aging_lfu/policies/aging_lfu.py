# aging_lfu/policies/aging_lfu.py
from ..cache import DEFAULT_DECAY_INTERVAL, WeightedAgingLFUCache
from ..clock import TraceClock
from ..errors import EntryNotFound
from .base import BasePolicy


class AgingLFU(BasePolicy):
    """
    Byte-aware policy over WeightedAgingLFUCache.

    Object size is the entry weight. Time comes from the trace: each
    request moves the cache clock to its timestamp before the lookup, so
    decay follows trace time instead of replay speed. The cache is built
    on the first request so its decay epoch is the trace start.
    """
    def __init__(self, capacity_bytes: int,
                 decay_interval: float = DEFAULT_DECAY_INTERVAL):
        super().__init__(capacity_bytes)
        self.decay_interval = decay_interval
        self.clock = TraceClock()
        self.cache = None

    @property
    def used(self) -> int:
        return 0 if self.cache is None else self.cache.current_weight

    @property
    def evictions(self) -> int:
        return 0 if self.cache is None else self.cache.evictions

    @property
    def decays(self) -> int:
        return 0 if self.cache is None else self.cache.decays

    # ----------------------------------------------------------
    def request(self, key, size, ts=None, *_, **__):
        self.clock.set(ts)
        if self.cache is None:
            self.cache = WeightedAgingLFUCache(
                self.cap, self.decay_interval, clock=self.clock)

        try:
            self.cache.get(key)
            return True
        except EntryNotFound:
            pass

        if self.fits(size):
            self.cache.put(key, size, weight=size)
        return False
