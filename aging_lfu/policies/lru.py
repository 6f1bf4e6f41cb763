# aging_lfu/policies/lru.py
from collections import OrderedDict

from .base import BasePolicy


class LRU(BasePolicy):
    """
    Least-Recently-Used baseline, byte-accurate.
    cache[key] = size_in_bytes, oldest first.
    """
    def __init__(self, capacity_bytes: int):
        super().__init__(capacity_bytes)
        self.used      = 0
        self.evictions = 0
        self.cache     = OrderedDict()

    # ----------------------------------------------------------
    def request(self, key, size, ts=None, *_, **__):
        if key in self.cache:
            self.cache.move_to_end(key)
            return True

        if not self.fits(size):
            return False
        while self.used + size > self.cap and self.cache:
            _, sz = self.cache.popitem(last=False)
            self.used -= sz
            self.evictions += 1
        self.cache[key] = size
        self.used += size
        return False
