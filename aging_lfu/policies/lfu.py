# aging_lfu/policies/lfu.py
import heapq
from collections import defaultdict

from .base import BasePolicy


class LFU(BasePolicy):
    """
    Plain LFU baseline without aging, byte-accurate.
    Min-heap of (freq, seq, key); ties go to the oldest push. Stale heap
    entries are skipped lazily on eviction.
    """
    def __init__(self, capacity_bytes: int):
        super().__init__(capacity_bytes)
        self.used      = 0                   # bytes cached
        self.evictions = 0
        self.freq      = defaultdict(int)    # key -> hit count
        self.store     = {}                  # key -> size
        self.heap      = []                  # (freq, seq, key)
        self.seq       = 0

    # ----------------------------------------------------------
    def request(self, key, size, ts=None, *_, **__):
        self.seq += 1
        if key in self.store:
            self.freq[key] += 1
            heapq.heappush(self.heap, (self.freq[key], self.seq, key))
            return True

        if not self.fits(size):
            return False
        while self.used + size > self.cap and self.heap:
            f, _, k = heapq.heappop(self.heap)
            if self.freq.get(k) != f:
                continue
            self.used -= self.store.pop(k)
            self.freq.pop(k)
            self.evictions += 1

        self.store[key] = size
        self.freq[key]  = 1
        heapq.heappush(self.heap, (1, self.seq, key))
        self.used += size
        return False
