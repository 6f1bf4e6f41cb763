# aging_lfu/cache.py
import logging
from typing import Any, Callable, Hashable, List, Optional, Tuple

from .clock import SystemClock
from .errors import EntryNotFound, OversizedEntryError

logger = logging.getLogger(__name__)

DEFAULT_DECAY_INTERVAL = 30     # seconds
MAX_DECAY_SHIFT        = 31


class _Entry:
    __slots__ = ("key", "value", "freq", "weight", "prv", "nxt")

    def __init__(self, key, value, freq: int, weight: int):
        self.key    = key
        self.value  = value
        self.freq   = freq
        self.weight = weight
        self.prv    = None
        self.nxt    = None


class WeightedAgingLFUCache:
    """
    Weighted LFU cache whose frequencies halve once per decay interval.

    Entries live in one doubly-linked list sorted by frequency, lowest at
    the head. Equal frequencies keep insertion order, so the head is always
    the least used and, among ties, the oldest entry. A dict maps each key
    to its list node.

    Total weight never exceeds ``max_weight``: put() evicts from the head
    before inserting. Decay is lazy and only evaluated by get(); a cache
    that only sees writes never ages.

    Not thread-safe. Share an instance only behind an external lock.
    """
    def __init__(self, max_weight: int,
                 decay_interval: float = DEFAULT_DECAY_INTERVAL,
                 clock: Optional[Callable[[], float]] = None):
        if max_weight < 0:
            raise ValueError(f"max_weight must be >= 0, got {max_weight}")
        if decay_interval <= 0:
            raise ValueError(
                f"decay_interval must be > 0, got {decay_interval}")

        self.max_weight     = max_weight
        self.decay_interval = decay_interval
        self.clock          = clock or SystemClock()
        self.last_decay     = self.clock()
        self.current_weight = 0
        self.evictions      = 0          # entries dropped from the head
        self.decays         = 0          # decay passes applied
        self._index         = {}         # key -> _Entry

        # sentinels
        self._head = _Entry(None, None, 0, 0)
        self._tail = _Entry(None, None, 0, 0)
        self._head.nxt = self._tail
        self._tail.prv = self._head

    def __len__(self):
        return len(self._index)

    def __contains__(self, key):
        return key in self._index

    def __repr__(self):
        return (f"WeightedAgingLFUCache(max_weight={self.max_weight}, "
                f"current_weight={self.current_weight}, entries={len(self)})")

    # ----------------------------------------------------------
    def get(self, key: Hashable, increment: int = 1) -> Any:
        """
        Return the value cached under ``key`` and bump its frequency.

        Raises EntryNotFound if the key is not cached.
        """
        if increment < 0:
            raise ValueError(f"increment must be >= 0, got {increment}")
        entry = self._index.get(key)
        if entry is None:
            raise EntryNotFound(key)

        self._decay()
        entry.freq += increment
        self._reposition(entry)
        return entry.value

    def put(self, key: Hashable, value: Any, weight: int = 1,
            frequency: int = 1) -> None:
        """
        Insert ``key`` unless it is already cached (then nothing changes).

        Evicts the lowest-frequency entries until the new one fits.
        Raises OversizedEntryError, leaving the cache untouched, when
        ``weight`` alone exceeds ``max_weight``.
        """
        if key in self._index:
            return
        if weight < 0:
            raise ValueError(f"weight must be >= 0, got {weight}")
        if frequency < 0:
            raise ValueError(f"frequency must be >= 0, got {frequency}")
        if weight > self.max_weight:
            raise OversizedEntryError(key, weight, self.max_weight)

        self.current_weight += weight
        while self.current_weight > self.max_weight:
            self._pop()

        entry = _Entry(key, value, frequency, weight)
        self._link_before(entry, self._find(self._head.nxt, frequency))
        self._index[key] = entry

    def inspect(self) -> List[Tuple[Hashable, Any, int]]:
        """(key, value, frequency) from head (next victim) to tail."""
        out = []
        last = 0
        node = self._head.nxt
        while node is not self._tail:
            assert last <= node.freq, "frequency order broken"
            last = node.freq
            out.append((node.key, node.value, node.freq))
            node = node.nxt
        return out

    # ----------------------------------------------------------
    def _pop(self):
        victim = self._head.nxt
        self._unlink(victim)
        self.current_weight -= victim.weight
        del self._index[victim.key]
        self.evictions += 1
        logger.debug("evicted %r (freq=%d, weight=%d)",
                     victim.key, victim.freq, victim.weight)

    def _find(self, start: _Entry, freq: int) -> _Entry:
        # first node from `start` on with a strictly higher frequency
        node = start
        while node is not self._tail and node.freq <= freq:
            node = node.nxt
        return node

    def _reposition(self, entry: _Entry):
        target = self._find(entry.nxt, entry.freq)
        if target is entry.nxt:
            return
        self._unlink(entry)
        self._link_before(entry, target)

    # ----------------------------------------------------------
    def _shift(self) -> int:
        """Bits to shift frequencies by, 0 if no interval has elapsed."""
        now = self.clock()
        elapsed = now - self.last_decay
        if elapsed < self.decay_interval:
            return 0

        self.last_decay = now
        return min(int(elapsed // self.decay_interval), MAX_DECAY_SHIFT)

    def _decay(self):
        shift = self._shift()
        if shift == 0:
            return

        # right shift is monotone, order survives
        node = self._head.nxt
        while node is not self._tail:
            node.freq >>= shift
            node = node.nxt
        self.decays += 1
        logger.debug("decayed %d entries by %d bit(s)", len(self), shift)

    # ----------------------------------------------------------
    @staticmethod
    def _unlink(node: _Entry):
        node.prv.nxt = node.nxt
        node.nxt.prv = node.prv
        node.prv = node.nxt = None

    @staticmethod
    def _link_before(node: _Entry, at: _Entry):
        prv = at.prv
        prv.nxt = node
        node.prv = prv
        node.nxt = at
        at.prv = node
