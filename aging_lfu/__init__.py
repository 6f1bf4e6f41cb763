from .cache import DEFAULT_DECAY_INTERVAL, WeightedAgingLFUCache
from .clock import ManualClock, SystemClock, TraceClock
from .errors import CacheError, EntryNotFound, OversizedEntryError

__all__ = [
    "DEFAULT_DECAY_INTERVAL",
    "WeightedAgingLFUCache",
    "ManualClock",
    "SystemClock",
    "TraceClock",
    "CacheError",
    "EntryNotFound",
    "OversizedEntryError",
]
