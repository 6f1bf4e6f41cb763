# aging_lfu/errors.py


class CacheError(Exception):
    """Base class for cache errors."""


class EntryNotFound(CacheError, KeyError):
    """get() on a key that is not cached."""


class OversizedEntryError(CacheError, ValueError):
    """put() with a weight larger than the whole cache."""
    def __init__(self, key, weight: int, max_weight: int):
        super().__init__(
            f"entry {key!r} has weight {weight} > max weight {max_weight}")
        self.key        = key
        self.weight     = weight
        self.max_weight = max_weight
