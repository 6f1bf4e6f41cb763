# aging_lfu/policies/base.py
class BasePolicy:
    """
    Byte-capacity cache policy replayed by CacheSim.

    request() handles one GET: True on a hit, False on a miss. A miss
    inserts the object unless it is bigger than the whole cache.
    Subclasses track `used` (bytes cached) and `evictions`.
    """
    def __init__(self, capacity_bytes: int):
        self.cap = capacity_bytes

    def request(self, key, size: int, ts=None, *_, **__) -> bool:
        raise NotImplementedError

    def fits(self, size: int) -> bool:
        return size <= self.cap
