from .aging_lfu import AgingLFU
from .lfu import LFU
from .lru import LRU

__all__ = ["AgingLFU", "LFU", "LRU"]
