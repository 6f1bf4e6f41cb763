# aging_lfu/simulator.py
from typing import Callable

import pandas as pd
from tqdm import tqdm


class CacheSim:
    """
    Replays a trace through a policy object that implements:
      request(key, size, ts) -> bool
    """
    def __init__(self, capacity_mb: float, policy_ctor: Callable,
                 progress: bool = False):
        self.cap_bytes = int(capacity_mb * 1024 * 1024)
        self.policy    = policy_ctor(self.cap_bytes)
        self.progress  = progress

    def rows(self, df: pd.DataFrame):
        it = df.itertuples(index=False)
        if self.progress:
            it = tqdm(it, total=len(df), desc=type(self.policy).__name__)
        return it

    def replay(self, df: pd.DataFrame, key_func: Callable = None,
               ts_attr="ts") -> float:
        if len(df) == 0:
            return 0.0
        key_func = key_func or (lambda r: r.key)
        hits = 0
        for row in self.rows(df):
            hit = self.policy.request(
                key_func(row), row.bytes, getattr(row, ts_attr))
            if hit:
                hits += 1
        return hits / len(df)
