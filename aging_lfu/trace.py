# aging_lfu/trace.py
from pathlib import Path

import numpy as np
import pandas as pd

COLUMNS = ["ts", "key", "bytes"]


def load_trace(path) -> pd.DataFrame:
    """
    Read a request trace from .csv or .parquet.
    Needs columns ts, key, bytes; anything else (ladder, user) is kept.
    """
    path = Path(path)
    if path.suffix == ".parquet":
        df = pd.read_parquet(path)
    elif path.suffix == ".csv":
        df = pd.read_csv(path)
    else:
        raise ValueError(f"unsupported trace format: {path.suffix}")

    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{path}: missing columns {missing}")

    df["ts"]    = pd.to_datetime(df["ts"])
    df["key"]   = df["key"].astype(str)
    df["bytes"] = df["bytes"].astype("int64")
    return df.sort_values("ts", kind="stable").reset_index(drop=True)


def synthetic_trace(n: int = 10_000, n_keys: int = 500, zipf_a: float = 1.2,
                    mean_gap_s: float = 1.0, min_bytes: int = 64 * 1024,
                    max_bytes: int = 1024 * 1024, seed: int = 0,
                    start="2024-01-01") -> pd.DataFrame:
    """
    Zipf-popular keys with exponential inter-arrival gaps. Each key has
    one fixed size drawn uniformly from [min_bytes, max_bytes].
    """
    rng   = np.random.default_rng(seed)
    ranks = (rng.zipf(zipf_a, size=n) - 1) % n_keys
    sizes = rng.integers(min_bytes, max_bytes + 1, size=n_keys)
    gaps  = rng.exponential(mean_gap_s, size=n)

    ts = pd.Timestamp(start) + pd.to_timedelta(np.cumsum(gaps), unit="s")
    return pd.DataFrame({
        "ts":    ts,
        "key":   [f"obj_{r}" for r in ranks],
        "bytes": sizes[ranks].astype("int64"),
    })
