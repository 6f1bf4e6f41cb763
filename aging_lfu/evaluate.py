"""
Compare LRU, plain LFU and aging LFU (several decay intervals) on a trace.

    python -m aging_lfu.evaluate --trace data/trace.parquet --caps 10 50

Without --trace a synthetic Zipf trace is replayed.
"""
import argparse
import logging
from functools import partial
from pathlib import Path

import pandas as pd

from .policies import LFU, LRU, AgingLFU
from .policies.metrics import replay_with_metrics
from .trace import load_trace, synthetic_trace

# ---- Defaults ----
ROOT        = Path(__file__).resolve().parents[1]
TRACE_PATH  = ROOT / "data" / "trace.parquet"
RESULTS     = ROOT / "results_metrics.csv"
CAPS_MB     = [10, 50, 100]
INTERVALS_S = [30, 300, 3600]

KEY_FUNC = lambda r: r.key


def policy_table(intervals):
    rows = [("LRU", None, LRU), ("LFU", None, LFU)]
    for iv in intervals:
        rows.append(("AgingLFU", iv, partial(AgingLFU, decay_interval=iv)))
    return rows


def evaluate(df: pd.DataFrame, caps=CAPS_MB, intervals=INTERVALS_S,
             progress=False) -> pd.DataFrame:
    met_rows = []
    for cap in caps:
        for name, iv, ctor in policy_table(intervals):
            m = replay_with_metrics(df, ctor, cap, key_func=KEY_FUNC,
                                    progress=progress)
            met_rows.append((name, iv, cap, m["hit_ratio"],
                             m["bytes_saved_pct"], m["avg_latency_ms"],
                             m["evictions"], m["decays"]))

    return pd.DataFrame(met_rows,
                        columns=["policy", "decay_s", "cap_MB", "hit_ratio",
                                 "bytes_saved_pct", "avg_latency_ms",
                                 "evictions", "decays"])


def parse_args(argv=None):
    p = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    p.add_argument("--trace", type=Path, default=None,
                   help=f"trace file (.csv/.parquet), e.g. {TRACE_PATH}")
    p.add_argument("--caps", type=float, nargs="+", default=CAPS_MB,
                   help="cache sizes in MB")
    p.add_argument("--intervals", type=float, nargs="+", default=INTERVALS_S,
                   help="decay intervals in seconds for AgingLFU")
    p.add_argument("--requests", type=int, default=20_000,
                   help="length of the synthetic trace")
    p.add_argument("--out", type=Path, default=RESULTS)
    p.add_argument("--progress", action="store_true",
                   help="show a tqdm bar per replay")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.trace is not None:
        print("Loading", args.trace)
        df = load_trace(args.trace)
    else:
        print("Generating synthetic trace…")
        df = synthetic_trace(n=args.requests)
    print("rows:", len(df))

    met = evaluate(df, caps=args.caps, intervals=args.intervals,
                   progress=args.progress)
    met.to_csv(args.out, index=False)
    print("\nHit ratio, bandwidth & latency:")
    print(met)
    print("Wrote", args.out)


if __name__ == "__main__":
    main()
