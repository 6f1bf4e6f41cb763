# aging_lfu/policies/metrics.py
from ..simulator import CacheSim

EDGE_LAT_MS         = 5
MISS_LAT_MS         = {"480p": 60, "720p": 40, "1080p": 20}
DEFAULT_MISS_LAT_MS = 40


def replay_with_metrics(df, policy_ctor, cap_mb, key_func=lambda r: r.key,
                        progress=False):
    """
    Replay `df` and report hit ratio, byte savings, modelled latency and
    the policy's eviction count. `decays` counts aging passes and stays 0
    for policies that never age.
    """
    sim = CacheSim(cap_mb, policy_ctor, progress=progress)
    hits = reqs = 0
    bytes_hit = bytes_total = 0
    lat_sum = 0.0

    for row in sim.rows(df):
        hit = sim.policy.request(key_func(row), row.bytes, row.ts)
        reqs += 1
        bytes_total += row.bytes
        if hit:
            hits += 1
            bytes_hit += row.bytes
            lat_sum += EDGE_LAT_MS
        else:
            ladder = getattr(row, "ladder", None)
            lat_sum += MISS_LAT_MS.get(ladder, DEFAULT_MISS_LAT_MS)

    return {
        "hit_ratio": hits / reqs if reqs else 0.0,
        "bytes_saved_pct": bytes_hit / bytes_total if bytes_total else 0.0,
        "avg_latency_ms": lat_sum / reqs if reqs else 0.0,
        "evictions": sim.policy.evictions,
        "decays": getattr(sim.policy, "decays", 0),
    }
