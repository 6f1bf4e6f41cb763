import pandas as pd

from aging_lfu.evaluate import evaluate, main
from aging_lfu.trace import synthetic_trace


def test_evaluate_table():
    df = synthetic_trace(n=500, n_keys=50, seed=2)
    met = evaluate(df, caps=[1, 4], intervals=[30, 300])

    assert len(met) == 2 * 4
    assert list(met[met.cap_MB == 1].policy) == \
        ["LRU", "LFU", "AgingLFU", "AgingLFU"]
    assert met.hit_ratio.between(0, 1).all()
    assert met.loc[met.policy == "LRU", "decay_s"].isna().all()


def test_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "results.csv"
    main(["--requests", "300", "--caps", "1", "--intervals", "30",
          "--out", str(out)])

    written = pd.read_csv(out)
    assert list(written.policy) == ["LRU", "LFU", "AgingLFU"]
    assert "Wrote" in capsys.readouterr().out


def test_main_progress_flag(tmp_path, capsys):
    out = tmp_path / "results.csv"
    main(["--requests", "100", "--caps", "1", "--intervals", "30",
          "--progress", "--out", str(out)])

    assert "LRU" in capsys.readouterr().err     # tqdm writes to stderr
    assert len(pd.read_csv(out)) == 3
