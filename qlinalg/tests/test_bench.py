# qlinalg/tests/test_bench.py
import csv
import pytest
from qlinalg import bench

def read_csv(path):
    with open(path, newline="") as f:
        return list(csv.DictReader(f))

def test_qubits_bench_writes_rows(tmp_path, monkeypatch):
    monkeypatch.setattr(bench, "DATA_DIR", str(tmp_path))
    bench.main(["qubits", "--ns", "1,2,3", "--backend", "serial"])
    rows = read_csv(tmp_path / "serial" / "qubits.csv")
    assert [int(r["qubits"]) for r in rows] == [1, 2, 3]
    assert [int(r["dim"]) for r in rows] == [2, 4, 8]
    assert all(float(r["wall_ms"]) >= 0 for r in rows)

def test_threads_bench_caps_to_pool(tmp_path, monkeypatch):
    monkeypatch.setattr(bench, "DATA_DIR", str(tmp_path))
    bench.main(["threads", "--n", "3", "--threads", "1,100000"])
    rows = read_csv(tmp_path / "numba" / "threads.csv")
    assert len(rows) == 2
    assert int(rows[1]["threads"]) == bench.numba_max_threads()

def test_plots_from_bench_csv(tmp_path, monkeypatch):
    pytest.importorskip("matplotlib")
    from qlinalg import plot_results
    monkeypatch.setattr(bench, "DATA_DIR", str(tmp_path))
    bench.main(["qubits", "--ns", "1,2", "--backend", "numpy"])
    bench.main(["threads", "--n", "4", "--threads", "1"])
    plot_results.main(str(tmp_path))
    assert (tmp_path / "numpy" / "runtime_vs_qubits_numpy.png").exists()
    assert (tmp_path / "numba" / "speedup_vs_threads_numba.png").exists()
    assert (tmp_path / "runtime_vs_qubits_compare.png").exists()
