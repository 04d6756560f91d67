# qlinalg/bench.py
import argparse, csv, os, socket, subprocess, time, platform
from datetime import datetime
from . import gates as G
from .matrix import kronecker
from .tensor import BACKENDS

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

HEADER = ["qubits","dim","backend","threads","wall_ms","hostname","commit","dtype","timestamp"]

def backend_dir(backend):
    path = os.path.join(DATA_DIR, backend)
    os.makedirs(path, exist_ok=True)
    return path

def meta_row():
    commit = ""
    try:
        commit = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                         stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        pass
    return {
        "hostname": socket.gethostname(),
        "commit": commit,
        "dtype": "complex128",
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "python": platform.python_version(),
    }

def new_csv(path):
    """Create/overwrite CSV with header."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writeheader()

def write_row(path, row):
    with open(path, "a", newline="") as f:
        csv.DictWriter(f, fieldnames=HEADER).writerow(row)

# ---------------------------------------------------------------------

def hadamard_layer(n, backend, threads=None):
    """H (x) H (x) ... (x) H over n qubits, folded left to right."""
    out = G.H()
    for _ in range(n - 1):
        out = kronecker(out, G.H(), backend=backend, num_threads=threads)
    return out

def time_layer(n, backend, threads=None):
    t0 = time.perf_counter()
    m = hadamard_layer(n, backend, threads)
    return (time.perf_counter() - t0) * 1e3, m.rows  # ms

def warmup(backend):
    # JIT-compile the numba kernel outside the timed region
    hadamard_layer(2, backend)

def numba_max_threads():
    try:
        from numba import config
    except ImportError:
        return os.cpu_count() or 1
    return config.NUMBA_NUM_THREADS

def _row(n, dim, backend, threads, wall):
    m = meta_row()
    return {
        "qubits": n, "dim": dim, "backend": backend, "threads": threads,
        "wall_ms": f"{wall:.3f}",
        "hostname": m["hostname"], "commit": m["commit"], "dtype": m["dtype"], "timestamp": m["timestamp"]
    }

# ---------------------------------------------------------------------

def bench_qubits(ns, backend, out_path):
    print(f"[run] Kronecker scaling → {out_path}")
    new_csv(out_path)
    warmup(backend)
    threads = numba_max_threads() if backend == "numba" else 0
    for n in ns:
        wall, dim = time_layer(n, backend)
        write_row(out_path, _row(n, dim, backend, threads, wall))
        print(f"  n={n}  dim={dim}  wall={wall:.2f} ms")
    print("✓ done.\n")

def bench_threads(n, threads_list, out_path):
    print(f"[run] Thread scaling → {out_path}")
    new_csv(out_path)
    warmup("numba")
    t1, dim = time_layer(n, "numba", threads=1)
    pool = numba_max_threads()
    print(f"  pool={pool}  T1={t1:.1f} ms")
    for t in threads_list:
        tt = min(int(t), pool)
        if tt != t:
            print(f"  requested t={t} > pool={pool}; using t={tt}")
        wall, dim = time_layer(n, "numba", threads=tt)
        speedup = t1 / wall if wall > 0 else float("nan")
        write_row(out_path, _row(n, dim, "numba", tt, wall))
        print(f"  t={tt}  wall={wall:.2f} ms  speedup={speedup:.2f}×")
    print("✓ done.\n")

# ---------------------------------------------------------------------
def main(argv=None):
    p = argparse.ArgumentParser(description="qlinalg Kronecker benchmarks → data/<backend>/*.csv")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_qubits = sub.add_parser("qubits")
    p_qubits.add_argument("--ns", type=str, default="2,4,6,8")
    p_qubits.add_argument("--backend", type=str, default="numpy", choices=list(BACKENDS))

    p_threads = sub.add_parser("threads")
    p_threads.add_argument("--n", type=int, default=10)
    p_threads.add_argument("--threads", type=str, default="1,2,4,8")

    args = p.parse_args(argv)

    if args.cmd == "qubits":
        ns = [int(x) for x in args.ns.split(",")]
        out_path = os.path.join(backend_dir(args.backend), "qubits.csv")
        bench_qubits(ns, args.backend, out_path)

    elif args.cmd == "threads":
        ts = [int(x) for x in args.threads.split(",")]
        out_path = os.path.join(backend_dir("numba"), "threads.csv")
        bench_threads(args.n, ts, out_path)

if __name__ == "__main__":
    main()
