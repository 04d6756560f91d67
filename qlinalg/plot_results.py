# qlinalg/plot_results.py
import csv, os
from collections import defaultdict
from statistics import median
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

DATA_DIR = os.path.join(os.path.dirname(__file__), "..", "data")

def load_rows(path):
    rows = []
    with open(path, "r") as f:
        for row in csv.DictReader(f):
            row["qubits"]  = int(row["qubits"])
            row["dim"]     = int(row["dim"])
            row["threads"] = int(row["threads"])
            row["wall_ms"] = float(row["wall_ms"])
            rows.append(row)
    return rows

def median_by(rows, key):
    buckets = defaultdict(list)
    for r in rows:
        buckets[r[key]].append(r["wall_ms"])
    return {k: float(median(v)) for k, v in sorted(buckets.items())}

def plot_runtime_vs_qubits(rows, out_dir, tag):
    pts = median_by(rows, "qubits")
    if not pts: return
    plt.figure()
    plt.plot(list(pts), list(pts.values()), marker="o", label=tag)
    plt.xlabel("Qubits (n), result is 2^n x 2^n")
    plt.ylabel("Runtime (ms, log scale)")
    plt.yscale("log")
    plt.title(f"H^(x)n build time [{tag}]")
    plt.grid(True, which="both", ls="--", lw=0.5)
    plt.legend()
    plt.savefig(os.path.join(out_dir, f"runtime_vs_qubits_{tag}.png"), dpi=200)
    plt.close()

def plot_speedup_vs_threads(rows, out_dir, tag):
    pts = median_by(rows, "threads")
    t1 = pts.get(1)
    if not t1: return
    xs = list(pts)
    ys = [t1 / pts[t] if pts[t] > 0 else float("nan") for t in xs]
    plt.figure()
    plt.plot(xs, ys, marker="o")
    plt.xlabel("Threads")
    plt.ylabel("Speedup (T1/Tt)")
    plt.title(f"Speedup vs Threads [{tag}]")
    plt.grid(True)
    plt.savefig(os.path.join(out_dir, f"speedup_vs_threads_{tag}.png"), dpi=200)
    plt.close()

def plot_qubits_compare(data_dir=DATA_DIR):
    curves = {}
    for be in sorted(os.listdir(data_dir)):
        p = os.path.join(data_dir, be, "qubits.csv")
        if os.path.exists(p):
            curves[be] = median_by(load_rows(p), "qubits")
    if not curves:
        return
    plt.figure()
    for be, pts in curves.items():
        plt.plot(list(pts), list(pts.values()), marker="o", label=be)
    plt.xlabel("Qubits (n)")
    plt.ylabel("Runtime (ms, log scale)")
    plt.title("Kronecker build time by backend")
    plt.yscale("log")
    plt.grid(True, which="both", ls="--", lw=0.5)
    plt.legend()
    plt.tight_layout()
    plt.savefig(os.path.join(data_dir, "runtime_vs_qubits_compare.png"), dpi=200)
    plt.close()


def main(data_dir=DATA_DIR):
    csvs = []
    for root, _, files in os.walk(data_dir):
        for f in files:
            if f.endswith(".csv"):
                csvs.append(os.path.join(root, f))

    if not csvs:
        print("No CSV files found under data/")
        return

    for path in csvs:
        tag = os.path.splitext(os.path.basename(path))[0]
        backend = os.path.basename(os.path.dirname(path))
        rows = load_rows(path)
        print(f"Plotting from {backend}/{tag}.csv ({len(rows)} rows)...")
        out_dir = os.path.dirname(path)
        if tag.startswith("threads"):
            plot_speedup_vs_threads(rows, out_dir, backend)
        else:
            plot_runtime_vs_qubits(rows, out_dir, backend)

    plot_qubits_compare(data_dir)
    print("\nSaved all plots under data/<backend>/*.png")


if __name__ == "__main__":
    main()
