# qlinalg/tests/test_perf_sanity.py
import time
import numpy as np
from qlinalg import gates as G
from qlinalg.matrix import kronecker

def layer(n, backend):
    out = G.H()
    for _ in range(n - 1):
        out = kronecker(out, G.H(), backend=backend)
    return out

def test_kron_layer_runs_and_times():
    n = 6     # 64x64, quick everywhere
    layer(2, "numba")   # JIT warmup

    t0 = time.perf_counter()
    s1 = layer(n, "serial")
    t1 = time.perf_counter() - t0

    t0 = time.perf_counter()
    s2 = layer(n, "numba")
    t2 = time.perf_counter() - t0

    # correctness
    assert np.allclose(s1.data, s2.data, atol=1e-12, rtol=0)
    assert s2.is_unitary()
    # sanity: both timings are positive
    assert t1 > 0 and t2 > 0
    # compiled kernel should not be catastrophically slower than pure Python loops
    assert t2 < 5.0 * t1
