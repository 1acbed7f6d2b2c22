"""Performance benchmark: array vs sequence input for pyquader bounds."""

import sys
import time

import numpy as np

N_POINTS = 1_000_000
CHUNK_SIZE = 100_000


def bench(name, func):
    """Run a benchmark and record the result."""
    t0 = time.perf_counter()
    result = func()
    elapsed = time.perf_counter() - t0
    print(f"  {name}: {elapsed:.3f}s")
    return elapsed, result


def run_pyquader():
    print("\n" + "=" * 60)
    print("PYQUADER benchmarks")
    print("=" * 60)

    sys.path.insert(0, "src")
    from pyquader import BoundsAccumulator, IntBounds, from_points_into

    rng = np.random.default_rng(42)
    points = rng.integers(-1_000_000, 1_000_000, size=(N_POINTS, 3), dtype=np.int32)
    results = {}

    # 1. Vectorized path on an (N, 3) array
    t, box = bench("pq_from_points_array", lambda: IntBounds.from_points(points))
    results["pq_from_points_array"] = t
    print(f"    -> {box!r}")

    # 2. Output-slot variant, buffer reused
    out = np.empty((2, 3), dtype=np.int32)
    t, _ = bench("pq_from_points_into", lambda: from_points_into(points, out))
    results["pq_from_points_into"] = t

    # 3. Sequence of tuples (100k subset)
    subset = [tuple(p) for p in points[:100_000].tolist()]
    t, _ = bench("pq_from_points_tuples_100k", lambda: IntBounds.from_points(subset))
    results["pq_from_points_tuples_100k"] = t

    # 4. Point-by-point merge fold (100k subset)
    def fold():
        box = IntBounds.EMPTY
        for p in subset:
            box = box.merge_point(p)
        return box

    t, _ = bench("pq_merge_fold_100k", fold)
    results["pq_merge_fold_100k"] = t

    # 5. Chunked accumulation
    def accumulate():
        chunks = (points[i:i + CHUNK_SIZE] for i in range(0, N_POINTS, CHUNK_SIZE))
        return BoundsAccumulator().consume(chunks)

    t, acc_box = bench("pq_accumulate_chunks", accumulate)
    results["pq_accumulate_chunks"] = t
    assert acc_box == box

    return results


if __name__ == "__main__":
    results = run_pyquader()
    print("\nSummary:")
    for name, t in results.items():
        print(f"  {name:<30s} {t:8.3f}s")
