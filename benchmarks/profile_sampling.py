"""Profile permutation sampling and mixed-radix decoding.

Measures wall-clock time and peak memory for ``sample_permutations``
across a grid of sequence lengths and sample counts, and for random
access into ``spread_and_combine`` over index spaces too large to
enumerate.

Usage::

    python benchmarks/profile_sampling.py          # full grid
    python benchmarks/profile_sampling.py --quick  # reduced grid for smoke test

Outputs:
    benchmarks/results/sampling_profile.csv
    benchmarks/results/decoding_profile.csv
"""

from __future__ import annotations

import argparse
import math
import platform
import sys
import time
import tracemalloc
import warnings
from pathlib import Path

import numpy as np
import pandas as pd

# Ensure the package is importable when running from the repo root.
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))
from corextensions import (  # noqa: E402
    SpreadAndCombine,
    sample_permutations,
)

# ------------------------------------------------------------------ #
# Configuration
# ------------------------------------------------------------------ #

N_VALUES_FULL = [6, 8, 10, 12, 20, 100, 1_000]
B_VALUES_FULL = [100, 1_000, 5_000]

N_VALUES_QUICK = [6, 10, 20, 100]
B_VALUES_QUICK = [100, 1_000]

# (number of rows, row width) for the decoding benchmark.
GRIDS_FULL = [(4, 10), (10, 10), (40, 4), (80, 2), (30, 26)]
GRIDS_QUICK = [(4, 10), (80, 2)]
N_LOOKUPS = 1_000

REPEATS = 3
SEED_BASE = 42

RESULTS_DIR = Path(__file__).resolve().parent / "results"


# ------------------------------------------------------------------ #
# Benchmark helpers
# ------------------------------------------------------------------ #


def _strategy(n: int, max_exhaustive: int = 10) -> str:
    return "lehmer" if n <= max_exhaustive else "shuffle"


def _measure(fn) -> tuple[float, int]:
    """Run *fn* once; return (elapsed seconds, peak traced bytes)."""
    tracemalloc.start()
    t0 = time.perf_counter()
    fn()
    elapsed = time.perf_counter() - t0
    _, peak_bytes = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return elapsed, peak_bytes


def _benchmark_sampling(n: int, B: int, seed: int) -> dict:
    seq = list(range(n))
    result: list = []

    def run() -> None:
        nonlocal result
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            result = sample_permutations(seq, B, random_state=seed)

    elapsed, peak = _measure(run)
    return {
        "time_s": elapsed,
        "peak_memory_bytes": peak,
        "n_returned": len(result),
    }


def _benchmark_decoding(n_rows: int, width: int, seed: int) -> dict:
    view = SpreadAndCombine([list(range(width))] * n_rows)
    rng = np.random.default_rng(seed)
    # Python ints: the index space can exceed int64.
    indices = [
        int(rng.integers(0, 2**62)) * view.total // 2**62 for _ in range(N_LOOKUPS)
    ]

    def run() -> None:
        for k in indices:
            assert view.index(view[k]) == k

    elapsed, peak = _measure(run)
    return {
        "time_s": elapsed,
        "peak_memory_bytes": peak,
        "log10_total": n_rows * math.log10(width),
    }


def run_sampling_grid(
    n_values: list[int], b_values: list[int], repeats: int = REPEATS
) -> pd.DataFrame:
    """Run the sampling grid and return a DataFrame of results."""
    rows: list[dict] = []
    total = len(n_values) * len(b_values)
    done = 0

    for n in n_values:
        for B in b_values:
            results = [
                _benchmark_sampling(n, B, seed=SEED_BASE + r) for r in range(repeats)
            ]
            done += 1
            median_time = float(np.median([r["time_s"] for r in results]))
            median_mem = float(np.median([r["peak_memory_bytes"] for r in results]))
            row = {
                "n": n,
                "B": B,
                "log10_n_factorial": math.lgamma(n + 1) / math.log(10),
                "strategy": _strategy(n),
                "n_returned": results[-1]["n_returned"],
                "median_time_s": median_time,
                "median_peak_memory_MB": median_mem / (1024 * 1024),
            }
            rows.append(row)
            print(
                f"  [{done:3d}/{total}] n={n:5d}, B={B:6,d}, "
                f"strategy={row['strategy']:8s}, "
                f"time={median_time:.4f}s, "
                f"mem={row['median_peak_memory_MB']:.2f}MB"
            )

    return pd.DataFrame(rows)


def run_decoding_grid(
    grids: list[tuple[int, int]], repeats: int = REPEATS
) -> pd.DataFrame:
    """Time index -> choice -> index round trips over large product spaces."""
    rows: list[dict] = []
    for n_rows, width in grids:
        results = [
            _benchmark_decoding(n_rows, width, seed=SEED_BASE + r)
            for r in range(repeats)
        ]
        median_time = float(np.median([r["time_s"] for r in results]))
        row = {
            "n_rows": n_rows,
            "width": width,
            "log10_total": results[-1]["log10_total"],
            "lookups": N_LOOKUPS,
            "median_time_s": median_time,
            "median_us_per_lookup": median_time / N_LOOKUPS * 1e6,
        }
        rows.append(row)
        print(
            f"  rows={n_rows:3d}, width={width:3d}, "
            f"log10(total)={row['log10_total']:6.1f}, "
            f"{row['median_us_per_lookup']:.1f}us/lookup"
        )
    return pd.DataFrame(rows)


# ------------------------------------------------------------------ #
# Main
# ------------------------------------------------------------------ #


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Profile permutation sampling and mixed-radix decoding"
    )
    parser.add_argument(
        "--quick", action="store_true", help="Run a reduced grid for smoke testing"
    )
    parser.add_argument(
        "--repeats", type=int, default=REPEATS, help="Repetitions per grid cell"
    )
    args = parser.parse_args()

    print(f"Python {platform.python_version()} on {platform.platform()}")
    print(f"NumPy {np.__version__}, pandas {pd.__version__}")

    n_values = N_VALUES_QUICK if args.quick else N_VALUES_FULL
    b_values = B_VALUES_QUICK if args.quick else B_VALUES_FULL
    grids = GRIDS_QUICK if args.quick else GRIDS_FULL

    RESULTS_DIR.mkdir(parents=True, exist_ok=True)

    print("\nSampling")
    sampling = run_sampling_grid(n_values, b_values, repeats=args.repeats)
    sampling_path = RESULTS_DIR / "sampling_profile.csv"
    sampling.to_csv(sampling_path, index=False)
    print(f"  Saved {sampling_path}")

    print("\nDecoding")
    decoding = run_decoding_grid(grids, repeats=args.repeats)
    decoding_path = RESULTS_DIR / "decoding_profile.csv"
    decoding.to_csv(decoding_path, index=False)
    print(f"  Saved {decoding_path}")


if __name__ == "__main__":
    main()
