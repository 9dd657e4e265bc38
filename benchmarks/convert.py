"""
Benchmark json_to_msgpack against json.loads + msgpack.packb.
Compares time per call and peak memory (tracemalloc) per run.

Timing uses multiple runs and median for more consistent results; warmup reduces
cold-cache effects. Use --iter, --warmup, --runs to tune.

Run from repo root:

  PYTHONPATH=src python benchmarks/convert.py
  PYTHONPATH=src python benchmarks/convert.py --impl fused
  PYTHONPATH=src python benchmarks/convert.py --iter 500 --runs 7   # slower, more stable

Or after pip install -e .[test]:

  python benchmarks/convert.py
"""

from __future__ import annotations

import argparse
import gc
import json
import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)


def _load_implementations() -> list[tuple[str, str, object]]:
    """(id, label, callable(str) -> bytes). Order defines baseline (first) for speedup/ratio."""
    from json2msgpack import ConverterConfig, json_to_msgpack

    options = ConverterConfig()
    impls: list[tuple[str, str, object]] = [
        ("fused", "json2msgpack", lambda doc: json_to_msgpack(doc, options)),
    ]
    try:
        import msgpack
    except ImportError:
        print("  (msgpack not installed: json+msgpack baseline skipped)")
    else:
        impls.append(
            (
                "tree",
                "json+msgpack",
                lambda doc: msgpack.packb(json.loads(doc), use_bin_type=True),
            )
        )
    return impls


# Sample documents: various shapes and sizes
SAMPLES: list[tuple[str, str]] = [
    ("null", "null"),
    ("42", "int"),
    ("-70000", "int32"),
    ("3.25", "float"),
    ('"hello"', "str short"),
    (json.dumps("y" * 300), "str 300"),
    (json.dumps({"a": 1, "b": 2}), "dict 2"),
    (json.dumps(list(range(100))), "list 100"),
    (json.dumps([{"i": i, "name": f"n{i}"} for i in range(20)]), "list of dicts"),
    (json.dumps({f"k{i}": [i, str(i), i / 3] for i in range(200)}), "dict 200"),
]

N_TIME = 200
N_MEM = 50
WARMUP_DEFAULT = 20
TIMING_RUNS_DEFAULT = 5


def _time_per_call_median(
    fn: object,
    doc: str,
    n: int,
    warmup: int = WARMUP_DEFAULT,
    runs: int = TIMING_RUNS_DEFAULT,
    disable_gc: bool = True,
) -> float:
    """
    Return median time per call in seconds.
    Runs warmup, then `runs` timing loops of `n` iterations each.
    """
    for _ in range(warmup):
        fn(doc)
    run_times: list[float] = []
    was_enabled = gc.isenabled()
    if disable_gc:
        gc.disable()
    try:
        for _ in range(runs):
            start = time.perf_counter()
            for _ in range(n):
                fn(doc)
            run_times.append((time.perf_counter() - start) / n)
    finally:
        if disable_gc and was_enabled:
            gc.enable()
    run_times.sort()
    return run_times[runs // 2]


def _peak_memory_kb(fn: object, doc: str, n: int) -> float:
    tracemalloc.start()
    tracemalloc.reset_peak()
    for _ in range(n):
        fn(doc)
    _current, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark JSON to MessagePack conversion"
    )
    parser.add_argument(
        "--impl",
        default="all",
        metavar="IDS",
        help="Comma-separated impl ids to run (fused,tree) or 'all' (default)",
    )
    parser.add_argument(
        "--iter",
        type=int,
        default=N_TIME,
        metavar="N",
        help=f"Iterations per timing run (default {N_TIME}); higher = more stable",
    )
    parser.add_argument(
        "--warmup",
        type=int,
        default=WARMUP_DEFAULT,
        metavar="N",
        help=f"Warmup iterations before each timing run (default {WARMUP_DEFAULT})",
    )
    parser.add_argument(
        "--runs",
        type=int,
        default=TIMING_RUNS_DEFAULT,
        metavar="N",
        help=f"Number of timing runs per impl/sample; median is used (default {TIMING_RUNS_DEFAULT})",
    )
    parser.add_argument(
        "--no-disable-gc",
        action="store_true",
        help="Do not disable GC during timing (can make results noisier)",
    )
    args = parser.parse_args()
    n_time = max(1, args.iter)
    warmup = max(0, args.warmup)
    runs = max(1, args.runs)
    disable_gc = not args.no_disable_gc

    all_impls = _load_implementations()
    if args.impl.strip().lower() == "all":
        impls = all_impls
    else:
        requested = {s.strip().lower() for s in args.impl.split(",") if s.strip()}
        impls = [x for x in all_impls if x[0] in requested]
    if not impls:
        print("No implementations selected. Check --impl.")
        sys.exit(1)

    labels = [x[1] for x in impls]
    fns = [x[2] for x in impls]

    print("Benchmark: JSON to MessagePack")
    print("  " + ", ".join(labels))
    print(f"  Timing: n={n_time}, warmup={warmup}, runs={runs} (median), disable_gc={disable_gc}")
    print()

    # Sanity: decoded values agree (encodings may differ in float width)
    if len(fns) > 1:
        import msgpack

        for doc, sample_label in SAMPLES:
            ref = msgpack.unpackb(fns[0](doc), raw=False)
            for label, fn in zip(labels[1:], fns[1:]):
                got = msgpack.unpackb(fn(doc), raw=False)
                assert ref == got, f"{sample_label} [{label}]: mismatch {ref!r} vs {got!r}"
        print("  Sanity check: same values for all samples.")
        print()

    col_width = 14
    header = f"  {'sample':<16} {'bytes':<7}"
    for label in labels:
        header += f" {label[: col_width - 2]:<{col_width}}"

    print("  --- Time per call (ms, median over runs) ---")
    print(header)
    print("  " + "-" * (25 + len(labels) * (col_width + 1)))
    time_results: list[list[float]] = []
    for doc, sample_label in SAMPLES:
        row = [
            _time_per_call_median(fn, doc, n_time, warmup, runs, disable_gc) * 1000
            for fn in fns
        ]
        time_results.append(row)
        print(
            f"  {sample_label:<16} {len(fns[0](doc)):<7}"
            + "".join(f" {t:<{col_width}.4f}" for t in row)
        )
    print()

    print("  --- Peak memory (KiB) during run ---")
    print(header)
    print("  " + "-" * (25 + len(labels) * (col_width + 1)))
    for doc, sample_label in SAMPLES:
        row = [_peak_memory_kb(fn, doc, N_MEM) for fn in fns]
        print(
            f"  {sample_label:<16} {len(fns[0](doc)):<7}"
            + "".join(f" {m:<{col_width}.2f}" for m in row)
        )
    print()

    print("  --- Summary ---")
    n_samples = len(SAMPLES)
    for idx, (impl_id, impl_label, _) in enumerate(impls):
        avg_ms = sum(time_results[r][idx] for r in range(n_samples)) / n_samples
        line = f"  [{impl_id}] {impl_label}: avg {avg_ms:.4f} ms"
        if idx > 0:
            speedup = (
                sum(time_results[r][0] / time_results[r][idx] for r in range(n_samples))
                / n_samples
            )
            line += f"  | baseline time ratio: {speedup:.2f}x"
        else:
            line += "  (baseline)"
        print(line)


if __name__ == "__main__":
    main()
