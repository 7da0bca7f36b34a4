"""Autocompletion latency benchmark.

Usage:
    python -m scripts.benchmark [terms_file]

Builds a text filler from the given term file (one term per line, optional
"\t<priority>"), or from a small built-in list, then measures:
- Build time
- Latency (p50, p95, p99) of first-match and priority completion
"""

import random
import statistics
import sys
import time

sys.path.insert(0, ".")

from textfill.services.autocomplete import load_terms, load_terms_file
from textfill.services.ternary_tree import TernaryTreeTextFiller

BUILTIN_TERMS = [
    "search engine architecture",
    "search engine optimization",
    "web crawler design",
    "information retrieval",
    "machine learning",
    "machine translation",
    "distributed systems",
    "database indexing",
    "natural language processing",
    "vector embeddings",
    "recommendation systems",
    "api design best practices",
]

ROUNDS = 2000


def _percentiles(latencies: list[float]) -> tuple[float, float, float]:
    cuts = statistics.quantiles(latencies, n=100)
    return cuts[49], cuts[94], cuts[98]


def _measure(fn, prefixes: list[str]) -> tuple[list[float], int]:
    latencies = []
    hits = 0
    for _ in range(ROUNDS):
        prefix = random.choice(prefixes)
        start = time.perf_counter()
        result = fn(prefix)
        latencies.append((time.perf_counter() - start) * 1_000_000)
        if result is not None:
            hits += 1
    return latencies, hits


def main(path: str | None = None):
    print("=== TextFill Benchmark ===\n")

    filler = TernaryTreeTextFiller()
    start = time.perf_counter()
    if path:
        load_terms_file(filler, path)
    else:
        load_terms(filler, (f"{t}\t{i}" for i, t in enumerate(BUILTIN_TERMS)))
    build_ms = (time.perf_counter() - start) * 1000
    print(f"Loaded {filler.size()} terms in {build_ms:.1f} ms\n")

    if filler.empty():
        print("No terms loaded, nothing to benchmark.")
        return

    terms = filler.get_sorted_list()
    prefixes = [t[: max(1, len(t) // 2)] for t in terms]

    for label, fn in (
        ("text_fill", filler.text_fill),
        ("text_fill_premium", filler.text_fill_premium),
    ):
        latencies, hits = _measure(fn, prefixes)
        p50, p95, p99 = _percentiles(latencies)
        print(f"{label}:")
        print(f"  p50: {p50:.1f} us  p95: {p95:.1f} us  p99: {p99:.1f} us")
        print(f"  hit rate: {hits / ROUNDS:.0%}\n")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
