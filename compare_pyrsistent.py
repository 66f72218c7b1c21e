#!/usr/bin/env python3
"""
Comparative Performance Test: pychained vs pyrsistent

Compares ChainedHashTable (mutable, separate chaining, FIFO values per key)
with a multimap built from pyrsistent's PMap of PVectors. The pyrsistent
version pays for immutability on every insert, so this mostly shows what the
mutable chained design buys for write-heavy multimap workloads.
"""

import time
import statistics
from typing import Callable, List

from pychained import ChainedHashTable
from performance_test import format_time

from pyrsistent import pmap, pvector, PMap


def robust_timer(func: Callable, runs: int = 7) -> tuple:
    """
    Run function multiple times and return robust statistics.
    Returns (median, cv_percent, min, max)
    """
    times = []
    for _ in range(runs):
        start = time.perf_counter()
        func()
        elapsed = time.perf_counter() - start
        times.append(elapsed)

    median_time = statistics.median(times)
    mean_time = statistics.mean(times)
    std_dev = statistics.stdev(times) if len(times) > 1 else 0
    cv = (std_dev / mean_time * 100) if mean_time > 0 else 0

    return median_time, cv, min(times), max(times)


def print_section(title: str):
    """Print section header"""
    print()
    print("=" * 70)
    print(title)
    print("=" * 70)
    print()


def print_comparison(ours: Callable, theirs: Callable):
    our_median, our_cv, our_min, our_max = robust_timer(ours)
    pyr_median, pyr_cv, pyr_min, pyr_max = robust_timer(theirs)

    ratio = pyr_median / our_median if our_median > 0 else 0

    print(f"pychained:           {format_time(our_median)} (±{our_cv:.1f}%)")
    print(f"pyrsistent:          {format_time(pyr_median)} (±{pyr_cv:.1f}%)")

    if ratio > 1:
        print(f"Speedup:             {ratio:.2f}x faster")
    else:
        print(f"Speedup:             {1/ratio:.2f}x slower")

    print(f"  pychained range:   {format_time(our_min)}-{format_time(our_max)}")
    print(f"  pyrsistent range:  {format_time(pyr_min)}-{format_time(pyr_max)}")
    print()


def pmultimap_insert(m: PMap, key, value) -> PMap:
    return m.set(key, m.get(key, pvector()).append(value))


def build_pairs(n: int) -> List[tuple]:
    # Three values per key
    return [(i // 3, i) for i in range(n)]


def compare_build(n: int):
    """Compare building a multimap from (key, value) pairs"""
    pairs = build_pairs(n)

    print(f"=== Bulk Construction (n={n:,} values) ===")

    def ours():
        return ChainedHashTable.from_pairs(pairs, max(1, n // 3))

    def theirs():
        m = pmap()
        for k, v in pairs:
            m = pmultimap_insert(m, k, v)
        return m

    print_comparison(ours, theirs)


def compare_lookup(n: int):
    """Compare lookup performance"""
    pairs = build_pairs(n)
    table = ChainedHashTable.from_pairs(pairs, max(1, n // 3))
    m = pmap()
    for k, v in pairs:
        m = pmultimap_insert(m, k, v)

    lookup_keys = list(range(0, n // 3, max(1, n // 3000)))

    print(f"=== Lookup Test (n={n:,}, {len(lookup_keys)} lookups) ===")

    def ours():
        for k in lookup_keys:
            _ = table.search(k)

    def theirs():
        for k in lookup_keys:
            _ = m.get(k)

    print_comparison(ours, theirs)


def compare_iteration(n: int):
    """Compare iteration over every key and its values"""
    pairs = build_pairs(n)
    table = ChainedHashTable.from_pairs(pairs, max(1, n // 3))
    m = pmap()
    for k, v in pairs:
        m = pmultimap_insert(m, k, v)

    print(f"=== Iteration Test (n={n:,}) ===")

    def ours():
        for k, vs in table.items():
            for v in vs:
                pass

    def theirs():
        for k, vs in m.items():
            for v in vs:
                pass

    print_comparison(ours, theirs)


def main():
    print_section("PYCHAINED vs PYRSISTENT - MULTIMAP PERFORMANCE COMPARISON")
    print("pychained:  mutable separate-chaining table, FIFO of values per key")
    print("pyrsistent: PMap of PVectors, rebuilt on every insert")
    print()

    test_sizes = [300, 3_000, 30_000]

    for n in test_sizes:
        print_section(f"TESTING WITH {n:,} VALUES")
        compare_build(n)
        compare_lookup(n)
        compare_iteration(n)


if __name__ == "__main__":
    main()
