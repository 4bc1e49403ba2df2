#!/usr/bin/env python3
"""
Benchmark Script for chain-dict

Measures the performance of the Dictionary operations and shows how keys
spread over the buckets. Since the table never grows, throughput drops as
chains get longer; try different --table-size values to see the effect.

Usage:
    python scripts/benchmark.py                    # Run all benchmarks
    python scripts/benchmark.py --operations 10000 # Custom operation count
    python scripts/benchmark.py --table-size 1009  # Custom bucket count
    python scripts/benchmark.py --profile          # Enable cProfile
"""

import argparse
import time
import random
import string
import statistics
from typing import List, Callable, Dict, Any
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from chaindict.config.settings import settings
from chaindict.table.dictionary import Dictionary
from chaindict.protocol.parser import ProtocolParser


def random_string(length: int) -> str:
    """Generate a random alphanumeric string."""
    return ''.join(random.choices(string.ascii_letters + string.digits, k=length))


def measure_time(func: Callable, iterations: int = 1) -> Dict[str, float]:
    """Measure execution time statistics."""
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = (time.perf_counter() - start) * 1000  # Convert to ms
        times.append(elapsed)

    return {
        "min_ms": min(times),
        "max_ms": max(times),
        "mean_ms": statistics.mean(times),
        "median_ms": statistics.median(times),
        "total_ms": sum(times),
    }


class Benchmark:
    """Collection of benchmarks for chain-dict components."""

    def __init__(self, operations: int = 10000, key_size: int = 16,
                 value_size: int = 64, table_size: int = None):
        self.operations = operations
        self.key_size = key_size
        self.value_size = value_size
        self.table_size = table_size

        # Pre-generate test data
        self.keys = [random_string(key_size) for _ in range(operations)]
        self.values = [random_string(value_size) for _ in range(operations)]

    def _populated(self, count: int = None) -> Dictionary:
        dictionary = Dictionary(table_size=self.table_size)
        for i in range(count if count is not None else self.operations):
            dictionary.put(self.keys[i], self.values[i])
        return dictionary

    def _finish(self, stats: Dict[str, Any], operation: str) -> Dict[str, Any]:
        stats["ops_per_second"] = self.operations / (stats["total_ms"] / 1000)
        stats["operation"] = operation
        stats["count"] = self.operations
        return stats

    def benchmark_put(self) -> Dict[str, Any]:
        """Benchmark PUT operations (all new keys)."""
        dictionary = Dictionary(table_size=self.table_size)

        def run():
            for i in range(self.operations):
                dictionary.put(self.keys[i], self.values[i])

        return self._finish(measure_time(run), "PUT")

    def benchmark_update(self) -> Dict[str, Any]:
        """Benchmark PUT operations on existing keys."""
        dictionary = self._populated()

        def run():
            for i in range(self.operations):
                dictionary.put(self.keys[i], self.values[-i - 1])

        return self._finish(measure_time(run), "PUT (update)")

    def benchmark_get(self) -> Dict[str, Any]:
        """Benchmark GET operations (hits)."""
        dictionary = self._populated()

        def run():
            for i in range(self.operations):
                dictionary.get(self.keys[i])

        return self._finish(measure_time(run), "GET (hit)")

    def benchmark_get_miss(self) -> Dict[str, Any]:
        """Benchmark GET operations (misses, full chain scans)."""
        dictionary = self._populated()
        miss_keys = [random_string(self.key_size + 1) for _ in range(self.operations)]

        def run():
            for key in miss_keys:
                dictionary.get(key)

        return self._finish(measure_time(run), "GET (miss)")

    def benchmark_replace(self) -> Dict[str, Any]:
        """Benchmark REPLACE operations (half present, half absent)."""
        dictionary = self._populated(self.operations // 2)

        def run():
            for i in range(self.operations):
                dictionary.replace(self.keys[i], self.values[i])

        return self._finish(measure_time(run), "REPLACE (50% hit)")

    def benchmark_clear(self) -> Dict[str, Any]:
        """Benchmark releasing a fully populated table."""
        dictionary = self._populated()

        stats = measure_time(dictionary.clear)
        return self._finish(stats, "CLEAR (per entry)")

    def benchmark_protocol_parse(self) -> Dict[str, Any]:
        """Benchmark console command parsing."""
        parser = ProtocolParser()
        commands = [
            f"PUT {self.keys[i]} {self.values[i]}"
            for i in range(self.operations)
        ]

        def run():
            for cmd in commands:
                parser.parse_request(cmd)

        return self._finish(measure_time(run), "Protocol Parse")

    def run_all(self) -> List[Dict[str, Any]]:
        """Run all benchmarks."""
        benchmarks = [
            ("PUT", self.benchmark_put),
            ("PUT (update)", self.benchmark_update),
            ("GET (hit)", self.benchmark_get),
            ("GET (miss)", self.benchmark_get_miss),
            ("REPLACE", self.benchmark_replace),
            ("CLEAR", self.benchmark_clear),
            ("Protocol parse", self.benchmark_protocol_parse),
        ]

        results = []
        for name, func in benchmarks:
            print(f"Running: {name}...", end=" ", flush=True)
            result = func()
            print(f"{result['ops_per_second']:,.0f} ops/sec")
            results.append(result)

        return results


def print_results(results: List[Dict[str, Any]]):
    """Print benchmark results in a table."""
    print()
    print("=" * 70)
    print("                        BENCHMARK RESULTS")
    print("=" * 70)
    print(f"{'Operation':<30} {'Ops/sec':>12} {'Mean (ms)':>12} {'Total (ms)':>12}")
    print("-" * 70)

    for r in results:
        print(f"{r['operation']:<30} {r['ops_per_second']:>12,.0f} "
              f"{r['mean_ms']:>12.3f} {r['total_ms']:>12.1f}")

    print("=" * 70)

    # Summary
    total_ops = sum(r['count'] for r in results)
    total_time = sum(r['total_ms'] for r in results)
    avg_ops = total_ops / (total_time / 1000)

    print()
    print(f"Total operations: {total_ops:,}")
    print(f"Total time: {total_time / 1000:.2f} seconds")
    print(f"Average throughput: {avg_ops:,.0f} ops/sec")


def print_distribution(benchmark: Benchmark):
    """Print how the benchmark keys spread over the buckets."""
    dictionary = benchmark._populated()
    stats = dictionary.get_stats()
    lengths = dictionary.chain_lengths()

    print()
    print("Bucket distribution")
    print("-" * 70)
    print(f"Keys: {stats['total_keys']:,}  Buckets: {stats['table_size']:,}  "
          f"Load factor: {stats['load_factor']:.2f}")
    print(f"Empty buckets: {stats['empty_buckets']:,}  "
          f"Longest chain: {stats['longest_chain']:,}  "
          f"Shortest chain: {min(lengths):,}")
    if len(lengths) > 1:
        print(f"Chain length stdev: {statistics.pstdev(lengths):.2f}")


def parse_args(argv: List[str] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Benchmark chain-dict components",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--operations", "-n",
        type=int,
        default=10000,
        help="Number of operations per benchmark"
    )
    parser.add_argument(
        "--key-size",
        type=int,
        default=16,
        help="Size of keys"
    )
    parser.add_argument(
        "--value-size",
        type=int,
        default=64,
        help="Size of values"
    )
    parser.add_argument(
        "--table-size",
        type=int,
        default=settings.TABLE_SIZE,
        help="Number of buckets"
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Enable cProfile profiling"
    )

    return parser.parse_args(argv)


def main():
    args = parse_args()

    print(f"chain-dict Benchmark")
    print(f"====================")
    print(f"Operations per test: {args.operations:,}")
    print(f"Key size: {args.key_size}")
    print(f"Value size: {args.value_size}")
    print(f"Table size: {args.table_size}")
    print()

    benchmark = Benchmark(
        operations=args.operations,
        key_size=args.key_size,
        value_size=args.value_size,
        table_size=args.table_size,
    )

    if args.profile:
        import cProfile
        import pstats

        profiler = cProfile.Profile()
        profiler.enable()
        results = benchmark.run_all()
        profiler.disable()

        print_results(results)

        print()
        print("Profiling Results (top 20):")
        print("-" * 70)
        stats = pstats.Stats(profiler)
        stats.sort_stats('cumulative')
        stats.print_stats(20)
    else:
        results = benchmark.run_all()
        print_results(results)

    print_distribution(benchmark)


if __name__ == "__main__":
    main()
