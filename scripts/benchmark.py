#!/usr/bin/env python3
"""
Benchmark Script for MiniDB

Measures command throughput of the executor in-process, without any
console I/O. Useful for profiling the tokenizer and store.

Usage:
    python scripts/benchmark.py                    # Run all benchmarks
    python scripts/benchmark.py --operations 10000 # Custom operation count
    python scripts/benchmark.py --profile          # Enable cProfile
"""

import argparse
import os
import random
import statistics
import string
import sys
import time
from typing import Any, Callable, Dict, List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from minidb.protocol.executor import Executor
from minidb.protocol.tokenizer import tokenize


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
    """Collection of benchmarks for MiniDB commands."""

    def __init__(self, operations: int = 10000, key_size: int = 16, value_size: int = 64):
        self.operations = operations
        self.key_size = key_size
        self.value_size = value_size

        # Pre-generate test data
        self.keys = [random_string(key_size) for _ in range(operations)]
        self.values = [random_string(value_size) for _ in range(operations)]

    def _timed(self, label: str, run: Callable) -> Dict[str, Any]:
        stats = measure_time(run)
        stats["ops_per_second"] = self.operations / max(stats["total_ms"] / 1000, 1e-9)
        stats["operation"] = label
        stats["count"] = self.operations
        return stats

    def benchmark_store(self) -> Dict[str, Any]:
        """Benchmark STORE to new keys."""
        executor = Executor()
        commands = [f"STORE {k} {v}" for k, v in zip(self.keys, self.values)]

        def run():
            for cmd in commands:
                executor.execute(cmd)

        return self._timed("STORE (new key)", run)

    def benchmark_store_append(self) -> Dict[str, Any]:
        """Benchmark STORE repeatedly appending to one key's list."""
        executor = Executor()
        commands = [f"STORE hot {v}" for v in self.values]

        def run():
            for cmd in commands:
                executor.execute(cmd)

        return self._timed("STORE (append)", run)

    def benchmark_store_number(self) -> Dict[str, Any]:
        """Benchmark STORE with numeric coercion."""
        executor = Executor()
        commands = [f"STORE {k} {random.uniform(-1e6, 1e6)}" for k in self.keys]

        def run():
            for cmd in commands:
                executor.execute(cmd)

        return self._timed("STORE (number)", run)

    def benchmark_get(self) -> Dict[str, Any]:
        """Benchmark GET operations (hits)."""
        executor = Executor()
        for k, v in zip(self.keys, self.values):
            executor.execute(f"STORE {k} {v}")
        commands = [f"GET {k}" for k in self.keys]

        def run():
            for cmd in commands:
                executor.execute(cmd)

        return self._timed("GET (hit)", run)

    def benchmark_get_miss(self) -> Dict[str, Any]:
        """Benchmark GET operations (misses take the error path)."""
        executor = Executor()
        commands = [f"GET {random_string(self.key_size)}" for _ in range(self.operations)]

        def run():
            for cmd in commands:
                executor.execute(cmd)

        return self._timed("GET (miss)", run)

    def benchmark_tokenize(self) -> Dict[str, Any]:
        """Benchmark tokenizing quoted commands."""
        commands = [
            f'STORE {self.keys[i]} "{self.values[i][:8]} {self.values[i][8:]}"'
            for i in range(self.operations)
        ]

        def run():
            for cmd in commands:
                tokenize(cmd)

        return self._timed("Tokenize (quoted)", run)

    def benchmark_mixed_workload(self) -> Dict[str, Any]:
        """Benchmark mixed STORE/GET workload (50/50)."""
        executor = Executor()
        half = max(self.operations // 2, 1)

        for key, value in zip(self.keys[:half], self.values[:half]):
            executor.execute(f"STORE {key} {value}")

        commands = [
            f"STORE {self.keys[i]} {self.values[i]}" if i % 2 == 0
            else f"GET {self.keys[i % half]}"
            for i in range(self.operations)
        ]

        def run():
            for cmd in commands:
                executor.execute(cmd)

        return self._timed("Mixed (50% STORE, 50% GET)", run)

    def run_all(self) -> List[Dict[str, Any]]:
        """Run every benchmark_* method and collect its stats."""
        results = []
        for func in (
            self.benchmark_store,
            self.benchmark_store_append,
            self.benchmark_store_number,
            self.benchmark_get,
            self.benchmark_get_miss,
            self.benchmark_tokenize,
            self.benchmark_mixed_workload,
        ):
            result = func()
            print(f"  {result['operation']:<28} {result['ops_per_second']:>14,.0f} ops/sec")
            results.append(result)

        return results


def summarize(results: List[Dict[str, Any]]) -> str:
    """Summarize total operations, time and throughput in one line."""
    total_ops = sum(r["count"] for r in results)
    total_seconds = sum(r["total_ms"] for r in results) / 1000
    return (
        f"{total_ops:,} commands in {total_seconds:.2f}s "
        f"({total_ops / max(total_seconds, 1e-9):,.0f} ops/sec overall)"
    )


def positive_int(text: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(text)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark MiniDB command execution",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("-n", "--operations", type=positive_int, default=10000,
                        help="Commands per benchmark")
    parser.add_argument("--key-size", type=positive_int, default=16, help="Key length")
    parser.add_argument("--value-size", type=positive_int, default=64, help="Value length")
    parser.add_argument("--profile", action="store_true", help="Profile the run with cProfile")
    args = parser.parse_args(argv)

    benchmark = Benchmark(args.operations, args.key_size, args.value_size)
    print(f"MiniDB benchmark: {args.operations:,} commands per test "
          f"(keys {args.key_size} chars, values {args.value_size} chars)")

    if not args.profile:
        print(summarize(benchmark.run_all()))
        return

    import cProfile
    import pstats

    profiler = cProfile.Profile()
    results = profiler.runcall(benchmark.run_all)
    print(summarize(results))
    pstats.Stats(profiler).sort_stats("cumulative").print_stats(20)


if __name__ == "__main__":
    main()
